"""CLI entrypoints for icongen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .classifier import describe_styles
from .compiler import IconCompiler
from .config import DEDUP_KEYS, GENERATIONS, PF_TAGS, GeneratorConfig, ProjectConfig, generation_config, load_config
from .datasets import load_dataset, load_manual_dataset
from .errors import IconGenError
from .logging import configure_logging, get_logger


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_generator_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .icongen.yml (defaults to the current directory).",
    )
    parser.add_argument(
        "--generation",
        choices=sorted(GENERATIONS),
        default=None,
        help="Start from a generator preset instead of the configured one.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="icongen",
        description="Compile icon descriptor datasets into a Rust icon enum.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write diagnostics, including skipped icons, to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Print the generated enum and class mapping to stdout.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_generator_options(generate_parser)
    generate_parser.add_argument(
        "primary",
        nargs="?",
        type=Path,
        default=None,
        help="Primary dataset (.json/.yml). Defaults to datasets.primary from the config.",
    )
    manual_group = generate_parser.add_mutually_exclusive_group()
    manual_group.add_argument(
        "--manual",
        type=Path,
        default=None,
        help="Manual dataset merged after the primary one (defaults to the bundled set).",
    )
    manual_group.add_argument(
        "--no-manual",
        action="store_true",
        help="Compile the primary dataset only.",
    )
    generate_parser.add_argument(
        "--dedup-key",
        choices=DEDUP_KEYS,
        default=None,
        help="Descriptor field used to detect duplicate icons.",
    )
    generate_parser.add_argument(
        "--pf-prefix",
        default=None,
        help="Class name prefix for pf icons; pass an empty string to disable.",
    )
    generate_parser.add_argument(
        "--pf-tag",
        choices=PF_TAGS,
        default=None,
        help="Spelling of the pf style tag accepted in the datasets.",
    )
    generate_parser.add_argument(
        "--derive",
        action="append",
        default=None,
        metavar="TRAIT",
        help="Extra derive for the enum (repeatable, replaces the configured list).",
    )

    styles_parser = subparsers.add_parser(
        "styles",
        help="Show the effective style classification table.",
    )
    _add_verbose_option(styles_parser, suppress_default=True)
    _add_generator_options(styles_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for icongen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        project = load_config(args.config or Path.cwd())
        generator = _resolve_generator(project, args)
    except IconGenError as exc:
        parser.exit(1, f"icongen: {exc}\n")

    if args.command == "generate":
        primary_path = args.primary or project.primary
        if primary_path is None:
            parser.exit(2, "icongen generate: a primary dataset path is required\n")
        try:
            primary = load_dataset(primary_path)
            if args.no_manual:
                manual = None
            else:
                manual = load_manual_dataset(args.manual or project.manual)
            output = IconCompiler(generator).run(primary, manual)
        except IconGenError as exc:
            logger.debug("Generation aborted", exc_info=True)
            parser.exit(1, f"icongen generate failed: {exc}\nNo output was generated.\n")
        sys.stdout.write(output.render())
    elif args.command == "styles":
        for line in describe_styles(generator):
            print(line)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _resolve_generator(project: ProjectConfig, args: argparse.Namespace) -> GeneratorConfig:
    generator = project.generator
    if args.generation:
        generator = generation_config(args.generation)
    return generator.with_overrides(
        dedup_key=getattr(args, "dedup_key", None),
        pf_prefix=getattr(args, "pf_prefix", None),
        pf_tag=getattr(args, "pf_tag", None),
        derive_traits=getattr(args, "derive", None),
    )


if __name__ == "__main__":
    main(sys.argv[1:])
