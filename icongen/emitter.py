"""Accumulates accepted icons and renders the Rust enum and its class mapping."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .config import GeneratorConfig
from .errors import ValidationError
from .models import ClassifiedIcon

_TEMPLATES_DIR = Path(__file__).with_name("templates")
ENUM_TEMPLATE = "enum.rs.j2"
IMPL_TEMPLATE = "impl.rs.j2"


@dataclass(frozen=True)
class VariantRecord:
    """One enum member: doc comment lines, optional feature guard, identifier."""

    identifier: str
    doc_lines: Tuple[str, ...]
    feature: Optional[str]


@dataclass(frozen=True)
class MatchArmRecord:
    """One classification arm mapping a variant to its rendered class."""

    identifier: str
    feature: Optional[str]
    family: str
    rendered_class: str


@dataclass(frozen=True)
class GeneratedOutput:
    """Finalized result of one compiler run."""

    type_definition_body: Tuple[VariantRecord, ...]
    classification_body: Tuple[MatchArmRecord, ...]
    type_definition: str
    classification: str

    def render(self) -> str:
        """Both blocks as a single source text, type definition first."""
        return f"{self.type_definition}\n\n{self.classification}\n"


class Emitter:
    """Collects variant and match-arm records in acceptance order."""

    def __init__(self, config: GeneratorConfig, templates_dir: Path | None = None) -> None:
        self.config = config
        self._env = _create_env(templates_dir)
        self._variants: List[VariantRecord] = []
        self._arms: List[MatchArmRecord] = []
        self._identifiers: Dict[str, str] = {}
        self._finalized = False

    def __len__(self) -> int:
        return len(self._variants)

    def add(self, icon: ClassifiedIcon) -> None:
        if self._finalized:
            raise RuntimeError("Emitter already finalized")
        previous = self._identifiers.get(icon.identifier)
        if previous is not None:
            raise ValidationError(
                f"Variant {icon.identifier!r} for {icon.rendered_class!r} collides with {previous!r}",
                icon.identifier,
            )
        self._identifiers[icon.identifier] = icon.rendered_class
        self._variants.append(
            VariantRecord(
                identifier=icon.identifier,
                doc_lines=doc_comment_lines(icon.usage_note),
                feature=icon.feature,
            )
        )
        self._arms.append(
            MatchArmRecord(
                identifier=icon.identifier,
                feature=icon.feature,
                family=icon.family,
                rendered_class=icon.rendered_class,
            )
        )

    def finalize(self) -> GeneratedOutput:
        """Render both blocks. May only be called once."""
        if self._finalized:
            raise RuntimeError("Emitter already finalized")
        self._finalized = True
        variants = tuple(self._variants)
        arms = tuple(self._arms)
        type_definition = self._env.get_template(ENUM_TEMPLATE).render(
            derives=self.config.derives,
            enum_name=self.config.enum_name,
            variants=variants,
        )
        classification = self._env.get_template(IMPL_TEMPLATE).render(
            classes_trait=self.config.classes_trait,
            classes_method=self.config.classes_method,
            enum_name=self.config.enum_name,
            arms=arms,
        )
        return GeneratedOutput(
            type_definition_body=variants,
            classification_body=arms,
            type_definition=type_definition,
            classification=classification,
        )


def doc_comment_lines(text: str) -> Tuple[str, ...]:
    """Render free text as ``///`` doc comment lines, one per input line."""
    lines = text.splitlines() or [""]
    return tuple(f"/// {line.rstrip()}" if line.strip() else "///" for line in lines)


def rust_str(value: object) -> str:
    """Escape a value for use inside a Rust string literal."""
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


def _create_env(templates_dir: Path | None) -> Environment:
    directories = []
    if templates_dir:
        directories.append(str(templates_dir))
    directories.append(str(_TEMPLATES_DIR))
    env = Environment(
        loader=FileSystemLoader(directories),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters["rust_str"] = rust_str
    return env


__all__ = [
    "Emitter",
    "GeneratedOutput",
    "MatchArmRecord",
    "VariantRecord",
    "doc_comment_lines",
    "rust_str",
]
