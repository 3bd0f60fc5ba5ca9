"""Per-descriptor pipeline and the primary/manual dataset merge."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Set

from .classifier import classify
from .collector import collect
from .config import GeneratorConfig
from .emitter import Emitter, GeneratedOutput
from .logging import get_logger
from .models import ClassifiedIcon, CompileReport, IconDescriptor
from .sanitizer import sanitize_name

PRIMARY = "primary"
MANUAL = "manual"


class IconCompiler:
    """Compiles descriptor datasets into generated Rust source.

    An instance owns its dedup-key set and output buffers and serves exactly
    one run. Primary descriptors are processed before manual ones, so a manual
    entry whose dedup key was already accepted is dropped instead of overriding.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()
        self.logger = get_logger("compiler")
        self._known: Set[str] = set()
        self._emitter = Emitter(self.config)
        self._report = CompileReport()
        self._used = False

    @property
    def report(self) -> CompileReport:
        return self._report

    def run(self, primary: Any, manual: Any = None) -> GeneratedOutput:
        """Compile the primary dataset, then fill gaps from the manual one.

        Any ``ConfigurationError`` or ``ValidationError`` propagates before
        anything is rendered.
        """
        if self._used:
            raise RuntimeError("IconCompiler instances are single-use; create a new one per run")
        self._used = True

        self._process_dataset(PRIMARY, collect(primary))
        if manual is not None:
            self._process_dataset(MANUAL, collect(manual))

        self.logger.info(
            "Generated %d icon variants (dedup key: %s)",
            len(self._emitter),
            self.config.dedup_key,
        )
        return self._emitter.finalize()

    def process(self, descriptor: IconDescriptor, source: str = PRIMARY) -> Optional[ClassifiedIcon]:
        """Run one descriptor through dedup, classify, sanitize and emit.

        Returns the accepted icon, or None when the descriptor was skipped.
        """
        stats = self._report.stats(source)
        if not descriptor.identity_key:
            stats.skipped_missing_key += 1
            self.logger.debug("Skipping %s descriptor without identity key: %r", source, descriptor)
            return None

        key = self._dedup_key(descriptor)
        if key in self._known:
            stats.skipped_duplicate += 1
            self.logger.debug("Skipping duplicate %s icon %r", source, key)
            return None
        self._known.add(key)

        icon = classify_descriptor(descriptor, self.config, source=source)
        self._emitter.add(icon)
        stats.accepted += 1
        return icon

    def _process_dataset(self, source: str, descriptors: Iterable[IconDescriptor]) -> None:
        for descriptor in descriptors:
            self.process(descriptor, source)
        stats = self._report.stats(source)
        self.logger.debug(
            "%s dataset: %d accepted, %d duplicates, %d without key",
            source,
            stats.accepted,
            stats.skipped_duplicate,
            stats.skipped_missing_key,
        )

    def _dedup_key(self, descriptor: IconDescriptor) -> str:
        if self.config.dedup_key == "display":
            return descriptor.display_name
        return descriptor.identity_key or ""


def classify_descriptor(
    descriptor: IconDescriptor,
    config: GeneratorConfig,
    *,
    source: str = PRIMARY,
) -> ClassifiedIcon:
    """Pure classification of one descriptor into a new immutable record."""
    if not descriptor.identity_key:
        raise ValueError("descriptor has no identity key")
    classification = classify(descriptor.style_tag, descriptor.identity_key, config)
    return ClassifiedIcon(
        identifier=sanitize_name(descriptor.display_name),
        usage_note=descriptor.usage_note,
        family=classification.family,
        feature=classification.feature,
        rendered_class=classification.rendered_class,
        source=source,
    )


def compile_icons(
    primary: Any,
    manual: Any = None,
    config: GeneratorConfig | None = None,
) -> GeneratedOutput:
    """Run a fresh compiler over the given datasets."""
    return IconCompiler(config).run(primary, manual)


__all__ = ["IconCompiler", "MANUAL", "PRIMARY", "classify_descriptor", "compile_icons"]
