"""Configuration loading for icongen (.icongen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

from .errors import ConfigurationError

CONFIG_FILENAME = ".icongen.yml"

DEDUP_KEYS: Tuple[str, ...] = ("identity", "display")
PF_TAGS: Tuple[str, ...] = ("pf-icon", "pficon")
BASE_DERIVES: Tuple[str, ...] = ("Copy", "Clone", "Debug", "PartialEq", "Eq")
STRUM_DERIVES: Tuple[str, ...] = (
    "strum_macros::EnumIter",
    "strum_macros::EnumMessage",
    "strum_macros::AsRefStr",
)


@dataclass(frozen=True)
class GeneratorConfig:
    """Policy knobs for one compiler run.

    ``dedup_key`` selects which descriptor field decides that two records are
    the same icon: the identity key by default, or the display name.
    ``pf_prefix`` is prepended to the class name of icons in the ``pf``
    family; an empty prefix leaves the class name untouched.
    """

    dedup_key: str = "identity"
    pf_prefix: str = "pf-v5"
    pf_tag: str = "pficon"
    derive_traits: Tuple[str, ...] = STRUM_DERIVES
    enum_name: str = "Icon"
    classes_trait: str = "crate::core::AsClasses"
    classes_method: str = "extend_classes"

    def __post_init__(self) -> None:
        if self.dedup_key not in DEDUP_KEYS:
            raise ConfigurationError(
                f"dedup_key must be one of {', '.join(DEDUP_KEYS)}, got {self.dedup_key!r}"
            )
        if self.pf_tag not in PF_TAGS:
            raise ConfigurationError(f"pf tag must be one of {', '.join(PF_TAGS)}, got {self.pf_tag!r}")
        if not self.enum_name.isidentifier():
            raise ConfigurationError(f"enum_name must be an identifier, got {self.enum_name!r}")
        if not self.classes_method.isidentifier():
            raise ConfigurationError(f"classes_method must be an identifier, got {self.classes_method!r}")

    @property
    def derives(self) -> List[str]:
        """Full derive list for the generated enum, base traits first."""
        result = list(BASE_DERIVES)
        for trait in self.derive_traits:
            if trait not in result:
                result.append(trait)
        return result

    def with_overrides(self, **values: Any) -> "GeneratorConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in values.items() if value is not None}
        if "derive_traits" in changes:
            changes["derive_traits"] = tuple(changes["derive_traits"])
        return replace(self, **changes)


GENERATIONS: Dict[str, GeneratorConfig] = {
    "legacy": GeneratorConfig(
        dedup_key="identity",
        pf_prefix="",
        pf_tag="pf-icon",
        derive_traits=(),
        classes_trait="crate::utils::AsClasses",
        classes_method="extend",
    ),
    "current": GeneratorConfig(),
}

DEFAULT_GENERATION = "current"


def generation_config(name: str) -> GeneratorConfig:
    """Return the preset for a named generator generation."""
    try:
        return GENERATIONS[name]
    except KeyError:
        known = ", ".join(sorted(GENERATIONS))
        raise ConfigurationError(f"Unknown generation {name!r}; expected one of {known}") from None


@dataclass
class ProjectConfig:
    """Represents the settings defined in .icongen.yml."""

    root: Path
    generation: str = DEFAULT_GENERATION
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    primary: Optional[Path] = None
    manual: Optional[Path] = None


def load_config(config_path: Path) -> ProjectConfig:
    """Load configuration from disk, falling back to the current preset."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ProjectConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    generation = _as_str(data.get("generation")) or DEFAULT_GENERATION
    base = generation_config(generation)

    pf_data = _as_dict(data.get("pf"))
    derive = data.get("derive")
    generator = base.with_overrides(
        dedup_key=_as_str(data.get("dedup_key")),
        pf_prefix=_as_str(pf_data.get("prefix")) if "prefix" in pf_data else None,
        pf_tag=_as_str(pf_data.get("tag")),
        derive_traits=_as_str_list(derive) if derive is not None else None,
        enum_name=_as_str(data.get("enum_name")),
        classes_trait=_as_str(data.get("classes_trait")),
        classes_method=_as_str(data.get("classes_method")),
    )

    datasets = _as_dict(data.get("datasets"))
    primary = _as_str(datasets.get("primary"))
    manual = _as_str(datasets.get("manual"))

    return ProjectConfig(
        root=root,
        generation=generation,
        generator=generator,
        primary=root / primary if primary else None,
        manual=root / manual if manual else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_GENERATION",
    "GENERATIONS",
    "GeneratorConfig",
    "ProjectConfig",
    "generation_config",
    "load_config",
]
