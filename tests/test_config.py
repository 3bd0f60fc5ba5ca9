"""Tests for icongen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from icongen.config import (
    GENERATIONS,
    STRUM_DERIVES,
    GeneratorConfig,
    ProjectConfig,
    generation_config,
    load_config,
)
from icongen.errors import ConfigurationError


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ProjectConfig)
    assert config.root == tmp_path.resolve()
    assert config.generation == "current"
    assert config.generator == GENERATIONS["current"]
    assert config.primary is None
    assert config.manual is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".icongen.yml"
    config_file.write_text(
        """
generation: legacy
dedup_key: display
pf:
  prefix: "pf-v4"
derive:
  - strum_macros::EnumIter
enum_name: LegacyIcon
classes_trait: crate::AsClasses
classes_method: apply_classes
datasets:
  primary: generator/icons.json
  manual: generator/icons.manual.yml
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.generation == "legacy"
    generator = config.generator
    assert generator.dedup_key == "display"
    assert generator.pf_prefix == "pf-v4"
    assert generator.pf_tag == "pf-icon"
    assert generator.derive_traits == ("strum_macros::EnumIter",)
    assert generator.enum_name == "LegacyIcon"
    assert generator.classes_trait == "crate::AsClasses"
    assert generator.classes_method == "apply_classes"
    assert config.primary == tmp_path.resolve() / "generator" / "icons.json"
    assert config.manual == tmp_path.resolve() / "generator" / "icons.manual.yml"


def test_load_config_empty_prefix_disables_prefixing(tmp_path: Path) -> None:
    (tmp_path / ".icongen.yml").write_text('pf:\n  prefix: ""\n  tag: pficon\n', encoding="utf-8")

    generator = load_config(tmp_path).generator

    assert generator.pf_prefix == ""
    assert generator.pf_tag == "pficon"


def test_load_config_rejects_invalid_values(tmp_path: Path) -> None:
    (tmp_path / ".icongen.yml").write_text("dedup_key: checksum\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(tmp_path)


def test_load_config_rejects_unknown_generation(tmp_path: Path) -> None:
    (tmp_path / ".icongen.yml").write_text("generation: future\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Unknown generation"):
        load_config(tmp_path)


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".icongen.yml").write_text("- legacy\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(tmp_path)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".icongen.yml").write_text("pf: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        load_config(tmp_path)


def test_generation_presets_differ_on_policy_knobs() -> None:
    legacy = generation_config("legacy")
    current = generation_config("current")

    assert (legacy.dedup_key, legacy.pf_prefix, legacy.pf_tag) == ("identity", "", "pf-icon")
    assert (current.dedup_key, current.pf_prefix, current.pf_tag) == ("identity", "pf-v5", "pficon")
    assert (current.classes_trait, current.classes_method) == ("crate::core::AsClasses", "extend_classes")
    assert (legacy.classes_trait, legacy.classes_method) == ("crate::utils::AsClasses", "extend")
    assert GeneratorConfig().dedup_key == "identity"
    assert current.derive_traits == STRUM_DERIVES
    assert legacy.derives == ["Copy", "Clone", "Debug", "PartialEq", "Eq"]


def test_with_overrides_ignores_none_and_converts_derives() -> None:
    config = GeneratorConfig().with_overrides(pf_prefix=None, derive_traits=["Hash", "Copy"])

    assert config.pf_prefix == "pf-v5"
    assert config.derive_traits == ("Hash", "Copy")
    assert config.derives == ["Copy", "Clone", "Debug", "PartialEq", "Eq", "Hash"]


def test_generator_config_validates_enum_name() -> None:
    with pytest.raises(ConfigurationError):
        GeneratorConfig(enum_name="not an ident")
    with pytest.raises(ConfigurationError):
        GeneratorConfig(classes_method="extend-classes")
