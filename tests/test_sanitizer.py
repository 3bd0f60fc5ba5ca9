"""Tests for icongen.sanitizer."""

from __future__ import annotations

import pytest

from icongen.errors import ValidationError
from icongen.sanitizer import sanitize_name


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("AngleDownIcon", "AngleDown"),
        ("PficonSatelliteIcon", "Satellite"),
        ("PficonTemplate", "Template"),
        ("OutlinedClockIcon", "OutlinedClock"),
        ("Bars", "Bars"),
        ("IconPicker", "IconPicker"),
        ("pficonSaveIcon", "pficonSave"),
    ],
)
def test_sanitize_name_strips_suffix_then_prefix(raw: str, expected: str) -> None:
    assert sanitize_name(raw) == expected


@pytest.mark.parametrize("raw", ["AngleDownIcon", "PficonSatelliteIcon", "CaretUpIcon", "Ban"])
def test_sanitize_name_is_idempotent(raw: str) -> None:
    once = sanitize_name(raw)

    assert sanitize_name(once) == once


@pytest.mark.parametrize("raw", ["", "Icon", "Pficon", "PficonIcon"])
def test_sanitize_name_rejects_empty_result(raw: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        sanitize_name(raw)

    assert excinfo.value.raw_name == raw


@pytest.mark.parametrize("raw", ["Arrow-RightIcon", "3dIcon", "Calendar AltIcon"])
def test_sanitize_name_rejects_non_identifiers(raw: str) -> None:
    with pytest.raises(ValidationError):
        sanitize_name(raw)


@pytest.mark.parametrize("raw", ["SelfIcon", "PficonselfIcon", "matchIcon", "PficonSelf"])
def test_sanitize_name_rejects_rust_keywords(raw: str) -> None:
    with pytest.raises(ValidationError, match="Rust keyword"):
        sanitize_name(raw)
