"""Derives enum variant identifiers from display names."""

from __future__ import annotations

import re

from .errors import ValidationError

ICON_SUFFIX = "Icon"
PFICON_PREFIX = "Pficon"

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Strict and reserved Rust keywords.
RUST_KEYWORDS = frozenset(
    {
        "Self", "abstract", "as", "async", "await", "become", "box", "break", "const",
        "continue", "crate", "do", "dyn", "else", "enum", "extern", "false", "final",
        "fn", "for", "gen", "if", "impl", "in", "let", "loop", "macro", "match", "mod",
        "move", "mut", "override", "priv", "pub", "ref", "return", "self", "static",
        "struct", "super", "trait", "true", "try", "type", "typeof", "unsafe",
        "unsized", "use", "virtual", "where", "while", "yield", "_",
    }
)


def sanitize_name(raw: str, *, suffix: str = ICON_SUFFIX, prefix: str = PFICON_PREFIX) -> str:
    """Strip the decorative suffix, then the decorative prefix, and validate.

    ``"PficonSatelliteIcon"`` becomes ``"Satellite"``. Both strips are case
    sensitive and applied at most once.
    """
    name = raw
    if suffix and name.endswith(suffix):
        name = name[: -len(suffix)]
    if prefix and name.startswith(prefix):
        name = name[len(prefix):]

    if not name:
        raise ValidationError(f"Display name {raw!r} is empty after sanitizing", raw)
    if not _IDENTIFIER.match(name):
        raise ValidationError(f"Display name {raw!r} does not yield an identifier (got {name!r})", raw)
    if name in RUST_KEYWORDS:
        raise ValidationError(f"Display name {raw!r} yields the Rust keyword {name!r}", raw)
    return name


__all__ = ["ICON_SUFFIX", "PFICON_PREFIX", "RUST_KEYWORDS", "sanitize_name"]
