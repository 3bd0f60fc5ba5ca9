"""Exception hierarchy for icongen runs."""

from __future__ import annotations


class IconGenError(RuntimeError):
    """Base class for failures that abort a compiler run."""


class ConfigurationError(IconGenError):
    """Raised when generator policy or configuration cannot handle the input."""


class UnknownStyleError(ConfigurationError):
    """Raised when a descriptor carries a style tag outside the classification table."""

    def __init__(self, style_tag: str, identity_key: str | None = None) -> None:
        location = f" (icon {identity_key!r})" if identity_key else ""
        super().__init__(f"unknown icon style: {style_tag!r}{location}")
        self.style_tag = style_tag
        self.identity_key = identity_key


class ValidationError(IconGenError, ValueError):
    """Raised when a sanitized name is not a usable enum variant identifier."""

    def __init__(self, message: str, raw_name: str) -> None:
        super().__init__(message)
        self.raw_name = raw_name


class DatasetError(IconGenError):
    """Raised when a descriptor dataset cannot be read or has an invalid shape."""


__all__ = [
    "ConfigurationError",
    "DatasetError",
    "IconGenError",
    "UnknownStyleError",
    "ValidationError",
]
