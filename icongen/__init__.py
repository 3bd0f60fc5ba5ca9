"""Build-time compiler that turns icon descriptor datasets into a Rust enum."""

from .compiler import IconCompiler, compile_icons
from .config import GeneratorConfig
from .errors import ConfigurationError, DatasetError, IconGenError, UnknownStyleError, ValidationError

__all__ = [
    "ConfigurationError",
    "DatasetError",
    "GeneratorConfig",
    "IconCompiler",
    "IconGenError",
    "UnknownStyleError",
    "ValidationError",
    "compile_icons",
]
