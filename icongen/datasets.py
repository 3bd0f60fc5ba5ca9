"""Reading descriptor datasets from JSON or YAML files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import DatasetError
from .logging import get_logger

MANUAL_DATASET = Path(__file__).with_name("data") / "icons.manual.json"

_logger = get_logger("datasets")


def load_dataset(path: Path) -> Any:
    """Load raw dataset content; a mapping with an ``icons`` key is unwrapped."""
    path = Path(path).expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DatasetError(f"Cannot read dataset {path}: {exc}") from exc

    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            data = json.loads(text)
        elif suffix in {".yml", ".yaml"}:
            data = yaml.safe_load(text)
        else:
            raise DatasetError(f"Unsupported dataset format for {path.name}; use .json, .yml or .yaml")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DatasetError(f"Failed to parse {path.name}: {exc}") from exc

    if isinstance(data, dict) and "icons" in data:
        data = data["icons"]
    if data is None:
        data = []
    _logger.debug("Loaded dataset %s", path)
    return data


def load_manual_dataset(path: Path | None = None) -> Any:
    """Load the manual dataset, defaulting to the one bundled with icongen."""
    return load_dataset(path or MANUAL_DATASET)


__all__ = ["MANUAL_DATASET", "load_dataset", "load_manual_dataset"]
