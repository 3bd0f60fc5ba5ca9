"""Turns raw, arbitrarily nested descriptor data into a flat descriptor sequence."""

from __future__ import annotations

from typing import Any, Iterator, List, Mapping, Optional, Sequence, Tuple

from .errors import DatasetError
from .models import Group, IconDescriptor, Leaf, Node

# Upstream dataset spelling first, snake_case aliases second.
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "identity_key": ("Name", "identity_key", "name"),
    "style_tag": ("Style", "style_tag", "style"),
    "display_name": ("React_name", "display_name", "react_name"),
    "usage_note": ("Contextual_usage", "usage_note", "usage"),
    "category": ("Type", "category", "type"),
}


def build_tree(raw: Any) -> Node:
    """Convert nested lists and mappings into ``Leaf``/``Group`` nodes.

    Records may be mappings, ``IconDescriptor`` instances or ready-made nodes.
    Nesting depth is not limited by the interpreter's recursion limit.
    """
    node = _as_node(raw)
    if node is not None:
        return node
    _require_sequence(raw)

    root: Optional[Group] = None
    stack: List[Tuple[Iterator[Any], List[Node]]] = [(iter(raw), [])]
    while stack:
        items, children = stack[-1]
        for item in items:
            node = _as_node(item)
            if node is not None:
                children.append(node)
                continue
            _require_sequence(item)
            stack.append((iter(item), []))
            break
        else:
            stack.pop()
            group = Group(tuple(children))
            if stack:
                stack[-1][1].append(group)
            else:
                root = group
    assert root is not None
    return root


def descriptor_from_mapping(record: Mapping[str, Any]) -> IconDescriptor:
    """Build a descriptor from a single raw record, ignoring unknown keys."""
    identity_key = _lookup(record, "identity_key")
    category = _lookup(record, "category")
    return IconDescriptor(
        identity_key=identity_key,
        style_tag=_lookup(record, "style_tag") or "",
        display_name=_lookup(record, "display_name") or "",
        usage_note=_lookup(record, "usage_note") or "",
        category=category,
    )


def flatten(node: Node) -> Iterator[IconDescriptor]:
    """Yield descriptors depth-first, left to right, at any nesting depth."""
    return node.iter_descriptors()


def collect(raw: Any) -> List[IconDescriptor]:
    """Flatten raw dataset content into an ordered list of descriptors."""
    return list(flatten(build_tree(raw)))


def _as_node(item: Any) -> Optional[Node]:
    if isinstance(item, (Leaf, Group)):
        return item
    if isinstance(item, IconDescriptor):
        return Leaf(item)
    if isinstance(item, Mapping):
        return Leaf(descriptor_from_mapping(item))
    return None


def _require_sequence(item: Any) -> None:
    if not isinstance(item, Sequence) or isinstance(item, (str, bytes)):
        raise DatasetError(f"Expected an icon record or a list of records, got {type(item).__name__}")


def _lookup(record: Mapping[str, Any], field_name: str) -> Optional[str]:
    for key in _FIELD_ALIASES[field_name]:
        if key in record:
            value = record[key]
            if value is None:
                return None
            if not isinstance(value, str):
                raise DatasetError(f"Field {key!r} must be a string, got {type(value).__name__}")
            return value
    return None


__all__ = ["build_tree", "collect", "descriptor_from_mapping", "flatten"]
