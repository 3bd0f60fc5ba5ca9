"""Core data models shared across icongen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union


@dataclass(frozen=True)
class IconDescriptor:
    """Raw metadata for a single icon as authored in a dataset."""

    identity_key: Optional[str]
    style_tag: str = ""
    display_name: str = ""
    usage_note: str = ""
    category: Optional[str] = None


@dataclass(frozen=True)
class Classification:
    """Rendering family, feature gate and class name derived from a style tag."""

    family: str
    feature: Optional[str]
    rendered_class: str


@dataclass(frozen=True)
class ClassifiedIcon:
    """Accepted descriptor after classification and name sanitizing."""

    identifier: str
    usage_note: str
    family: str
    feature: Optional[str]
    rendered_class: str
    source: str = "primary"


@dataclass(frozen=True)
class Leaf:
    """Tree node holding exactly one descriptor."""

    descriptor: IconDescriptor

    @property
    def own_descriptors(self) -> Tuple[IconDescriptor, ...]:
        return (self.descriptor,)

    @property
    def children(self) -> Tuple["Node", ...]:
        return ()

    def iter_descriptors(self) -> Iterator[IconDescriptor]:
        yield self.descriptor


@dataclass(frozen=True)
class Group:
    """Tree node holding an ordered sequence of nested nodes."""

    children: Tuple["Node", ...] = ()

    @property
    def own_descriptors(self) -> Tuple[IconDescriptor, ...]:
        return ()

    def iter_descriptors(self) -> Iterator[IconDescriptor]:
        """Yield descriptors depth-first, left to right, at any nesting depth."""
        stack: List[Iterator[Node]] = [iter(self.children)]
        while stack:
            node = next(stack[-1], None)
            if node is None:
                stack.pop()
                continue
            yield from node.own_descriptors
            if node.children:
                stack.append(iter(node.children))


Node = Union[Leaf, Group]


@dataclass
class DatasetStats:
    """Per-dataset counters for a compiler run."""

    accepted: int = 0
    skipped_missing_key: int = 0
    skipped_duplicate: int = 0

    @property
    def seen(self) -> int:
        return self.accepted + self.skipped_missing_key + self.skipped_duplicate


@dataclass
class CompileReport:
    """Summary of what a compiler run accepted and skipped."""

    datasets: Dict[str, DatasetStats] = field(default_factory=dict)

    def stats(self, source: str) -> DatasetStats:
        return self.datasets.setdefault(source, DatasetStats())

    @property
    def accepted(self) -> int:
        return sum(stats.accepted for stats in self.datasets.values())
