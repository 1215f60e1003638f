"""Hierarchical grouping of brushes by their container segments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, TypeVar

from brushgen.brushes.models import BrushRecord

T = TypeVar("T")


@dataclass
class TreeItem(Generic[T]):
    """A named node holding child nodes and leaf values, both in insertion order."""

    name: str
    children: list[TreeItem[T]] = field(default_factory=list)
    values: list[T] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return not self.name

    def child(self, name: str) -> TreeItem[T] | None:
        for child in self.children:
            if child.name == name:
                return child
        return None

    def walk(self, path: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], TreeItem[T]]]:
        """Yield ``(path, node)`` pairs depth-first, parents before children."""
        yield path, self
        for child in self.children:
            yield from child.walk(path + (child.name,))


def build_brush_tree(brushes: Iterable[BrushRecord]) -> TreeItem[BrushRecord]:
    """Group brushes under nodes named after their container parts.

    Children and values keep first-seen order, so a name-sorted input gives
    a name-sorted tree. Duplicate names are not collapsed.
    """
    root: TreeItem[BrushRecord] = TreeItem("")

    for brush in brushes:
        current = root
        for part in brush.container_parts:
            child = current.child(part)
            if child is None:
                child = TreeItem(part)
                current.children.append(child)
            current = child
        current.values.append(brush)

    return root
