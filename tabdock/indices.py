"""Index types addressing nodes, tabs and surfaces."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class NodeIndex:
    """Position of a node inside a tree's implicit binary-heap layout.

    The root lives at 0; the children of ``n`` are at ``2n + 1`` and ``2n + 2``.
    """

    index: int

    def __index__(self) -> int:
        return self.index

    @staticmethod
    def root() -> NodeIndex:
        """Return the index of the root node."""
        return NodeIndex(0)

    def left(self) -> NodeIndex:
        """Return the index of the left child."""
        return NodeIndex(self.index * 2 + 1)

    def right(self) -> NodeIndex:
        """Return the index of the right child."""
        return NodeIndex(self.index * 2 + 2)

    def parent(self) -> NodeIndex | None:
        """Return the parent's index, or None for the root."""
        if self.index > 0:
            return NodeIndex((self.index - 1) // 2)
        return None

    def level(self) -> int:
        """Return the number of nodes from the root to this node, inclusive."""
        return (self.index + 1).bit_length()

    def is_left(self) -> bool:
        """Return True if this node is the left child of its parent."""
        return self.index % 2 != 0

    def is_right(self) -> bool:
        """Return True if this node is the right child of its parent."""
        return self.index % 2 == 0

    def children_at(self, level: int) -> range:
        """Return the slot indices of all descendants ``level`` levels down."""
        base = 1 << level
        return range((self.index + 1) * base - 1, (self.index + 2) * base - 1)

    def children_left(self, level: int) -> range:
        """Return the left half of :meth:`children_at` for ``level``."""
        base = 1 << level
        start = (self.index + 1) * base - 1
        return range(start, (self.index + 1) * base + base // 2 - 1)

    def children_right(self, level: int) -> range:
        """Return the right half of :meth:`children_at` for ``level``."""
        base = 1 << level
        return range((self.index + 1) * base + base // 2 - 1, (self.index + 2) * base - 1)


@dataclass(frozen=True, order=True)
class TabIndex:
    """Position of a tab inside a leaf node."""

    index: int

    def __index__(self) -> int:
        return self.index


@dataclass(frozen=True, order=True)
class SurfaceIndex:
    """Position of a surface inside a dock state."""

    index: int

    def __index__(self) -> int:
        return self.index

    @staticmethod
    def main() -> SurfaceIndex:
        """Return the index of the main surface."""
        return SurfaceIndex(0)

    def is_main(self) -> bool:
        """Return True if this is the main surface's index."""
        return self.index == SurfaceIndex.main().index