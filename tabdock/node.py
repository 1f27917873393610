"""Nodes of a dock tree: empty slots, tab-holding leaves and split parents."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass, field
from typing import Any

from .geometry import Rect
from .indices import TabIndex
from .placement import Split


class NodeKind(enum.Enum):
    """The variant of a :class:`Node`."""

    EMPTY = "empty"
    LEAF = "leaf"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass
class Node:
    """A single slot of a tree.

    Leaves carry ``tabs``, ``active``, ``viewport`` and ``scroll``; parents carry
    ``fraction``, the share taken by their first (left or top) child. Fields that
    do not apply to a kind are ``None``; an empty node has no ``rect``.
    """

    kind: NodeKind = NodeKind.EMPTY
    rect: Rect | None = None
    viewport: Rect | None = None
    tabs: list[Any] | None = None
    active: TabIndex | None = None
    scroll: float | None = None
    fraction: float | None = None

    @staticmethod
    def empty() -> Node:
        """Return an empty node."""
        return Node()

    @staticmethod
    def leaf(tab: Any) -> Node:
        """Return a leaf holding the single ``tab``."""
        return Node.leaf_with([tab])

    @staticmethod
    def leaf_with(tabs: Any) -> Node:
        """Return a leaf holding ``tabs``, with the first one active."""
        return Node(
            kind=NodeKind.LEAF,
            rect=Rect.nothing(),
            viewport=Rect.nothing(),
            tabs=list(tabs),
            active=TabIndex(0),
            scroll=0.0,
        )

    def set_rect(self, rect: Rect) -> None:
        """Set the area occupied by the node; empty nodes ignore this."""
        if self.kind is not NodeKind.EMPTY:
            self.rect = rect

    def is_empty(self) -> bool:
        """Return True if the node is empty."""
        return self.kind is NodeKind.EMPTY

    def is_leaf(self) -> bool:
        """Return True if the node is a leaf."""
        return self.kind is NodeKind.LEAF

    def is_horizontal(self) -> bool:
        """Return True if the node is a horizontal parent."""
        return self.kind is NodeKind.HORIZONTAL

    def is_vertical(self) -> bool:
        """Return True if the node is a vertical parent."""
        return self.kind is NodeKind.VERTICAL

    def is_parent(self) -> bool:
        """Return True if the node is a horizontal or vertical parent."""
        return self.is_horizontal() or self.is_vertical()

    def split(self, split: Split, fraction: float) -> Node:
        """Turn this node into a parent for ``split`` and return its former content.

        Raises ValueError if ``fraction`` is outside 0..=1.
        """
        if not 0.0 <= fraction <= 1.0:
            raise ValueError(f"fraction must be within 0..=1, got {fraction}")
        old = Node(
            kind=self.kind,
            rect=self.rect,
            viewport=self.viewport,
            tabs=self.tabs,
            active=self.active,
            scroll=self.scroll,
            fraction=self.fraction,
        )
        self.kind = NodeKind.HORIZONTAL if split.is_left_right() else NodeKind.VERTICAL
        self.rect = Rect.nothing()
        self.viewport = None
        self.tabs = None
        self.active = None
        self.scroll = None
        self.fraction = fraction
        return old

    def _leaf_tabs(self) -> list[Any]:
        if self.tabs is None or not self.is_leaf():
            raise ValueError("node was not a leaf")
        return self.tabs

    def append_tab(self, tab: Any) -> None:
        """Append ``tab`` and make it active. Raises ValueError on non-leaves."""
        tabs = self._leaf_tabs()
        self.active = TabIndex(len(tabs))
        tabs.append(tab)

    def insert_tab(self, index: TabIndex | int, tab: Any) -> None:
        """Insert ``tab`` at ``index`` and make it active.

        Raises ValueError on non-leaves and IndexError if ``index`` exceeds the tab count.
        """
        tabs = self._leaf_tabs()
        position = operator.index(index)
        if not 0 <= position <= len(tabs):
            raise IndexError(f"insertion index {position} out of range for {len(tabs)} tabs")
        tabs.insert(position, tab)
        self.active = TabIndex(position)

    def remove_tab(self, tab_index: TabIndex | int) -> Any | None:
        """Remove and return the tab at ``tab_index``; None if not a leaf.

        Raises IndexError if ``tab_index`` is out of bounds.
        """
        if self.tabs is None or not self.is_leaf():
            return None
        position = operator.index(tab_index)
        if not 0 <= position < len(self.tabs):
            raise IndexError(f"tab index {position} out of range for {len(self.tabs)} tabs")
        active = self.active.index if self.active is not None else 0
        if position <= active:
            self.active = TabIndex(max(active - 1, 0))
        return self.tabs.pop(position)

    def tabs_count(self) -> int:
        """Return the number of tabs; zero for non-leaves."""
        return len(self.tabs) if self.is_leaf() and self.tabs is not None else 0