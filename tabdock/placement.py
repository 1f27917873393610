"""Directions for splitting nodes and destinations for moving tabs."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from .geometry import Rect
from .indices import NodeIndex, SurfaceIndex, TabIndex


class Split(enum.Enum):
    """Where a new node is placed relative to the node being split."""

    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"
    BELOW = "below"

    def is_top_bottom(self) -> bool:
        """Return True for a vertical split (above or below)."""
        return self in (Split.ABOVE, Split.BELOW)

    def is_left_right(self) -> bool:
        """Return True for a horizontal split (left or right)."""
        return self in (Split.LEFT, Split.RIGHT)


@dataclass(frozen=True)
class InsertSplit:
    """Insert a tab by splitting the target node in ``split`` direction."""

    split: Split


@dataclass(frozen=True)
class InsertAt:
    """Insert a tab at position ``index`` of the target node."""

    index: TabIndex


@dataclass(frozen=True)
class Append:
    """Append a tab to the end of the target node."""


TabInsert = Union[InsertSplit, InsertAt, Append]


@dataclass(frozen=True)
class ToWindow:
    """Move a tab into a new window occupying ``rect``."""

    rect: Rect

    def is_window(self) -> bool:
        """Return True: this destination is a window."""
        return True


@dataclass(frozen=True)
class ToNode:
    """Move a tab into an existing node using ``insert``."""

    surface: SurfaceIndex
    node: NodeIndex
    insert: TabInsert

    def is_window(self) -> bool:
        """Return False: this destination is an existing node."""
        return False


@dataclass(frozen=True)
class ToEmptySurface:
    """Move a tab onto a surface whose tree is empty."""

    surface: SurfaceIndex

    def is_window(self) -> bool:
        """Return False: this destination is an existing surface."""
        return False


TabDestination = Union[ToWindow, ToNode, ToEmptySurface]