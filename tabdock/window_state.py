"""State of a floating window surface."""

from __future__ import annotations

from .geometry import Pos2, Rect, Vec2


class WindowState:
    """Where a window surface sits and what it should become next frame.

    Doubles as a handle allowing callers to move and resize the window.
    """

    __slots__ = ("_screen_rect", "_dragged", "_next_position", "_next_size", "_new")

    def __init__(self) -> None:
        self._screen_rect: Rect = Rect.nothing()
        self._dragged = False
        self._next_position: Pos2 | None = None
        self._next_size: Vec2 | None = None
        self._new = True

    def __repr__(self) -> str:
        return (
            f"WindowState(rect={self._screen_rect!r}, dragged={self._dragged!r}, "
            f"next_position={self._next_position!r}, next_size={self._next_size!r})"
        )

    def set_position(self, position: Pos2) -> WindowState:
        """Request the window be moved to ``position`` on the next frame."""
        self._next_position = position
        return self

    def set_size(self, size: Vec2) -> WindowState:
        """Request the window be resized to ``size`` on the next frame."""
        self._next_size = size
        return self

    def rect(self) -> Rect:
        """Return the rectangle last occupied; ``Rect.nothing()`` if never shown."""
        return self._screen_rect

    def dragged(self) -> bool:
        """Return whether the window was being dragged in the last frame."""
        return self._dragged

    def take_next_position(self) -> Pos2 | None:
        """Return the pending position request and clear it."""
        position, self._next_position = self._next_position, None
        return position

    def take_next_size(self) -> Vec2 | None:
        """Return the pending size request and clear it."""
        size, self._next_size = self._next_size, None
        return size