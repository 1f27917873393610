"""Minimal 2D geometry types used for window and node placement."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector, used for sizes and offsets."""

    x: float
    y: float

    @staticmethod
    def splat(value: float) -> Vec2:
        """Return a vector whose components are both ``value``."""
        return Vec2(value, value)

    def __mul__(self, factor: float) -> Vec2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)


Vec2.ZERO = Vec2(0.0, 0.0)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Pos2:
    """A position in screen coordinates."""

    x: float
    y: float

    def __add__(self, offset: Vec2) -> Pos2:
        if not isinstance(offset, Vec2):
            return NotImplemented
        return Pos2(self.x + offset.x, self.y + offset.y)

    def __sub__(self, other: Pos2 | Vec2) -> Vec2 | Pos2:
        if isinstance(other, Pos2):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, Vec2):
            return Pos2(self.x - other.x, self.y - other.y)
        return NotImplemented


Pos2.ZERO = Pos2(0.0, 0.0)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min: Pos2
    max: Pos2

    @staticmethod
    def nothing() -> Rect:
        """Return the inverted, infinitely empty rectangle that contains nothing."""
        return Rect(Pos2(math.inf, math.inf), Pos2(-math.inf, -math.inf))

    @staticmethod
    def from_min_size(min: Pos2, size: Vec2) -> Rect:  # noqa: A002
        """Build a rectangle from its top-left corner and its size."""
        return Rect(min, min + size)

    def size(self) -> Vec2:
        """Return the width and height of the rectangle."""
        return self.max - self.min

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y