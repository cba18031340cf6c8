"""Small geometry helpers shared across the game: vectors, rectangles and view sizes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

# How many tiles the screen shows
VIEW_WIDTH = 22
VIEW_HEIGHT = 14
TILE_SIZE = 16


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return float(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vec2:
        return cls(value, value)

    @staticmethod
    def _parts(other: Union[Vec2, float]) -> tuple[float, float]:
        if isinstance(other, Vec2):
            return other.x, other.y
        return other, other

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Union[Vec2, float]) -> Vec2:
        ox, oy = self._parts(other)
        return Vec2(self.x + ox, self.y + oy)

    __radd__ = __add__

    def __sub__(self, other: Union[Vec2, float]) -> Vec2:
        ox, oy = self._parts(other)
        return Vec2(self.x - ox, self.y - oy)

    def __mul__(self, other: Union[Vec2, float]) -> Vec2:
        ox, oy = self._parts(other)
        return Vec2(self.x * ox, self.y * oy)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Vec2, float]) -> Vec2:
        ox, oy = self._parts(other)
        return Vec2(self.x / ox, self.y / oy)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def floor(self) -> Vec2:
        return Vec2(float(math.floor(self.x)), float(math.floor(self.y)))

    def round(self) -> Vec2:
        return Vec2(_round_half_away(self.x), _round_half_away(self.y))

    def abs(self) -> Vec2:
        return Vec2(abs(self.x), abs(self.y))

    def max_element(self) -> float:
        return max(self.x, self.y)

    def clamp(self, low: Vec2, high: Vec2) -> Vec2:
        return Vec2(
            min(max(self.x, low.x), high.x),
            min(max(self.y, low.y), high.y),
        )


VIEW_SIZE = Vec2(VIEW_WIDTH * TILE_SIZE, VIEW_HEIGHT * TILE_SIZE)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_pos_size(cls, pos: Vec2, size: Vec2) -> Rect:
        return cls(pos.x, pos.y, size.x, size.y)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def point(self) -> Vec2:
        return Vec2(self.x, self.y)

    def size(self) -> Vec2:
        return Vec2(self.w, self.h)

    def contains(self, point: Vec2) -> bool:
        """Whether the point lies inside the rectangle, edges included."""
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def overlaps(self, other: Rect) -> bool:
        """Whether the two rectangles touch or intersect."""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top <= other.bottom
            and self.bottom >= other.top
        )

    def offset(self, by: Vec2) -> Rect:
        return Rect(self.x + by.x, self.y + by.y, self.w, self.h)

    def center(self) -> Vec2:
        return Vec2(self.x + self.w * 0.5, self.y + self.h * 0.5)


def approach_target(value: float, step: float, target: float) -> float:
    """Move value towards target by at most step, never overshooting."""
    if value < target:
        return min(value + step, target)
    if value > target:
        return max(value - step, target)
    return value