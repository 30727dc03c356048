"""Integer points on a plane and inclusive integer ranges."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates; y grows downwards."""

    x: int
    y: int

    @classmethod
    def origin(cls) -> Point:
        return cls(0, 0)

    @classmethod
    def up(cls) -> Point:
        return cls(0, -1)

    @classmethod
    def down(cls) -> Point:
        return cls(0, 1)

    @classmethod
    def left(cls) -> Point:
        return cls(-1, 0)

    @classmethod
    def right(cls) -> Point:
        return cls(1, 0)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Point:
        if not isinstance(factor, int):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)


@dataclass(frozen=True)
class Pair:
    """An inclusive range of integers from ``low`` to ``high``."""

    low: int
    high: int

    @classmethod
    def create_or_empty(cls, low: int, high: int) -> Pair | None:
        """Return the range, or None when ``high`` is below ``low``."""
        if high < low:
            return None
        return cls(low, high)

    @classmethod
    def ordered(cls, a: int, b: int) -> Pair:
        """Build a range from two bounds given in either order."""
        return cls(b, a) if a > b else cls(a, b)

    def as_tuple(self) -> tuple[int, int]:
        return (self.low, self.high)