"""Point value type. No engine imports."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Point:
    """A 2D coordinate. (0, 0) is top-left, y grows downward."""

    x: float
    y: float

    @classmethod
    def of(cls, value: Any) -> Point:
        """Coerce a Point, an (x, y) pair or a length-2 array row."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[float, Point]) -> Point:
        if isinstance(other, Point):
            return Point(self.x * other.x, self.y * other.y)
        return Point(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def swapped(self) -> Point:
        return Point(self.y, self.x)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


CENTER = Point(0.5, 0.5)
