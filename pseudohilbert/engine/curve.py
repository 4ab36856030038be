"""An ordered pseudo-Hilbert point sequence of a given order."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import overload

import numpy as np
from numpy.typing import NDArray

from pseudohilbert.engine.registry import Quadrant
from pseudohilbert.utils.geometry import arc_lengths, bbox
from pseudohilbert.utils.point import Point


@dataclass
class Curve:
    """Points of an order-``order`` curve in traversal order."""

    order: int
    # (4**order)x2 array of (x, y)
    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))

    def __len__(self) -> int:
        return len(self.points)

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> NDArray[np.float64]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.points[index]
        x, y = self.points[index]
        return Point(float(x), float(y))

    def __iter__(self) -> Iterator[Point]:
        for x, y in self.points.tolist():
            yield Point(x, y)

    def __array__(self, dtype=None, copy=None) -> NDArray[np.float64]:
        if dtype is None or np.dtype(dtype) == self.points.dtype:
            return self.points.copy() if copy else self.points
        if copy is False:
            raise ValueError(f"Cannot convert curve points to {np.dtype(dtype)} without a copy")
        return self.points.astype(dtype)

    def block(self, q: Quadrant) -> NDArray[np.float64]:
        """The contiguous quarter of the points lying in quadrant ``q``."""
        if self.order < 2:
            raise ValueError("Order 1 curve has no quadrant blocks")
        n = len(self.points) // 4
        return self.points[int(q) * n : (int(q) + 1) * n]

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        return bbox(self.points)

    @property
    def length(self) -> float:
        """Polyline length through all points."""
        lengths = arc_lengths(self.points)
        return float(lengths[-1]) if len(lengths) else 0.0

    def to_points(self) -> list[Point]:
        return list(self)
