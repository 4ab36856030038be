"""Leaf-node geometry ops on (N, 2) float64 point arrays. No engine imports.

Every transform mutates ``points`` in place and returns ``None``. Space runs from
(0, 0) at the top-left to (1, 1) at the bottom-right, so the y axis grows downward
and the visual rotation directions are the mirror of the usual math convention.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pseudohilbert.utils.point import Point


def reflect_vertical(points: NDArray[np.float64], axis_x: float) -> None:
    """Mirror across the vertical line x = axis_x."""
    xs = points[:, 0]
    np.subtract(2 * axis_x, xs, out=xs)


def reflect_horizontal(points: NDArray[np.float64], axis_y: float) -> None:
    """Mirror across the horizontal line y = axis_y."""
    ys = points[:, 1]
    np.subtract(2 * axis_y, ys, out=ys)


def rotate_clockwise(points: NDArray[np.float64], origin: Point | tuple[float, float]) -> None:
    """Quarter turn clockwise about ``origin``: (dx, dy) -> (-dy, dx).

    Swap the offsets, then negate the post-swap x. Negating the post-swap y
    instead breaks the curve between quadrants; see
    test_consecutive_points_are_grid_neighbours.
    """
    ox, oy = Point.of(origin)
    dx = points[:, 0] - ox
    points[:, 0] = ox - (points[:, 1] - oy)
    points[:, 1] = oy + dx


def rotate_counterclockwise(
    points: NDArray[np.float64], origin: Point | tuple[float, float]
) -> None:
    """Quarter turn counter-clockwise about ``origin``: (dx, dy) -> (dy, -dx).

    Swap the offsets, then negate the post-swap y.
    """
    ox, oy = Point.of(origin)
    dx = points[:, 0] - ox
    points[:, 0] = ox + (points[:, 1] - oy)
    points[:, 1] = oy - dx


def scale(points: NDArray[np.float64], factor: float, origin: Point | tuple[float, float]) -> None:
    """p <- origin + (p - origin) * factor, component-wise."""
    anchor = np.asarray(Point.of(origin).as_tuple(), dtype=np.float64)
    points -= anchor
    points *= factor
    points += anchor


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    if len(points) == 0:
        return np.zeros(0)
    diffs = np.diff(points, axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])
