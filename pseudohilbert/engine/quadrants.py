"""Per-quadrant pre-transforms of the lower-order curve.

The order-1 curve is an upside-down "U" opening downward: it enters bottom-left and
leaves bottom-right. The two upper copies keep that orientation. The two lower
copies are mirrored across a diagonal so the curve enters and leaves each
sub-square on the edges shared with its neighbours.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pseudohilbert.engine.registry import Quadrant, quadrant
from pseudohilbert.utils.geometry import reflect_vertical, rotate_clockwise, rotate_counterclockwise
from pseudohilbert.utils.point import CENTER


@quadrant(
    Quadrant.BOTTOM_LEFT,
    origin=(0.0, 1.0),
    description="Reflect about x=0.5, rotate clockwise about the center",
)
def bottom_left(work: NDArray[np.float64]) -> None:
    reflect_vertical(work, CENTER.x)
    rotate_clockwise(work, CENTER)


@quadrant(Quadrant.TOP_LEFT, origin=(0.0, 0.0), description="Copied as-is")
def top_left(work: NDArray[np.float64]) -> None:
    pass


@quadrant(Quadrant.TOP_RIGHT, origin=(1.0, 0.0), description="Copied as-is")
def top_right(work: NDArray[np.float64]) -> None:
    pass


@quadrant(
    Quadrant.BOTTOM_RIGHT,
    origin=(1.0, 1.0),
    description="Reflect about x=0.5, rotate counter-clockwise about the center",
)
def bottom_right(work: NDArray[np.float64]) -> None:
    reflect_vertical(work, CENTER.x)
    rotate_counterclockwise(work, CENTER)
