"""pseudohilbert: pseudo-Hilbert space-filling curves over the unit square."""

from pseudohilbert.errors import CurveError, InvalidOrderError, ResourceExhaustedError
from pseudohilbert.utils.point import Point
from pseudohilbert.engine import Curve, Quadrant, build, point_count

__version__ = "0.1.0"

__all__ = [
    "CurveError",
    "InvalidOrderError",
    "ResourceExhaustedError",
    "Point",
    "Curve",
    "Quadrant",
    "build",
    "point_count",
]
