"""pseudohilbert curve construction engine."""

from pseudohilbert.engine.registry import quadrant, Quadrant, get_registry
from pseudohilbert.engine.curve import Curve
from pseudohilbert.engine.builder import build, point_count, estimate_peak_bytes

__all__ = [
    "quadrant",
    "Quadrant",
    "get_registry",
    "Curve",
    "build",
    "point_count",
    "estimate_peak_bytes",
]
