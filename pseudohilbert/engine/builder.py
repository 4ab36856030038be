"""Recursive pseudo-Hilbert curve construction.

Order n is assembled from four half-scale copies of order n-1, one per quadrant,
in the order bottom-left, top-left, top-right, bottom-right. The lower-order curve
is rebuilt on every call; nothing is cached across calls.
"""

from __future__ import annotations

import logging
import time

import numpy as np
from numpy.typing import NDArray

import pseudohilbert.engine.quadrants  # noqa: F401  (registers the quadrant rules)
from pseudohilbert.config import settings
from pseudohilbert.engine.curve import Curve
from pseudohilbert.engine.registry import QuadrantRegistry, get_registry
from pseudohilbert.errors import InvalidOrderError, ResourceExhaustedError
from pseudohilbert.utils.geometry import scale

logger = logging.getLogger(__name__)

# Order 1 curve. Upside-down relative to the usual picture since y grows downward.
BASE_CURVE: NDArray[np.float64] = np.array(
    [
        [0.25, 0.75],  # bottom left
        [0.25, 0.25],  # top left
        [0.75, 0.25],  # top right
        [0.75, 0.75],  # bottom right
    ],
    dtype=np.float64,
)
BASE_CURVE.setflags(write=False)

SCALE_FACTOR = 0.5
POINT_BYTES = 2 * np.dtype(np.float64).itemsize


def point_count(order: int) -> int:
    """Every order-n curve has 4**n points."""
    return 1 << (2 * order)


def estimate_peak_bytes(order: int) -> int:
    """Bytes held at the peak of building ``order``: the result plus the lower-order memo."""
    if order <= 1:
        return point_count(1) * POINT_BYTES
    return (point_count(order) + point_count(order - 1)) * POINT_BYTES


def _check_order(order: object) -> int:
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)) or order < 1:
        raise InvalidOrderError(order)
    return int(order)


def _allocate(order: int) -> NDArray[np.float64]:
    n = point_count(order)
    try:
        return np.empty((n, 2), dtype=np.float64)
    except (MemoryError, ValueError, OverflowError) as e:
        # numpy reports shapes past the address space as ValueError
        raise ResourceExhaustedError(order, n * POINT_BYTES, str(e)) from e


def _build(order: int, registry: QuadrantRegistry) -> NDArray[np.float64]:
    if order == 1:
        return BASE_CURVE.copy()

    # lower-order curve, read-only for the rest of this frame
    memo = _build(order - 1, registry)
    memo.setflags(write=False)
    n = len(memo)

    out = _allocate(order)
    for spec in registry.all():
        # working copy lives in this quadrant's slice of the output
        work = out[int(spec.quadrant) * n : (int(spec.quadrant) + 1) * n]
        work[:] = memo
        spec.fn(work)
        scale(work, SCALE_FACTOR, spec.origin)
    return out


def build(
    order: int,
    *,
    memory_limit_bytes: int | None = None,
    registry: QuadrantRegistry | None = None,
) -> Curve:
    """Build the order-``order`` pseudo-Hilbert curve.

    Raises InvalidOrderError for order < 1 and ResourceExhaustedError when the
    buffers cannot be allocated or would exceed ``memory_limit_bytes`` (falls back
    to ``settings.memory_limit_bytes``). No partial curve is ever returned.
    """
    order = _check_order(order)
    registry = registry or get_registry()

    limit = memory_limit_bytes if memory_limit_bytes is not None else settings.memory_limit_bytes
    needed = estimate_peak_bytes(order)
    if limit is not None and needed > limit:
        raise ResourceExhaustedError(order, needed, f"limit is {limit} bytes")

    start = time.perf_counter()
    points = _build(order, registry)
    elapsed = (time.perf_counter() - start) * 1000
    logger.debug("Built order %d curve (%d points) in %.1fms", order, len(points), elapsed)
    return Curve(order=order, points=points)
