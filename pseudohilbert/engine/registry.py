"""Quadrant registry. Each quadrant's pre-transform is a standalone function registered via decorator.

Usage:
    @quadrant(Quadrant.TOP_LEFT, origin=(0.0, 0.0), description="copied as-is")
    def top_left(work: NDArray[np.float64]) -> None:
        pass

The builder walks ``get_registry().all()`` in traversal order, hands each function
a working copy of the lower-order curve, then halves it about the quadrant origin.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from pseudohilbert.utils.point import Point

logger = logging.getLogger(__name__)

PreTransform = Callable[[NDArray[np.float64]], None]


class Quadrant(enum.IntEnum):
    """Quadrants in curve traversal order."""

    BOTTOM_LEFT = 0
    TOP_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_RIGHT = 3


@dataclass
class QuadrantSpec:
    quadrant: Quadrant
    origin: Point
    fn: PreTransform
    description: str = ""


class QuadrantRegistry:
    """Registry of quadrant pre-transforms, one per quadrant."""

    def __init__(self) -> None:
        self._quadrants: dict[Quadrant, QuadrantSpec] = {}

    def register(self, spec: QuadrantSpec) -> None:
        if spec.quadrant in self._quadrants:
            raise ValueError(f"Duplicate quadrant: {spec.quadrant.name}")
        self._quadrants[spec.quadrant] = spec
        logger.debug("Registered quadrant %s (origin %s)", spec.quadrant.name, spec.origin)

    def get(self, q: Quadrant) -> QuadrantSpec:
        return self._quadrants[q]

    def all(self) -> list[QuadrantSpec]:
        """Registered specs in traversal order. Raises if any quadrant is missing."""
        missing = [q.name for q in Quadrant if q not in self._quadrants]
        if missing:
            raise ValueError(f"Quadrants not registered: {missing}")
        return [self._quadrants[q] for q in Quadrant]

    @property
    def count(self) -> int:
        return len(self._quadrants)


# Module-level singleton
_registry = QuadrantRegistry()


def get_registry() -> QuadrantRegistry:
    return _registry


def quadrant(
    q: Quadrant,
    *,
    origin: Point | tuple[float, float],
    description: str = "",
    registry: QuadrantRegistry | None = None,
):
    """Decorator to register a quadrant pre-transform."""

    def decorator(fn: PreTransform) -> PreTransform:
        spec = QuadrantSpec(quadrant=q, origin=Point.of(origin), fn=fn, description=description)
        (registry or _registry).register(spec)
        return fn

    return decorator
