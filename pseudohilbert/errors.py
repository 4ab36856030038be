"""Exception hierarchy for curve construction."""

from __future__ import annotations


class CurveError(Exception):
    """Base class for every error raised by pseudohilbert."""


class InvalidOrderError(CurveError, ValueError):
    """Requested recursion order is not an integer >= 1."""

    def __init__(self, order: object) -> None:
        self.order = order
        super().__init__(f"Curve order must be an integer >= 1, got {order!r}")


class ResourceExhaustedError(CurveError, MemoryError):
    """Buffers for the requested order could not be allocated."""

    def __init__(self, order: int, requested_bytes: int | None = None, reason: str = "") -> None:
        self.order = order
        self.requested_bytes = requested_bytes
        msg = f"Not enough memory to build order {order} curve"
        if requested_bytes is not None:
            msg += f" ({requested_bytes} bytes requested)"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
