"""Read curve points back from the binary or text encoding."""

from __future__ import annotations

import re
from pathlib import Path
from typing import IO

import numpy as np
from numpy.typing import NDArray

from pseudohilbert.engine.builder import POINT_BYTES, point_count

_LINE_RE = re.compile(r"^\(([-+0-9.eE]+),([-+0-9.eE]+)\)$")


def read_binary(source: str | Path | IO[bytes], order: int | None = None) -> NDArray[np.float64]:
    """Parse a headerless native-endian float64 stream into an (N, 2) array.

    With ``order`` given, the stream must hold exactly 4**order points.
    """
    if isinstance(source, (str, Path)):
        data = Path(source).read_bytes()
    else:
        data = source.read()

    if len(data) % POINT_BYTES:
        raise ValueError(f"Stream length {len(data)} is not a multiple of {POINT_BYTES} bytes")
    points = np.frombuffer(data, dtype=np.float64).reshape(-1, 2).copy()

    if order is not None and len(points) != point_count(order):
        raise ValueError(
            f"Expected {point_count(order)} points for order {order}, found {len(points)}"
        )
    return points


def parse_text(text: str) -> NDArray[np.float64]:
    """Parse ``(x,y)`` lines into an (N, 2) array."""
    rows: list[tuple[float, float]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        m = _LINE_RE.match(line.strip())
        if m is None:
            raise ValueError(f"Line {lineno}: expected '(x,y)', got {line!r}")
        rows.append((float(m.group(1)), float(m.group(2))))
    if not rows:
        return np.empty((0, 2))
    return np.array(rows, dtype=np.float64)
