"""Write curve points in the binary or text encoding."""

from __future__ import annotations

import enum
import io
import logging
import os
from pathlib import Path
from typing import IO, Any

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_POINTS = 65536


class Encoding(str, enum.Enum):
    BINARY = "binary"
    TEXT = "text"


def _as_points(points: Any) -> NDArray[np.float64]:
    arr = np.ascontiguousarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) point array, got shape {arr.shape}")
    return arr


def write_binary(points: Any, fp: IO[bytes], chunk_points: int = DEFAULT_CHUNK_POINTS) -> int:
    """Write x, y pairs as native-endian float64 with no header. Returns bytes written.

    The reader has to know the point count (4**order) to parse the stream.
    """
    if chunk_points < 1:
        raise ValueError("chunk_points must be >= 1")
    arr = _as_points(points)
    written = 0
    for i in range(0, len(arr), chunk_points):
        chunk = arr[i : i + chunk_points].tobytes()
        fp.write(chunk)
        written += len(chunk)
    fp.flush()
    return written


def _format_chunk(chunk: NDArray[np.float64]) -> str:
    return "".join("(%.15f,%.15f)\n" % (x, y) for x, y in chunk.tolist())


def write_text(points: Any, fp: IO[str], chunk_points: int = DEFAULT_CHUNK_POINTS) -> int:
    """Write one ``(x,y)`` line per point with 15 fractional digits. Returns characters written.

    Points are formatted ``chunk_points`` at a time so memory stays bounded.
    """
    if chunk_points < 1:
        raise ValueError("chunk_points must be >= 1")
    arr = _as_points(points)
    written = 0
    for i in range(0, len(arr), chunk_points):
        written += fp.write(_format_chunk(arr[i : i + chunk_points]))
    fp.flush()
    return written


def serialize_text(points: Any) -> str:
    """The whole text encoding as one string. Prefer ``write_text`` for large curves."""
    buf = io.StringIO()
    write_text(points, buf)
    return buf.getvalue()


def write_curve(
    points: Any,
    path: str | Path,
    encoding: Encoding | str = Encoding.BINARY,
    chunk_points: int = DEFAULT_CHUNK_POINTS,
) -> int:
    """Write ``points`` to ``path`` in the given encoding. Returns bytes written.

    Data goes to a ``.part`` sibling that replaces ``path`` only once complete, so a
    failed write never leaves a truncated file under the final name.
    """
    encoding = Encoding(encoding)
    path = Path(path)
    tmp = path.with_name(path.name + ".part")
    try:
        if encoding is Encoding.BINARY:
            with tmp.open("wb") as fp:
                written = write_binary(points, fp, chunk_points)
        else:
            with tmp.open("w", encoding="ascii", newline="\n") as fp:
                written = write_text(points, fp, chunk_points)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d bytes to %s (%s)", written, path, encoding.value)
    return written
