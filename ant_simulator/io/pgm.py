"""8-bit portable graymap (PGM) export and import.

Two encodings are supported: ``P2`` (plain, decimal samples) and ``P5``
(raw, one byte per sample). Samples are written in row-major order, one per
grid cell.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import numpy as np
from numpy.typing import ArrayLike

from ant_simulator.config.constants import MAX_COLOR, MAX_GRID_DIMENSION
from ant_simulator.metrics.grid import max_color

logger = logging.getLogger(__name__)

_WHITESPACE = b" \t\r\n"


class PgmEncoding(Enum):
    """PGM sample encoding, valued by its magic identifier."""

    ASCII = "P2"
    BINARY = "P5"

    @classmethod
    def parse(cls, raw: str | PgmEncoding) -> PgmEncoding:
        if isinstance(raw, PgmEncoding):
            return raw
        try:
            return cls[raw.strip().upper()]
        except KeyError as exc:
            valid = ", ".join(member.name.lower() for member in cls)
            raise ValueError(f"encoding must be one of {valid}") from exc


def _check_dimension(label: str, value: int) -> None:
    if not 1 <= value <= MAX_GRID_DIMENSION:
        raise ValueError(f"{label} ({value}) not in range [1, {MAX_GRID_DIMENSION}]")


def encode_pgm(
    grid: ArrayLike,
    width: int,
    height: int,
    max_value: int | None = None,
    encoding: str | PgmEncoding = PgmEncoding.ASCII,
) -> bytes:
    """Serialize a row-major 8-bit buffer to PGM bytes.

    ``max_value`` defaults to the largest color in ``grid``. PGM forbids a
    zero maximum, so an all-zero grid is written with a maximum of 1.
    """
    fmt = PgmEncoding.parse(encoding)
    _check_dimension("width", width)
    _check_dimension("height", height)
    cells = np.asarray(grid, dtype=np.uint8).reshape(-1)
    if cells.size != width * height:
        raise ValueError(f"grid has {cells.size} cells, expected {width}x{height}={width * height}")

    observed = max_color(cells)
    if max_value is None:
        max_value = observed
    elif not 0 <= max_value <= MAX_COLOR:
        raise ValueError(f"max_value ({max_value}) not in range [0, {MAX_COLOR}]")
    elif max_value < observed:
        raise ValueError(f"max_value ({max_value}) below largest sample ({observed})")
    header_max = max(max_value, 1)

    header = f"{fmt.value}\n{width} {height}\n{header_max}\n".encode("ascii")
    if fmt is PgmEncoding.BINARY:
        return header + cells.tobytes()

    rows = cells.reshape(height, width)
    body = "\n".join(" ".join(str(int(v)) for v in row) for row in rows)
    return header + body.encode("ascii") + b"\n"


def write_pgm(
    path: Path,
    grid: ArrayLike,
    width: int,
    height: int,
    max_value: int | None = None,
    encoding: str | PgmEncoding = PgmEncoding.ASCII,
) -> Path:
    """Encode ``grid`` and write it to ``path``; returns the path written."""
    payload = encode_pgm(grid, width, height, max_value=max_value, encoding=encoding)
    path = Path(path)
    path.write_bytes(payload)
    logger.info("Wrote %dx%d PGM (%d bytes) to %s", width, height, len(payload), path)
    return path


def _next_token(data: bytes, pos: int) -> tuple[bytes, int]:
    """Return the next header token and the position just after it."""
    size = len(data)
    while pos < size:
        if data[pos : pos + 1] == b"#":
            while pos < size and data[pos : pos + 1] not in (b"\n", b"\r"):
                pos += 1
        elif data[pos] in _WHITESPACE:
            pos += 1
        else:
            break
    start = pos
    while pos < size and data[pos] not in _WHITESPACE and data[pos : pos + 1] != b"#":
        pos += 1
    if start == pos:
        raise ValueError("truncated PGM header")
    return data[start:pos], pos


def decode_pgm(data: bytes) -> tuple[int, int, int, np.ndarray]:
    """Parse PGM bytes into ``(width, height, max_value, samples)``.

    ``samples`` is a flat row-major ``uint8`` array.
    """
    magic, pos = _next_token(data, 0)
    try:
        fmt = PgmEncoding(magic.decode("ascii"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise ValueError(f"unsupported PGM magic {magic!r}") from exc

    fields: list[int] = []
    for label in ("width", "height", "max_value"):
        token, pos = _next_token(data, pos)
        try:
            fields.append(int(token))
        except ValueError as exc:
            raise ValueError(f"PGM {label} is not an integer: {token!r}") from exc
    width, height, max_value = fields
    if not 1 <= max_value <= MAX_COLOR:
        raise ValueError(f"only 8-bit PGM is supported, max_value={max_value}")

    count = width * height
    if fmt is PgmEncoding.BINARY:
        # Exactly one whitespace byte separates the header from raster data
        raster = data[pos + 1 : pos + 1 + count]
        if len(raster) != count:
            raise ValueError(f"expected {count} raster bytes, found {len(raster)}")
        samples = np.frombuffer(raster, dtype=np.uint8).copy()
    else:
        values = data[pos:].split()
        if len(values) != count:
            raise ValueError(f"expected {count} samples, found {len(values)}")
        samples = np.array([int(v) for v in values], dtype=np.uint8)
    return width, height, max_value, samples


def read_pgm(path: Path) -> tuple[int, int, int, np.ndarray]:
    """Read a PGM file written by :func:`write_pgm` (either encoding)."""
    return decode_pgm(Path(path).read_bytes())
