"""Color statistics over a grid buffer."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ant_simulator.config.constants import NUM_COLORS


def _as_cells(grid: ArrayLike) -> np.ndarray:
    cells = np.asarray(grid, dtype=np.uint8)
    return cells.reshape(-1)


def max_color(grid: ArrayLike) -> int:
    """Largest color present; the PGM maximum-pixel-value hint.

    Returns 0 for an empty buffer.
    """
    cells = _as_cells(grid)
    if cells.size == 0:
        return 0
    return int(cells.max())


def color_histogram(grid: ArrayLike) -> np.ndarray:
    """Cell count per color, length ``NUM_COLORS``."""
    return np.bincount(_as_cells(grid), minlength=NUM_COLORS)


def distinct_colors(grid: ArrayLike) -> tuple[int, ...]:
    """Colors that occur at least once, ascending."""
    return tuple(int(c) for c in np.flatnonzero(color_histogram(grid)))


def is_uniform(grid: ArrayLike) -> bool:
    """True when every cell holds the same color (or the buffer is empty)."""
    return len(distinct_colors(grid)) <= 1
