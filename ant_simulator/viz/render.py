"""PNG rendering of a final ant grid."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import numpy as np
from numpy.typing import ArrayLike

from ant_simulator.config.constants import PNG_DPI
from ant_simulator.metrics.grid import distinct_colors

# Inches per cell before the figure is clamped to the size limits
_CELL_INCHES = 0.08
_MIN_FIGURE_INCHES = 2.0
_MAX_FIGURE_INCHES = 20.0


def _figure_size(width: int, height: int) -> tuple[float, float]:
    scale = min(1.0, _MAX_FIGURE_INCHES / (max(width, height) * _CELL_INCHES))
    return (
        max(width * _CELL_INCHES * scale, _MIN_FIGURE_INCHES),
        max(height * _CELL_INCHES * scale, _MIN_FIGURE_INCHES),
    )


def render_grid_png(
    grid_2d: ArrayLike,
    output_path: Path,
    dpi: int = PNG_DPI,
    title: str | None = None,
) -> Path:
    """Render a ``(height, width)`` color grid as a grayscale PNG.

    Colors are mapped onto a discrete gray ramp spanning only the colors that
    occur, so a two-color grid renders black and white regardless of values.
    """
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from matplotlib.colors import BoundaryNorm, ListedColormap

    cells = np.asarray(grid_2d, dtype=np.uint8)
    if cells.ndim != 2:
        raise ValueError(f"grid must be 2-D, got shape {cells.shape}")
    height, width = cells.shape

    present = distinct_colors(cells)
    # Rank each cell's color among the colors present
    ranks = np.searchsorted(np.asarray(present), cells)
    n_levels = len(present)
    grays = [str(1.0 - i / max(n_levels - 1, 1)) for i in range(n_levels)]
    cmap = ListedColormap(grays)
    norm = BoundaryNorm([i - 0.5 for i in range(n_levels + 1)], cmap.N)

    fig, ax = plt.subplots(figsize=_figure_size(width, height))
    ax.imshow(ranks, cmap=cmap, norm=norm, origin="upper", aspect="equal", interpolation="nearest")
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title, fontsize=8)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output_path
