"""Tests for ant_simulator.viz.render (PNG output)."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from ant_simulator.viz.render import render_grid_png


def test_render_writes_png(tmp_path: Path) -> None:
    grid = np.array([[0, 1, 0], [1, 0, 1]], dtype=np.uint8)
    out = render_grid_png(grid, tmp_path / "figs" / "grid.png", dpi=50, title="ant")
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_render_uniform_grid(tmp_path: Path) -> None:
    out = render_grid_png(np.full((4, 4), 7, dtype=np.uint8), tmp_path / "u.png", dpi=50)
    assert out.stat().st_size > 0


def test_render_rejects_flat_buffer(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="2-D"):
        render_grid_png(np.zeros(6, dtype=np.uint8), tmp_path / "x.png")


def test_figure_closed_when_format_unsupported(tmp_path: Path) -> None:
    import matplotlib.pyplot as plt

    before = len(plt.get_fignums())
    with pytest.raises(ValueError):
        render_grid_png(np.zeros((2, 2), dtype=np.uint8), tmp_path / "grid.xyz", dpi=50)
    assert len(plt.get_fignums()) == before
