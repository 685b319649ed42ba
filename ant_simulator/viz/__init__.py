"""Visualization: PNG rendering of simulation grids."""

from ant_simulator.viz.render import render_grid_png

__all__ = ["render_grid_png"]
