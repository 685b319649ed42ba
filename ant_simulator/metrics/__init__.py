"""Grid metrics: color statistics used for export and run summaries."""

from ant_simulator.metrics.grid import color_histogram, distinct_colors, is_uniform, max_color

__all__ = ["color_histogram", "distinct_colors", "is_uniform", "max_color"]
