"""Centralized constants for the ant simulator.

Grid limits, color-space size, CLI defaults and process exit statuses are
defined here. Consuming modules should import from this module rather than
defining their own inline literals.
"""

from __future__ import annotations

MAX_GRID_DIMENSION = 65_535
"""Largest grid width or height (unsigned 16-bit)."""

NUM_COLORS = 256
"""Number of distinct cell colors; also the rule-table size."""

MAX_COLOR = NUM_COLORS - 1
"""Largest valid cell color value."""

GRID_WIDTH = 75
"""Default grid width in cells."""

GRID_HEIGHT = 75
"""Default grid height in cells."""

GRID_COLOR = 0
"""Default initial color of every cell."""

ANT_ORIENTATION = 3
"""Default starting orientation (west), as an integer 0-3 clockwise from north."""

MAX_ITERATIONS = 1_000_000
"""Default iteration cap applied by the driving loop."""

PROGRESS_LOG_INTERVAL = 1_000_000
"""Emit a DEBUG progress line every this many steps."""

PNG_DPI = 150
"""Resolution of optional PNG renders."""

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_BAD_ARGUMENT = 2
EXIT_BAD_RULE = 3
EXIT_INVALID_SIMULATION = 4
EXIT_SIMULATION_FAILED = 5
EXIT_WRITE_FAILED = 6
