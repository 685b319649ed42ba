"""Configuration layer: constants and typed config dataclasses."""

from ant_simulator.config.constants import (
    ANT_ORIENTATION,
    GRID_COLOR,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_COLOR,
    MAX_GRID_DIMENSION,
    MAX_ITERATIONS,
    NUM_COLORS,
)
from ant_simulator.config.types import RunConfig, RunResult, SimulationConfig

__all__ = [
    "ANT_ORIENTATION",
    "GRID_COLOR",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "MAX_COLOR",
    "MAX_GRID_DIMENSION",
    "MAX_ITERATIONS",
    "NUM_COLORS",
    "RunConfig",
    "RunResult",
    "SimulationConfig",
]
