"""Configuration dataclasses and the run result container.

Engine parameters are deliberately *not* range-checked here: the
``Simulation`` constructor owns that validation so that its error precedence
is the single source of truth. ``RunConfig`` validates the driver-side knobs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ant_simulator.config.constants import (
    ANT_ORIENTATION,
    GRID_COLOR,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_ITERATIONS,
    PNG_DPI,
)

if TYPE_CHECKING:
    from ant_simulator.domain.orientation import Orientation
    from ant_simulator.domain.rules import RuleTable
    from ant_simulator.domain.simulation import Simulation, StepResult

__all__ = [
    "PGM_ENCODINGS",
    "RunConfig",
    "RunResult",
    "SimulationConfig",
]

PGM_ENCODINGS = ("ascii", "binary")
"""Accepted values for ``RunConfig.encoding``."""

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunResult:
    """Outcome of one driven simulation run."""

    iterations: int
    step_result: StepResult
    position: tuple[int, int]
    orientation: Orientation

    @property
    def hit_boundary(self) -> bool:
        return self.step_result.is_terminal

    @property
    def termination_reason(self) -> str:
        return "hit boundary" if self.hit_boundary else "reached max iterations"


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationConfig:
    """Constructor parameters for one ``Simulation``."""

    rules: RuleTable
    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    initial_color: int = GRID_COLOR
    start_col: int = (GRID_WIDTH - 1) // 2
    start_row: int = (GRID_HEIGHT - 1) // 2
    orientation: int = ANT_ORIENTATION

    def build(self) -> Simulation:
        """Construct the engine; raises ``SimulationValidationError`` on bad input."""
        from ant_simulator.domain.simulation import Simulation

        return Simulation(
            grid_width=self.grid_width,
            grid_height=self.grid_height,
            initial_color=self.initial_color,
            start_col=self.start_col,
            start_row=self.start_row,
            orientation=self.orientation,
            rules=self.rules,
        )


@dataclass(frozen=True)
class RunConfig:
    """Driver-side knobs: iteration cap and output artifacts."""

    output: Path
    max_iterations: int = MAX_ITERATIONS
    encoding: str = "ascii"
    png_path: Path | None = None
    summary_path: Path | None = None
    png_dpi: int = PNG_DPI

    def __post_init__(self) -> None:
        if self.max_iterations < 0:
            raise ValueError("max_iterations must be >= 0")
        if self.encoding not in PGM_ENCODINGS:
            valid = ", ".join(PGM_ENCODINGS)
            raise ValueError(f"encoding must be one of {valid}")
        if self.png_dpi < 1:
            raise ValueError("png_dpi must be >= 1")
