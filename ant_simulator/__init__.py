"""Generalized Langton's ant simulator on a bounded grid of 8-bit colors."""

from ant_simulator.domain import (
    Orientation,
    Rule,
    RuleTable,
    Simulation,
    SimulationValidationError,
    StepResult,
    TurnDirection,
)
from ant_simulator.simulation import run_simulation

__all__ = [
    "Orientation",
    "Rule",
    "RuleTable",
    "Simulation",
    "SimulationValidationError",
    "StepResult",
    "TurnDirection",
    "run_simulation",
]
