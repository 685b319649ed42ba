"""Domain layer: orientation arithmetic, rule table and the stepping engine."""

from ant_simulator.domain.orientation import (
    MOVE_OFFSETS,
    ORIENTATION_COUNT,
    Orientation,
    turn,
)
from ant_simulator.domain.rules import UNDEFINED_RULE, Rule, RuleTable, TurnDirection
from ant_simulator.domain.simulation import (
    Simulation,
    SimulationValidationError,
    StepResult,
)

__all__ = [
    "MOVE_OFFSETS",
    "ORIENTATION_COUNT",
    "Orientation",
    "Rule",
    "RuleTable",
    "Simulation",
    "SimulationValidationError",
    "StepResult",
    "TurnDirection",
    "UNDEFINED_RULE",
    "turn",
]
