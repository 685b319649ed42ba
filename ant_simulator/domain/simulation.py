"""Single-ant stepping engine on a bounded grid of 8-bit colors.

Interior invariant: the ant may only ever stand on columns ``[0, width - 1)``
and rows ``[0, height - 1)``. The last column and last row form a margin the
ant never enters; a move onto them (or off the grid) ends the run.

The grid is a flat row-major ``bytearray`` owned by the engine. Callers get a
read-only numpy view of it through :meth:`Simulation.grid`.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

import numpy as np

from ant_simulator.config.constants import MAX_COLOR, MAX_GRID_DIMENSION
from ant_simulator.domain.orientation import MOVE_OFFSETS, Orientation, turn
from ant_simulator.domain.rules import Rule, RuleTable


class StepResult(Enum):
    """Outcome of the most recent ``step_once`` call."""

    NIL = "nil"
    SUCCESS = "success"
    FAILED_AT_BOUNDARY = "hit boundary"

    @property
    def is_terminal(self) -> bool:
        return self is StepResult.FAILED_AT_BOUNDARY

    def describe(self) -> str:
        return self.value


class SimulationValidationError(ValueError):
    """Raised when a ``Simulation`` cannot be built from the given parameters."""

    def __init__(self, parameter: str, value: object, constraint: str) -> None:
        self.parameter = parameter
        self.value = value
        self.constraint = constraint
        super().__init__(f"{parameter} ({value}) {constraint}")


def _validate_dimension(name: str, value: int) -> None:
    if not 1 <= value <= MAX_GRID_DIMENSION:
        raise SimulationValidationError(name, value, f"not in range [1, {MAX_GRID_DIMENSION}]")
    if value == 1:
        # Interior is [0, value - 1), which is empty for a single cell
        raise SimulationValidationError(name, value, "leaves no interior cells; must be >= 2")


def _coerce_rules(rules: RuleTable | Sequence[Rule]) -> RuleTable:
    if isinstance(rules, RuleTable):
        return rules
    try:
        return RuleTable(rules)
    except (TypeError, ValueError) as exc:
        raise SimulationValidationError("rules", type(rules).__name__, str(exc)) from exc


class Simulation:
    """Generalized Langton's ant: turn, recolor, move, until the edge is hit.

    Construction checks parameters in a fixed order and reports only the
    first failure: ``grid_width``, ``grid_height``, ``start_col``,
    ``start_row``, ``initial_color``, ``orientation``, ``rules``.

    Not thread-safe; each instance must be driven by a single caller.
    """

    def __init__(
        self,
        grid_width: int,
        grid_height: int,
        initial_color: int,
        start_col: int,
        start_row: int,
        orientation: int,
        rules: RuleTable | Sequence[Rule],
    ) -> None:
        _validate_dimension("grid_width", grid_width)
        _validate_dimension("grid_height", grid_height)
        self._grid_width = grid_width
        self._grid_height = grid_height
        if not self.is_col_in_bounds(start_col):
            raise SimulationValidationError(
                "start_col", start_col, f"not in grid interior [0, {grid_width - 1})"
            )
        if not self.is_row_in_bounds(start_row):
            raise SimulationValidationError(
                "start_row", start_row, f"not in grid interior [0, {grid_height - 1})"
            )
        if not 0 <= initial_color <= MAX_COLOR:
            raise SimulationValidationError(
                "initial_color", initial_color, f"not in range [0, {MAX_COLOR}]"
            )
        try:
            facing = Orientation(orientation)
        except ValueError as exc:
            raise SimulationValidationError(
                "orientation", orientation, "is not one of 0 (N), 1 (E), 2 (S), 3 (W)"
            ) from exc
        self._rules = _coerce_rules(rules)

        self._grid = bytearray([initial_color]) * (grid_width * grid_height)
        self._col = start_col
        self._row = start_row
        self._orientation = facing
        self._last_result = StepResult.NIL
        self._iterations = 0
        # Parallel per-color tuples keep the hot path free of attribute lookups
        self._replacements = self._rules.replacement_colors()
        self._turns = self._rules.turn_directions()

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    def is_col_in_bounds(self, col: int) -> bool:
        return 0 <= col < self._grid_width - 1

    def is_row_in_bounds(self, row: int) -> bool:
        return 0 <= row < self._grid_height - 1

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def step_once(self) -> None:
        """Advance the ant by one turn -> recolor -> move transition.

        Must not be called once :meth:`is_finished` is true.
        """
        index = self._row * self._grid_width + self._col
        color = self._grid[index]

        self._orientation = turn(self._orientation, self._turns[color])
        self._grid[index] = self._replacements[color]

        d_col, d_row = MOVE_OFFSETS[self._orientation]
        next_col = self._col + d_col
        next_row = self._row + d_row
        self._iterations += 1

        if not self.is_col_in_bounds(next_col) or not self.is_row_in_bounds(next_row):
            self._last_result = StepResult.FAILED_AT_BOUNDARY
            return
        self._col = next_col
        self._row = next_row
        self._last_result = StepResult.SUCCESS

    def is_finished(self) -> bool:
        return self._last_result.is_terminal

    def last_step_result(self) -> StepResult:
        return self._last_result

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def grid(self) -> np.ndarray:
        """Row-major ``uint8`` view of all cells; not writeable.

        The view shares memory with the engine, so it reflects later steps.
        Copy it if a snapshot is needed.
        """
        return np.frombuffer(memoryview(self._grid).toreadonly(), dtype=np.uint8)

    def grid_2d(self) -> np.ndarray:
        """The grid reshaped to ``(height, width)``; not writeable."""
        return self.grid().reshape(self._grid_height, self._grid_width)

    def cell(self, col: int, row: int) -> int:
        if not (0 <= col < self._grid_width and 0 <= row < self._grid_height):
            raise IndexError(f"cell ({col}, {row}) outside {self._grid_width}x{self._grid_height}")
        return self._grid[row * self._grid_width + col]

    @property
    def grid_width(self) -> int:
        return self._grid_width

    @property
    def grid_height(self) -> int:
        return self._grid_height

    @property
    def position(self) -> tuple[int, int]:
        """Current ``(col, row)`` of the ant."""
        return self._col, self._row

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def rules(self) -> RuleTable:
        return self._rules

    @property
    def iterations_completed(self) -> int:
        return self._iterations

    def __repr__(self) -> str:
        return (
            f"Simulation({self._grid_width}x{self._grid_height}, "
            f"position={self.position}, orientation={self._orientation.name}, "
            f"last_result={self._last_result.name}, iterations={self._iterations})"
        )
