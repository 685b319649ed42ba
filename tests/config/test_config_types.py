"""Tests for ant_simulator.config constants and dataclasses."""

from __future__ import annotations

from pathlib import Path

import pytest

from ant_simulator.config import constants
from ant_simulator.config.types import RunConfig, RunResult, SimulationConfig
from ant_simulator.domain.orientation import Orientation
from ant_simulator.domain.rules import RuleTable
from ant_simulator.domain.simulation import Simulation, SimulationValidationError, StepResult


def test_grid_limits() -> None:
    assert constants.MAX_GRID_DIMENSION == 65_535
    assert constants.NUM_COLORS == 256
    assert constants.MAX_COLOR == 255


def test_default_start_is_inside_default_grid() -> None:
    assert 0 <= (constants.GRID_WIDTH - 1) // 2 < constants.GRID_WIDTH - 1
    assert 0 <= (constants.GRID_HEIGHT - 1) // 2 < constants.GRID_HEIGHT - 1


def test_exit_codes_are_distinct() -> None:
    codes = [
        constants.EXIT_OK,
        constants.EXIT_USAGE,
        constants.EXIT_BAD_ARGUMENT,
        constants.EXIT_BAD_RULE,
        constants.EXIT_INVALID_SIMULATION,
        constants.EXIT_SIMULATION_FAILED,
        constants.EXIT_WRITE_FAILED,
    ]
    assert len(set(codes)) == len(codes)
    assert constants.EXIT_OK == 0


class TestSimulationConfig:
    def test_defaults_build_a_simulation(self) -> None:
        sim = SimulationConfig(rules=RuleTable.empty()).build()
        assert isinstance(sim, Simulation)
        assert (sim.grid_width, sim.grid_height) == (75, 75)
        assert sim.position == (37, 37)
        assert sim.orientation is Orientation.WEST

    def test_invalid_parameters_surface_validation_error(self) -> None:
        config = SimulationConfig(rules=RuleTable.empty(), grid_width=10, start_col=9)
        with pytest.raises(SimulationValidationError, match="start_col"):
            config.build()


class TestRunConfig:
    def test_defaults(self) -> None:
        config = RunConfig(output=Path("out.pgm"))
        assert config.max_iterations == constants.MAX_ITERATIONS
        assert config.encoding == "ascii"
        assert config.png_path is None
        assert config.summary_path is None

    def test_negative_iterations_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_iterations"):
            RunConfig(output=Path("out.pgm"), max_iterations=-1)

    def test_unknown_encoding_rejected(self) -> None:
        with pytest.raises(ValueError, match="encoding"):
            RunConfig(output=Path("out.pgm"), encoding="jpeg")


class TestRunResult:
    def test_termination_reason(self) -> None:
        done = RunResult(3, StepResult.FAILED_AT_BOUNDARY, (0, 0), Orientation.NORTH)
        capped = RunResult(3, StepResult.SUCCESS, (1, 1), Orientation.EAST)
        assert done.hit_boundary is True
        assert done.termination_reason == "hit boundary"
        assert capped.hit_boundary is False
        assert capped.termination_reason == "reached max iterations"
