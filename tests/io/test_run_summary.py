"""Tests for run-summary Parquet persistence."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq

from ant_simulator.config.types import SimulationConfig
from ant_simulator.domain.rules import Rule, RuleTable, TurnDirection
from ant_simulator.io.persistence import build_run_summary, write_run_summary
from ant_simulator.io.schemas import RUN_SUMMARY_SCHEMA
from ant_simulator.simulation.engine import run_simulation


def _run(max_iterations: int) -> tuple[SimulationConfig, dict[str, int | str]]:
    rules = RuleTable.from_mapping(
        {0: Rule.defined(1, TurnDirection.LEFT), 1: Rule.defined(0, TurnDirection.RIGHT)}
    )
    config = SimulationConfig(
        rules=rules, grid_width=11, grid_height=9, initial_color=1, start_col=5, start_row=4
    )
    sim = config.build()
    result = run_simulation(sim, max_iterations)
    return config, build_run_summary(config, result, sim.grid(), max_iterations)


def test_summary_row_matches_schema_columns() -> None:
    _, row = _run(5)
    assert set(row) == {field.name for field in RUN_SUMMARY_SCHEMA}


def test_summary_row_values() -> None:
    _, row = _run(5)
    assert row["grid_width"] == 11
    assert row["grid_height"] == 9
    assert row["start_orientation"] == "WEST"
    assert row["rules"] == "0,1,L 1,0,R"
    assert row["iterations"] == 5
    assert row["termination_reason"] == "reached max iterations"
    assert row["max_color"] == 1
    assert row["distinct_colors"] == 2


def test_write_run_summary_round_trips_through_parquet(tmp_path: Path) -> None:
    _, row = _run(100_000)
    path = write_run_summary(tmp_path / "logs" / "run_summary.parquet", [row])
    table = pq.read_table(path)
    assert table.schema.equals(RUN_SUMMARY_SCHEMA)
    assert table.num_rows == 1
    assert table.column("termination_reason").to_pylist() == ["hit boundary"]
