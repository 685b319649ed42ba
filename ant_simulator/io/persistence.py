"""Parquet persistence for per-run summaries."""

from __future__ import annotations

import logging
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq
from numpy.typing import ArrayLike

from ant_simulator.config.types import RunResult, SimulationConfig
from ant_simulator.domain.orientation import Orientation
from ant_simulator.io.schemas import RUN_SUMMARY_SCHEMA, RUN_SUMMARY_SCHEMA_VERSION
from ant_simulator.metrics.grid import distinct_colors, max_color

logger = logging.getLogger(__name__)


def build_run_summary(
    sim_config: SimulationConfig,
    result: RunResult,
    grid: ArrayLike,
    max_iterations: int,
) -> dict[str, int | str]:
    """Flatten config, outcome and final-grid statistics into one summary row."""
    final_col, final_row = result.position
    return {
        "schema_version": RUN_SUMMARY_SCHEMA_VERSION,
        "grid_width": sim_config.grid_width,
        "grid_height": sim_config.grid_height,
        "initial_color": sim_config.initial_color,
        "start_col": sim_config.start_col,
        "start_row": sim_config.start_row,
        "start_orientation": Orientation(sim_config.orientation).name,
        "rules": sim_config.rules.to_spec(),
        "max_iterations": max_iterations,
        "iterations": result.iterations,
        "termination_reason": result.termination_reason,
        "final_col": final_col,
        "final_row": final_row,
        "final_orientation": result.orientation.name,
        "max_color": max_color(grid),
        "distinct_colors": len(distinct_colors(grid)),
    }


def write_run_summary(path: Path, rows: list[dict[str, int | str]]) -> Path:
    """Write summary rows to a Parquet file at ``path``."""
    path = Path(path)
    columns = {field.name: [row[field.name] for row in rows] for field in RUN_SUMMARY_SCHEMA}
    table = pa.Table.from_pydict(columns, schema=RUN_SUMMARY_SCHEMA)
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, path)
    logger.info("Wrote %d run summary row(s) to %s", len(rows), path)
    return path
