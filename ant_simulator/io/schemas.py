"""Parquet schema definitions for simulation artifacts."""

from __future__ import annotations

import pyarrow as pa

RUN_SUMMARY_SCHEMA_VERSION = 1

RUN_SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("grid_width", pa.int64()),
        ("grid_height", pa.int64()),
        ("initial_color", pa.int64()),
        ("start_col", pa.int64()),
        ("start_row", pa.int64()),
        ("start_orientation", pa.string()),
        ("rules", pa.string()),
        ("max_iterations", pa.int64()),
        ("iterations", pa.int64()),
        ("termination_reason", pa.string()),
        ("final_col", pa.int64()),
        ("final_row", pa.int64()),
        ("final_orientation", pa.string()),
        ("max_color", pa.int64()),
        ("distinct_colors", pa.int64()),
    ]
)
