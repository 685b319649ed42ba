"""Input/output: PGM raster export and Parquet run summaries."""

from ant_simulator.io.persistence import build_run_summary, write_run_summary
from ant_simulator.io.pgm import PgmEncoding, decode_pgm, encode_pgm, read_pgm, write_pgm
from ant_simulator.io.schemas import RUN_SUMMARY_SCHEMA

__all__ = [
    "PgmEncoding",
    "RUN_SUMMARY_SCHEMA",
    "build_run_summary",
    "decode_pgm",
    "encode_pgm",
    "read_pgm",
    "write_pgm",
    "write_run_summary",
]
