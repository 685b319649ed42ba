"""CLI entrypoint: build a simulation, run it, export the final grid.

This module owns argument parsing, rule-spec parsing and exit statuses. The
stepping logic lives in ``ant_simulator.domain.simulation`` and the counted
loop in ``ant_simulator.simulation.engine``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ant_simulator.config.constants import (
    ANT_ORIENTATION,
    EXIT_BAD_ARGUMENT,
    EXIT_BAD_RULE,
    EXIT_INVALID_SIMULATION,
    EXIT_OK,
    EXIT_SIMULATION_FAILED,
    EXIT_USAGE,
    EXIT_WRITE_FAILED,
    GRID_COLOR,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_COLOR,
    MAX_ITERATIONS,
)
from ant_simulator.config.types import PGM_ENCODINGS, RunConfig, SimulationConfig
from ant_simulator.domain.orientation import Orientation
from ant_simulator.domain.rules import Rule, RuleTable, TurnDirection
from ant_simulator.domain.simulation import SimulationValidationError
from ant_simulator.io.persistence import build_run_summary, write_run_summary
from ant_simulator.io.pgm import write_pgm
from ant_simulator.metrics.grid import max_color
from ant_simulator.simulation.engine import run_simulation

logger = logging.getLogger(__name__)

RULE_PARTS = ("rule_color", "rule_replacementcolor", "rule_turndir")
"""Names of the three comma-separated fields of a rule spec, in order."""

# ---------------------------------------------------------------------------
# Rule-spec parsing
# ---------------------------------------------------------------------------


class RuleParseError(ValueError):
    """A ``color,replacement,turn`` rule spec could not be parsed."""

    def __init__(self, part: str, rule_number: int) -> None:
        self.part = part
        self.rule_number = rule_number
        super().__init__(f"failed to parse <{part}> for rule {rule_number}")


def _parse_color_field(raw: str, part: str, rule_number: int) -> int:
    digits = raw.strip()
    # Plain ASCII decimal only; int() would also take "1_0" or non-ASCII digits
    if not (digits.isascii() and digits.isdigit()):
        raise RuleParseError(part, rule_number)
    value = int(digits)
    if not 0 <= value <= MAX_COLOR:
        raise RuleParseError(part, rule_number)
    return value


def parse_rule_spec(raw: str, rule_number: int) -> tuple[int, Rule]:
    """Parse one ``color,replacement,turn`` triple; ``rule_number`` is 1-based."""
    fields = raw.split(",")
    if len(fields) > len(RULE_PARTS):
        raise RuleParseError(RULE_PARTS[-1], rule_number)
    fields += [""] * (len(RULE_PARTS) - len(fields))
    color = _parse_color_field(fields[0], RULE_PARTS[0], rule_number)
    replacement = _parse_color_field(fields[1], RULE_PARTS[1], rule_number)
    try:
        direction = TurnDirection.from_letter(fields[2])
    except ValueError as exc:
        raise RuleParseError(RULE_PARTS[2], rule_number) from exc
    return color, Rule.defined(replacement, direction)


def parse_rules(raw_rules: Sequence[str]) -> RuleTable:
    """Parse rule specs into a dense table; a later spec for a color wins."""
    rules: dict[int, Rule] = {}
    for rule_number, raw in enumerate(raw_rules, start=1):
        color, rule = parse_rule_spec(raw, rule_number)
        if color in rules:
            logger.warning("Rule %d overrides an earlier rule for color %d", rule_number, color)
        rules[color] = rule
    return RuleTable.from_mapping(rules)


# ---------------------------------------------------------------------------
# CLI > file > default resolution
# ---------------------------------------------------------------------------


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _coerce_str_list(raw: object, key: str) -> list[str]:
    if isinstance(raw, str):
        return raw.split()
    if isinstance(raw, list):
        return [_coerce_str(item, key) for item in raw]
    raise ValueError(f"{key} must be a list of strings")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_path(
    cli_val: Path | None, key: str, file_cfg: dict[str, object]
) -> Path | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else Path(_coerce_str(raw, key))


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="ant-simulator",
        description="Run a generalized Langton's ant and export the final grid as PGM",
    )
    parser.add_argument("output", type=Path, help="PGM file to write")
    parser.add_argument(
        "rules",
        nargs="*",
        metavar="COLOR,REPLACEMENT,TURN",
        help="rule triple; TURN is L, N or R (case-insensitive)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--max-iters", type=int, default=None)
    parser.add_argument("--grid-width", type=int, default=None)
    parser.add_argument("--grid-height", type=int, default=None)
    parser.add_argument("--grid-color", type=int, default=None)
    parser.add_argument("--ant-col", type=int, default=None)
    parser.add_argument("--ant-row", type=int, default=None)
    parser.add_argument(
        "--ant-orient",
        type=str,
        default=None,
        help="0-3 clockwise from north, or N/E/S/W",
    )
    parser.add_argument("--encoding", type=str, choices=PGM_ENCODINGS, default=None)
    parser.add_argument("--png", type=Path, default=None, help="also render the grid as PNG")
    parser.add_argument(
        "--summary-out",
        type=Path,
        default=None,
        help="write a one-row Parquet run summary",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _load_config_file(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        file_cfg = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except UnicodeDecodeError as exc:
        parser.error(f"Config file is not UTF-8 text: {path}: {exc}")
    except OSError as exc:
        parser.error(f"Config file could not be read: {path}: {exc}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(file_cfg, dict):
        parser.error(f"Config file must hold a JSON object: {path}")
    return file_cfg


def _error(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit status.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    file_cfg = _load_config_file(parser, args.config)

    try:
        max_iterations = _get_int(args.max_iters, "max_iters", file_cfg, MAX_ITERATIONS)
        grid_width = _get_int(args.grid_width, "grid_width", file_cfg, GRID_WIDTH)
        grid_height = _get_int(args.grid_height, "grid_height", file_cfg, GRID_HEIGHT)
        grid_color = _get_int(args.grid_color, "grid_color", file_cfg, GRID_COLOR)
        ant_col = _get_int(args.ant_col, "ant_col", file_cfg, (grid_width - 1) // 2)
        ant_row = _get_int(args.ant_row, "ant_row", file_cfg, (grid_height - 1) // 2)
        orient_raw = _get_str(args.ant_orient, "ant_orient", file_cfg, str(ANT_ORIENTATION))
        try:
            orientation = Orientation.from_token(orient_raw)
        except ValueError as exc:
            raise ValueError(f"ant_orient: {exc}") from exc
        run_config = RunConfig(
            output=args.output,
            max_iterations=max_iterations,
            encoding=_get_str(args.encoding, "encoding", file_cfg, "ascii"),
            png_path=_get_optional_path(args.png, "png", file_cfg),
            summary_path=_get_optional_path(args.summary_out, "summary_out", file_cfg),
        )
        raw_rules = args.rules or _coerce_str_list(file_cfg.get("rules", []), "rules")
    except ValueError as exc:
        _error(str(exc))
        return EXIT_BAD_ARGUMENT

    if not raw_rules:
        parser.print_usage(sys.stderr)
        _error("at least one rule is required")
        return EXIT_USAGE

    try:
        rules = parse_rules(raw_rules)
    except RuleParseError as exc:
        _error(str(exc))
        return EXIT_BAD_RULE

    sim_config = SimulationConfig(
        rules=rules,
        grid_width=grid_width,
        grid_height=grid_height,
        initial_color=grid_color,
        start_col=ant_col,
        start_row=ant_row,
        orientation=int(orientation),
    )
    try:
        simulation = sim_config.build()
    except SimulationValidationError as exc:
        _error(str(exc))
        return EXIT_INVALID_SIMULATION

    print("running simulation... ", end="", flush=True)
    try:
        result = run_simulation(simulation, run_config.max_iterations)
    except Exception:
        print("failed")
        logger.exception("Simulation aborted")
        return EXIT_SIMULATION_FAILED
    print("done")
    print(f"result: {result.termination_reason}")

    grid = simulation.grid()
    print(f"writing `{run_config.output}`... ", end="", flush=True)
    try:
        write_pgm(
            run_config.output,
            grid,
            simulation.grid_width,
            simulation.grid_height,
            max_value=max_color(grid),
            encoding=run_config.encoding,
        )
        if run_config.png_path is not None:
            from ant_simulator.viz.render import render_grid_png

            render_grid_png(simulation.grid_2d(), run_config.png_path, dpi=run_config.png_dpi)
        if run_config.summary_path is not None:
            row = build_run_summary(sim_config, result, grid, run_config.max_iterations)
            write_run_summary(run_config.summary_path, [row])
    except (OSError, ValueError) as exc:
        print("failed")
        _error(str(exc))
        return EXIT_WRITE_FAILED
    print("done")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
