"""Counted driving loop around ``Simulation.step_once``."""

from __future__ import annotations

import logging

from ant_simulator.config.constants import PROGRESS_LOG_INTERVAL
from ant_simulator.config.types import RunResult
from ant_simulator.domain.simulation import Simulation

logger = logging.getLogger(__name__)


def run_simulation(
    simulation: Simulation,
    max_iterations: int,
    progress_interval: int = PROGRESS_LOG_INTERVAL,
) -> RunResult:
    """Step ``simulation`` until it hits the boundary or ``max_iterations`` steps ran.

    ``max_iterations`` counts steps taken by this call; a simulation that is
    already finished is returned untouched.
    """
    if max_iterations < 0:
        raise ValueError("max_iterations must be >= 0")
    if progress_interval < 1:
        raise ValueError("progress_interval must be >= 1")

    logger.info(
        "Running %dx%d simulation for up to %d iterations",
        simulation.grid_width,
        simulation.grid_height,
        max_iterations,
    )
    iterations = 0
    while iterations < max_iterations and not simulation.is_finished():
        simulation.step_once()
        iterations += 1
        if iterations % progress_interval == 0:
            logger.debug("%d iterations, ant at %s", iterations, simulation.position)

    result = RunResult(
        iterations=iterations,
        step_result=simulation.last_step_result(),
        position=simulation.position,
        orientation=simulation.orientation,
    )
    logger.info("Stopped after %d iterations: %s", iterations, result.termination_reason)
    return result
