"""Simulation driver: the counted stepping loop."""

from ant_simulator.simulation.engine import run_simulation

__all__ = ["run_simulation"]
