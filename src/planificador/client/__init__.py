"""Solver service client."""

from planificador.client.solver import SolverClient, SIMULATE_PATH

__all__ = ["SolverClient", "SIMULATE_PATH"]
