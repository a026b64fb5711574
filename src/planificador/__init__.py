"""
Planificador - hospital placement planner.

Submits synthetic K-means scenarios to a solver service and turns the
answer into plots, convergence analytics and per-hospital detail,
built with requests and Streamlit.
"""

__version__ = "0.1.0"

from planificador.core.scenario import ScenarioRequest, build_request
from planificador.client.solver import SolverClient
from planificador.session.controller import RequestController

__all__ = ["ScenarioRequest", "build_request", "SolverClient", "RequestController", "__version__"]
