"""Core layer: scenario drafts, validation, result entities and errors."""

from planificador.core.entities import ViewTab, DEFAULT_TAB, RequestStatus, CLUSTER_PALETTE
from planificador.core.errors import (
    PlanificadorError,
    ScenarioValidationError,
    SolverRequestError,
    SolverTransportError,
)
from planificador.core.result import (
    Coordinates,
    Neighborhood,
    Hospital,
    Metrics,
    HospitalSummary,
    SimulationResult,
)
from planificador.core.scenario import (
    ScenarioDraft,
    ScenarioRequest,
    DEFAULT_DRAFT,
    draft_from_form,
    validate,
    build_request,
)

__all__ = [
    "ViewTab",
    "DEFAULT_TAB",
    "RequestStatus",
    "CLUSTER_PALETTE",
    "PlanificadorError",
    "ScenarioValidationError",
    "SolverRequestError",
    "SolverTransportError",
    "Coordinates",
    "Neighborhood",
    "Hospital",
    "Metrics",
    "HospitalSummary",
    "SimulationResult",
    "ScenarioDraft",
    "ScenarioRequest",
    "DEFAULT_DRAFT",
    "draft_from_form",
    "validate",
    "build_request",
]
