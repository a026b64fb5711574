"""Exceptions raised between the form, the solver client and the UI."""

from typing import List, Optional


REQUEST_FALLBACK_MESSAGE = "No pudimos completar la simulación. Intenta de nuevo."
TRANSPORT_FALLBACK_MESSAGE = "Ocurrió un error inesperado al comunicarse con el backend."


class PlanificadorError(Exception):
    """Base class for planner errors surfaced to the operator."""


class ScenarioValidationError(PlanificadorError):
    """The scenario draft has one or more malformed parameters.

    Attributes:
        errors: Every rule violation, in rule order.
    """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(" ".join(self.errors))


class SolverRequestError(PlanificadorError):
    """The solver answered with a non-2xx status.

    The message is the raw response body when there is one, otherwise
    REQUEST_FALLBACK_MESSAGE.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class SolverTransportError(PlanificadorError):
    """Network failure, timeout or unreadable response body."""

    def __init__(self, message: str = TRANSPORT_FALLBACK_MESSAGE):
        super().__init__(message)
