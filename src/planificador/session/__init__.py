"""Session layer: UI state reducer and the request controller."""

from planificador.session.state import (
    AppState,
    DraftEdited,
    ValidationFailed,
    SubmissionStarted,
    SubmissionSucceeded,
    SubmissionFailed,
    TabSelected,
    reduce,
)
from planificador.session.controller import RequestController, SubmissionOutcome

__all__ = [
    "AppState",
    "DraftEdited",
    "ValidationFailed",
    "SubmissionStarted",
    "SubmissionSucceeded",
    "SubmissionFailed",
    "TabSelected",
    "reduce",
    "RequestController",
    "SubmissionOutcome",
]
