"""UI session state and the single reducer that updates it.

Every change to what the operator sees goes through `reduce(state, action)`.
The reducer is pure: it returns a new AppState and never touches the
network, so submission races and the tab reset can be tested in isolation.

Transitions:
    DraftEdited          -> draft replaced
    ValidationFailed     -> error set; result, tab and pending untouched
    SubmissionStarted    -> generation marked pending, error cleared
    SubmissionSucceeded  -> result replaced, error cleared, tab reset to PLOT
    SubmissionFailed     -> result cleared, error set, tab untouched
    TabSelected          -> active tab replaced (any tab from any tab)

Settlements are applied in the order they arrive, so when two submissions
overlap the one that settles last wins. With `discard_stale=True` a
settlement for anything but the newest submission only clears its pending
mark.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Optional, Union

from planificador.core.entities import DEFAULT_TAB, RequestStatus, ViewTab
from planificador.core.result import SimulationResult
from planificador.core.scenario import DEFAULT_DRAFT, ScenarioDraft


@dataclass(frozen=True)
class AppState:
    """Everything the page renders from.

    Attributes:
        draft: Current form values.
        result: Last stored simulation result, if any.
        error: Message shown in the alert box, if any.
        active_tab: Result view currently shown.
        outcome: How the most recent applied settlement ended.
        pending: Generations issued but not yet settled.
        latest_generation: Highest generation issued so far.
        result_generation: Generation that produced `result`.
    """
    draft: ScenarioDraft = DEFAULT_DRAFT
    result: Optional[SimulationResult] = None
    error: Optional[str] = None
    active_tab: ViewTab = DEFAULT_TAB
    outcome: RequestStatus = RequestStatus.IDLE
    pending: FrozenSet[int] = field(default_factory=frozenset)
    latest_generation: int = 0
    result_generation: Optional[int] = None

    @property
    def status(self) -> RequestStatus:
        """SUBMITTING while anything is pending, else the last outcome."""
        if self.pending:
            return RequestStatus.SUBMITTING
        return self.outcome

    @property
    def loading(self) -> bool:
        """True while any submission is in flight."""
        return bool(self.pending)

    def is_stale(self, generation: int) -> bool:
        """True if a newer submission has been issued since `generation`."""
        return generation < self.latest_generation


@dataclass(frozen=True)
class DraftEdited:
    draft: ScenarioDraft


@dataclass(frozen=True)
class ValidationFailed:
    errors: List[str]


@dataclass(frozen=True)
class SubmissionStarted:
    generation: int


@dataclass(frozen=True)
class SubmissionSucceeded:
    generation: int
    result: SimulationResult


@dataclass(frozen=True)
class SubmissionFailed:
    generation: int
    message: str


@dataclass(frozen=True)
class TabSelected:
    tab: ViewTab


Action = Union[
    DraftEdited,
    ValidationFailed,
    SubmissionStarted,
    SubmissionSucceeded,
    SubmissionFailed,
    TabSelected,
]


def reduce(state: AppState, action: Action, discard_stale: bool = False) -> AppState:
    """Apply one action to the session state.

    Args:
        state: Current state.
        action: Transition to apply.
        discard_stale: Ignore settlements from superseded submissions.

    Returns:
        The new state. `state` itself is never modified.

    Raises:
        TypeError: For an object that is not one of the Action types.
    """
    if isinstance(action, DraftEdited):
        return replace(state, draft=action.draft)

    if isinstance(action, ValidationFailed):
        return replace(state, error=" ".join(action.errors))

    if isinstance(action, SubmissionStarted):
        return replace(
            state,
            error=None,
            pending=state.pending | {action.generation},
            latest_generation=max(state.latest_generation, action.generation),
        )

    if isinstance(action, (SubmissionSucceeded, SubmissionFailed)):
        pending = state.pending - {action.generation}
        if discard_stale and state.is_stale(action.generation):
            return replace(state, pending=pending)

        if isinstance(action, SubmissionSucceeded):
            return replace(
                state,
                result=action.result,
                result_generation=action.generation,
                error=None,
                active_tab=DEFAULT_TAB,
                pending=pending,
                outcome=RequestStatus.SUCCEEDED,
            )

        return replace(
            state,
            result=None,
            result_generation=None,
            error=action.message,
            pending=pending,
            outcome=RequestStatus.FAILED,
        )

    if isinstance(action, TabSelected):
        return replace(state, active_tab=action.tab)

    raise TypeError(f"Unknown action: {action!r}")
