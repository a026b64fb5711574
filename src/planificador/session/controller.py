"""Request controller: owns the submission lifecycle for one UI session.

The controller issues a generation number per submission, performs the
solver call, and feeds the outcome back through the reducer. Splitting
`begin` from `settle` lets callers (and tests) interleave overlapping
submissions explicitly:

    controller = RequestController(client)
    a = controller.begin()
    b = controller.begin()
    controller.settle(b, result=result_b)
    controller.settle(a, result=result_a)   # last to settle wins
    assert controller.state.result is result_a
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from planificador.client.solver import SolverClient
from planificador.core.entities import ViewTab
from planificador.core.errors import PlanificadorError, ScenarioValidationError
from planificador.core.result import SimulationResult
from planificador.core.scenario import ScenarioDraft, ScenarioRequest, build_request
from planificador.session.state import (
    Action,
    AppState,
    DraftEdited,
    SubmissionFailed,
    SubmissionStarted,
    SubmissionSucceeded,
    TabSelected,
    ValidationFailed,
    reduce,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionOutcome:
    """What happened to one submit call.

    Attributes:
        generation: Submission number, None if validation stopped it.
        result: Solver result on success.
        error: Message surfaced to the operator on failure.
        errors: Individual validation messages, if any.
        applied: Whether the outcome reached the stored state.
    """
    generation: Optional[int]
    result: Optional[SimulationResult] = None
    error: Optional[str] = None
    errors: Tuple[str, ...] = ()
    applied: bool = False

    @property
    def ok(self) -> bool:
        return self.result is not None


class RequestController:
    """Drives AppState through submissions, settlements and tab changes.

    Attributes:
        client: Solver client used by `submit`.
        discard_stale: Drop settlements from superseded submissions instead
            of letting the last one to settle win.
    """

    def __init__(
        self,
        client: SolverClient,
        discard_stale: bool = False,
        state: Optional[AppState] = None,
    ):
        self.client = client
        self.discard_stale = discard_stale
        self._state = state or AppState()
        self._next_generation = self._state.latest_generation + 1

    @property
    def state(self) -> AppState:
        """Current session state."""
        return self._state

    def dispatch(self, action: Action) -> AppState:
        """Run one action through the reducer and store the new state."""
        self._state = reduce(self._state, action, discard_stale=self.discard_stale)
        return self._state

    def edit_draft(self, draft: ScenarioDraft) -> AppState:
        return self.dispatch(DraftEdited(draft))

    def select_tab(self, tab: ViewTab) -> AppState:
        """Switch the visible result view. Every tab is reachable from every tab."""
        return self.dispatch(TabSelected(tab))

    def begin(self) -> int:
        """Mark a new submission as in flight and return its generation."""
        generation = self._next_generation
        self._next_generation += 1
        self.dispatch(SubmissionStarted(generation))
        logger.info(f"Submission {generation} started")
        return generation

    def settle(
        self,
        generation: int,
        result: Optional[SimulationResult] = None,
        error: Optional[str] = None,
    ) -> bool:
        """Feed the outcome of a submission back into the state.

        Exactly one of `result` or `error` must be given.

        Returns:
            True if the outcome was stored, False if it was discarded as stale.

        Raises:
            ValueError: If both or neither of result and error are given.
        """
        if (result is None) == (error is None):
            raise ValueError("settle() needs exactly one of result or error")

        stale = self.discard_stale and self._state.is_stale(generation)
        if result is not None:
            self.dispatch(SubmissionSucceeded(generation, result))
        else:
            self.dispatch(SubmissionFailed(generation, error))

        if stale:
            logger.info(
                f"Submission {generation} settled after newer submission "
                f"{self._state.latest_generation}; discarded"
            )
            return False
        if result is not None:
            logger.info(
                f"Submission {generation} succeeded: {len(result.neighborhoods)} neighborhoods, "
                f"{len(result.hospitals)} hospitals"
            )
        else:
            logger.warning(f"Submission {generation} failed: {error}")
        return True

    def submit(self, request: ScenarioRequest) -> SubmissionOutcome:
        """Send one validated scenario to the solver and store the outcome.

        Solver errors never escape; they become the error slot of the state.
        """
        generation = self.begin()
        try:
            result = self.client.simulate(request)
        except PlanificadorError as exc:
            message = str(exc)
            applied = self.settle(generation, error=message)
            return SubmissionOutcome(generation, error=message, applied=applied)

        applied = self.settle(generation, result=result)
        return SubmissionOutcome(generation, result=result, applied=applied)

    def submit_draft(self, draft: Optional[ScenarioDraft] = None) -> SubmissionOutcome:
        """Validate a draft and submit it if every rule passes.

        Args:
            draft: Form values; defaults to the draft held in the state.

        Returns:
            The outcome. When validation fails no request is made and
            `generation` is None.
        """
        if draft is not None:
            self.edit_draft(draft)
        try:
            request = build_request(self._state.draft)
        except ScenarioValidationError as exc:
            self.dispatch(ValidationFailed(exc.errors))
            return SubmissionOutcome(None, error=str(exc), errors=tuple(exc.errors))
        return self.submit(request)

