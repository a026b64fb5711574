"""Tests for the session state reducer."""

from dataclasses import replace

import pytest

from planificador.core.entities import DEFAULT_TAB, RequestStatus, ViewTab
from planificador.core.scenario import DEFAULT_DRAFT, ScenarioDraft
from planificador.session.state import (
    AppState,
    DraftEdited,
    SubmissionFailed,
    SubmissionStarted,
    SubmissionSucceeded,
    TabSelected,
    ValidationFailed,
    reduce,
)


class TestInitialState:
    """Test the empty session."""

    def test_defaults(self):
        state = AppState()

        assert state.draft == DEFAULT_DRAFT
        assert state.result is None
        assert state.error is None
        assert state.active_tab is ViewTab.PLOT
        assert state.status is RequestStatus.IDLE
        assert not state.loading


class TestTabTransitions:
    """Test the view state machine."""

    @pytest.mark.parametrize("start", list(ViewTab))
    @pytest.mark.parametrize("target", list(ViewTab))
    def test_every_tab_reachable_from_every_tab(self, start, target):
        state = AppState(active_tab=start)
        assert reduce(state, TabSelected(target)).active_tab is target

    def test_success_resets_to_default_tab(self, sample_result):
        state = AppState(active_tab=ViewTab.DETAIL)
        state = reduce(state, SubmissionStarted(1))
        state = reduce(state, SubmissionSucceeded(1, sample_result))

        assert state.active_tab is DEFAULT_TAB

    def test_failure_keeps_tab(self):
        state = AppState(active_tab=ViewTab.ANALYTICS)
        state = reduce(state, SubmissionStarted(1))
        state = reduce(state, SubmissionFailed(1, "boom"))

        assert state.active_tab is ViewTab.ANALYTICS

    def test_submission_start_keeps_tab(self):
        state = reduce(AppState(active_tab=ViewTab.DETAIL), SubmissionStarted(1))
        assert state.active_tab is ViewTab.DETAIL


class TestSubmissionTransitions:
    """Test result and error slots across the request lifecycle."""

    def test_start_clears_error_and_marks_pending(self):
        state = reduce(AppState(error="old"), SubmissionStarted(1))

        assert state.error is None
        assert state.loading
        assert state.status is RequestStatus.SUBMITTING
        assert state.latest_generation == 1

    def test_success_stores_result(self, sample_result):
        state = reduce(AppState(), SubmissionStarted(1))
        state = reduce(state, SubmissionSucceeded(1, sample_result))

        assert state.result is sample_result
        assert state.result_generation == 1
        assert state.error is None
        assert not state.loading
        assert state.status is RequestStatus.SUCCEEDED

    def test_failure_clears_result(self, sample_result):
        state = AppState(result=sample_result)
        state = reduce(state, SubmissionStarted(2))
        state = reduce(state, SubmissionFailed(2, "Solver caído"))

        assert state.result is None
        assert state.error == "Solver caído"
        assert state.status is RequestStatus.FAILED

    def test_validation_failure_keeps_result(self, sample_result):
        state = AppState(result=sample_result)
        state = reduce(state, ValidationFailed(["m debe ser mayor a 0.", "K debe ser mayor a 0."]))

        assert state.result is sample_result
        assert state.error == "m debe ser mayor a 0. K debe ser mayor a 0."
        assert not state.loading

    def test_draft_edit(self):
        draft = ScenarioDraft(m=50, num_neighborhoods=100, k=4)
        assert reduce(AppState(), DraftEdited(draft)).draft == draft

    def test_reducer_does_not_mutate_input(self, sample_result):
        before = AppState()
        after = reduce(before, SubmissionStarted(1))

        assert before.pending == frozenset()
        assert after is not before

    def test_unknown_action_raises(self):
        with pytest.raises(TypeError):
            reduce(AppState(), object())


class TestOverlappingSubmissions:
    """Test interleaved settlements."""

    def test_last_settled_wins(self, sample_result):
        result_a = sample_result
        result_b = replace(sample_result, grid_size=50)
        state = reduce(AppState(), SubmissionStarted(1))
        state = reduce(state, SubmissionStarted(2))
        state = reduce(state, SubmissionSucceeded(2, result_b))

        assert state.loading  # submission 1 still pending

        state = reduce(state, SubmissionSucceeded(1, result_a))

        assert state.result is result_a
        assert state.result_generation == 1
        assert not state.loading

    def test_discard_stale_keeps_newest(self, sample_result):
        newest = sample_result
        state = reduce(AppState(), SubmissionStarted(1))
        state = reduce(state, SubmissionStarted(2))
        state = reduce(state, SubmissionSucceeded(2, newest), discard_stale=True)
        state = reduce(state, SubmissionFailed(1, "late failure"), discard_stale=True)

        assert state.result is newest
        assert state.error is None
        assert state.status is RequestStatus.SUCCEEDED
        assert not state.loading
