"""Tests for the application decision state machine."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.cobrew.core.exceptions import ConflictError
from src.cobrew.models import ApplicationStatus
from src.cobrew.services.application_state import (
    InvalidTransitionError,
    can_transition,
    transition,
)

pytestmark = pytest.mark.unit

PENDING = ApplicationStatus.PENDING
APPROVED = ApplicationStatus.APPROVED
REJECTED = ApplicationStatus.REJECTED

statuses = st.sampled_from(list(ApplicationStatus))


class TestTransition:
    @pytest.mark.parametrize("requested", [APPROVED, REJECTED])
    def test_pending_can_be_decided(self, requested):
        assert transition(PENDING, requested) == requested

    @pytest.mark.parametrize("status", list(ApplicationStatus))
    def test_restating_current_status_is_a_no_op(self, status):
        assert transition(status, status) == status

    @pytest.mark.parametrize(
        ("current", "requested"),
        [
            (APPROVED, REJECTED),
            (REJECTED, APPROVED),
            (APPROVED, PENDING),
            (REJECTED, PENDING),
        ],
    )
    def test_decided_application_cannot_change(self, current, requested):
        with pytest.raises(InvalidTransitionError) as exc_info:
            transition(current, requested)

        assert exc_info.value.current == current
        assert exc_info.value.requested == requested

    def test_invalid_transition_is_a_conflict(self):
        with pytest.raises(ConflictError) as exc_info:
            transition(APPROVED, REJECTED)

        assert exc_info.value.status_code == 409
        assert "approved" in exc_info.value.detail


@given(current=statuses, requested=statuses)
def test_terminal_states_never_move(current, requested):
    """Once decided, the only accepted request is the same decision."""
    if current.is_terminal:
        assert can_transition(current, requested) is (requested == current)


@given(current=statuses, requested=statuses)
def test_transition_agrees_with_can_transition(current, requested):
    if can_transition(current, requested):
        assert transition(current, requested) == requested
    else:
        with pytest.raises(InvalidTransitionError):
            transition(current, requested)


@given(requested=statuses)
def test_nothing_returns_to_pending_after_a_decision(requested):
    result = transition(PENDING, requested)
    if result != PENDING:
        assert not can_transition(result, PENDING)
