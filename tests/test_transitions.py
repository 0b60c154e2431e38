"""Tests for the transition table."""

import pytest

from draftmachine import (
    Draft,
    InvalidTransitionError,
    Operation,
    PendingReview,
    Published,
    WorkflowSettings,
)
from draftmachine import transitions


class TestTransitionTable:
    """Test every explicit rule in the table."""

    def test_draft_request_review(self):
        assert transitions.request_review(Draft()) == PendingReview(approvals=0)

    def test_first_approval_stays_pending(self):
        assert transitions.approve(PendingReview(0)) == PendingReview(1)

    def test_second_approval_publishes(self):
        assert transitions.approve(PendingReview(1)) == Published()

    def test_reject_discards_approvals(self):
        assert transitions.reject(PendingReview(1)) == Draft()

    def test_generic_transition_matches_helpers(self):
        assert transitions.transition(Draft(), Operation.REQUEST_REVIEW) == PendingReview(0)
        assert transitions.transition(PendingReview(1), Operation.APPROVE) == Published()
        assert transitions.transition(PendingReview(0), Operation.REJECT) == Draft()


class TestUndefinedOperations:
    """Operations without a rule leave the state unchanged."""

    @pytest.mark.parametrize("state, operation", [
        (Draft(), Operation.APPROVE),
        (Draft(), Operation.REJECT),
        (PendingReview(1), Operation.REQUEST_REVIEW),
        (Published(), Operation.REQUEST_REVIEW),
        (Published(), Operation.APPROVE),
        (Published(), Operation.REJECT),
    ])
    def test_returns_same_state(self, state, operation):
        assert transitions.transition(state, operation) is state

    def test_add_text_never_moves_the_workflow(self):
        state = Draft()
        assert transitions.transition(state, Operation.ADD_TEXT) is state

    @pytest.mark.parametrize("state, operation", [
        (Draft(), Operation.APPROVE),
        (PendingReview(0), Operation.ADD_TEXT),
        (Published(), Operation.REJECT),
    ])
    def test_strict_settings_raise(self, state, operation):
        settings = WorkflowSettings(strict=True)

        with pytest.raises(InvalidTransitionError) as exc_info:
            transitions.transition(state, operation, settings)

        assert exc_info.value.state is state
        assert exc_info.value.operation is operation


class TestApprovalQuota:
    """Test the configurable number of approvals."""

    def test_single_approval_quota(self):
        settings = WorkflowSettings(approvals_required=1)
        assert transitions.approve(PendingReview(0), settings) == Published()

    def test_three_approval_quota(self):
        settings = WorkflowSettings(approvals_required=3)
        state = PendingReview(0)

        state = transitions.approve(state, settings)
        assert state == PendingReview(1)
        state = transitions.approve(state, settings)
        assert state == PendingReview(2)
        state = transitions.approve(state, settings)
        assert state == Published()


class TestIntrospection:
    """Test is_defined and available_operations."""

    def test_draft_operations(self):
        assert transitions.available_operations(Draft()) == [
            Operation.ADD_TEXT,
            Operation.REQUEST_REVIEW,
        ]

    def test_pending_operations(self):
        assert transitions.available_operations(PendingReview(1)) == [
            Operation.APPROVE,
            Operation.REJECT,
        ]

    def test_published_has_no_operations(self):
        assert transitions.available_operations(Published()) == []

    def test_is_defined(self):
        assert transitions.is_defined(Draft(), Operation.ADD_TEXT)
        assert not transitions.is_defined(PendingReview(), Operation.ADD_TEXT)
        assert transitions.is_defined(PendingReview(), Operation.REJECT)
        assert not transitions.is_defined(Published(), Operation.APPROVE)

    def test_ensure_allowed_lenient(self):
        assert transitions.ensure_allowed(Draft(), Operation.REQUEST_REVIEW) is True
        assert transitions.ensure_allowed(Published(), Operation.APPROVE) is False
