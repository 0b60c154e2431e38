"""
Transition table for the editorial workflow.

Every rule is a pure function from the current state to the next one. The
table is keyed on ``(state class, operation)``; pairs missing from it have no
rule, which means "stay where you are" unless the settings ask for strict
behavior.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple, Type

from .config import WorkflowSettings
from .exceptions import InvalidTransitionError
from .models import Operation
from .states import Draft, PendingReview, Published, State

logger = logging.getLogger(__name__)

Rule = Callable[[State, WorkflowSettings], State]

DEFAULT_SETTINGS = WorkflowSettings()


def _submit_draft(state: State, settings: WorkflowSettings) -> State:
    return PendingReview(approvals=0)


def _approve_pending(state: State, settings: WorkflowSettings) -> State:
    assert isinstance(state, PendingReview)
    approvals = state.approvals + 1
    if approvals >= settings.approvals_required:
        return Published()
    return PendingReview(approvals=approvals)


def _reject_pending(state: State, settings: WorkflowSettings) -> State:
    # The approvals counter goes away with the PendingReview value
    return Draft()


TRANSITIONS: Dict[Tuple[Type[State], Operation], Rule] = {
    (Draft, Operation.REQUEST_REVIEW): _submit_draft,
    (PendingReview, Operation.APPROVE): _approve_pending,
    (PendingReview, Operation.REJECT): _reject_pending,
}


def is_defined(state: State, operation: Operation) -> bool:
    """Check whether ``operation`` has an explicit rule in ``state``.

    ``ADD_TEXT`` never changes the state, so it is defined exactly when the
    state allows modification.
    """
    if operation is Operation.ADD_TEXT:
        return state.can_modify()
    return (type(state), operation) in TRANSITIONS


def available_operations(state: State) -> List[Operation]:
    """List the operations with an explicit rule in ``state``."""
    return [operation for operation in Operation if is_defined(state, operation)]


def ensure_allowed(state: State, operation: Operation,
                   settings: Optional[WorkflowSettings] = None) -> bool:
    """Decide whether ``operation`` may run in ``state``.

    Returns:
        True if the operation has a rule, False if it should be ignored

    Raises:
        InvalidTransitionError: If the operation has no rule and the
            settings are strict
    """
    if is_defined(state, operation):
        return True

    settings = settings or DEFAULT_SETTINGS
    if settings.strict:
        error = InvalidTransitionError(state, operation)
        logger.warning(f"Refusing operation: {error.message}")
        raise error
    return False


def transition(state: State, operation: Operation,
               settings: Optional[WorkflowSettings] = None) -> State:
    """Return the state that follows ``state`` when ``operation`` is applied.

    Args:
        state: The current state
        operation: The requested operation
        settings: Workflow settings (defaults to WorkflowSettings())

    Returns:
        The next state, or ``state`` itself when no rule applies

    Raises:
        InvalidTransitionError: If no rule applies and settings are strict
    """
    settings = settings or DEFAULT_SETTINGS
    if not ensure_allowed(state, operation, settings):
        return state

    rule = TRANSITIONS.get((type(state), operation))
    if rule is None:
        # ADD_TEXT is allowed but does not move the workflow
        return state
    return rule(state, settings)


def request_review(state: State, settings: Optional[WorkflowSettings] = None) -> State:
    """Submit a draft for review."""
    return transition(state, Operation.REQUEST_REVIEW, settings)


def approve(state: State, settings: Optional[WorkflowSettings] = None) -> State:
    """Record one approval on a pending document."""
    return transition(state, Operation.APPROVE, settings)


def reject(state: State, settings: Optional[WorkflowSettings] = None) -> State:
    """Send a pending document back to draft."""
    return transition(state, Operation.REJECT, settings)
