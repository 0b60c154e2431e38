"""
The document whose editorial workflow is driven by the state machine.
"""

import logging
from typing import Optional

from . import transitions
from .config import WorkflowSettings
from .models import Operation, Status
from .states import Draft, PendingReview, State

logger = logging.getLogger(__name__)


class Document:
    """A piece of content moving through Draft, PendingReview and Published.

    The document stores text and the current state. Every operation is
    forwarded to the transition table, and the resulting state replaces the
    current one by plain assignment, so a document always has a state.

    Example:
        >>> doc = Document()
        >>> doc.add_text("I ate a salad for lunch today")
        >>> doc.request_review()
        >>> doc.approve()
        >>> doc.approve()
        >>> doc.content()
        'I ate a salad for lunch today'
    """

    def __init__(self, settings: Optional[WorkflowSettings] = None):
        self._settings = settings or WorkflowSettings()
        self._state: State = Draft()
        self._content = ""

    def __repr__(self) -> str:
        return f"Document(state={self._state!r}, length={len(self._content)})"

    @property
    def settings(self) -> WorkflowSettings:
        return self._settings

    @property
    def state(self) -> State:
        """The current workflow state."""
        return self._state

    @property
    def status(self) -> Status:
        return self._state.status

    @property
    def approvals(self) -> int:
        """Approvals collected since the document entered review."""
        if isinstance(self._state, PendingReview):
            return self._state.approvals
        return 0

    @property
    def is_published(self) -> bool:
        return self._state.status is Status.PUBLISHED

    def add_text(self, text: str) -> None:
        """Append text while the document is a draft.

        Outside Draft the call is ignored, or raises InvalidTransitionError
        when the settings are strict.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")

        if not transitions.ensure_allowed(self._state, Operation.ADD_TEXT, self._settings):
            logger.debug(f"Ignoring add_text in state {self._state.name}")
            return

        self._content += text
        logger.debug(f"Appended {len(text)} characters in state {self._state.name}")

    def request_review(self) -> None:
        self._apply(Operation.REQUEST_REVIEW)

    def approve(self) -> None:
        self._apply(Operation.APPROVE)

    def reject(self) -> None:
        self._apply(Operation.REJECT)

    def content(self) -> str:
        """Return what a reader may see: empty unless published."""
        return self._state.visible_content(self._content)

    def _apply(self, operation: Operation) -> None:
        """Run ``operation`` through the transition table and adopt the result."""
        current = self._state
        next_state = transitions.transition(current, operation, self._settings)

        if next_state is current:
            logger.debug(f"Ignoring {operation.value} in state {current.name}")
            return

        self._state = next_state
        logger.debug(f"{operation.value}: {current!r} -> {next_state!r}")
