"""
State values for the editorial workflow.

Each state is an immutable value. Moving a document along the workflow never
mutates a state; the transition table in :mod:`draftmachine.transitions`
returns a new value that the document adopts.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .models import Status


class State(ABC):
    """Base class for all workflow states.

    States answer two queries about the document that owns them: whether its
    text may be modified, and what a reader is allowed to see.
    """

    @property
    @abstractmethod
    def status(self) -> Status:
        """The status this state represents."""
        pass

    @property
    def name(self) -> str:
        """State name for logging and debugging."""
        return self.__class__.__name__

    def can_modify(self) -> bool:
        """Whether text may be appended while in this state."""
        return False

    def visible_content(self, content: str) -> str:
        """Return the part of ``content`` a reader may see in this state."""
        return ""


@dataclass(frozen=True)
class Draft(State):
    """Initial state: text is editable but hidden from readers."""

    @property
    def status(self) -> Status:
        return Status.DRAFT

    def can_modify(self) -> bool:
        return True


@dataclass(frozen=True)
class PendingReview(State):
    """Awaiting approvals; text is frozen and hidden.

    The approvals counter belongs to this state alone, so rejecting the
    document throws it away and a resubmission starts again from zero.
    """

    approvals: int = 0

    def __post_init__(self):
        if self.approvals < 0:
            raise ValueError(f"approvals must be non-negative, got {self.approvals}")

    @property
    def status(self) -> Status:
        return Status.PENDING_REVIEW


@dataclass(frozen=True)
class Published(State):
    """Final state: text is frozen and visible."""

    @property
    def status(self) -> Status:
        return Status.PUBLISHED

    def visible_content(self, content: str) -> str:
        return content
