"""
Core enumerations for the editorial workflow.
"""

from enum import Enum


class Status(Enum):
    """Enumeration of workflow states a document can be in."""

    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    PUBLISHED = "published"


class Operation(Enum):
    """Enumeration of operations a caller can request on a document."""

    ADD_TEXT = "add_text"
    REQUEST_REVIEW = "request_review"
    APPROVE = "approve"
    REJECT = "reject"

    @property
    def verb(self) -> str:
        """Human-readable verb used in error messages."""
        return self.value.replace("_", " ")
