"""
An editorial workflow modelled as an explicit finite-state machine.

A document starts as a Draft, moves to PendingReview when submitted, and is
Published once it collects enough approvals. The current state decides
whether text may be appended and whether readers can see it.
"""

from .config import WorkflowSettings
from .document import Document
from .exceptions import ConfigurationError, DraftMachineError, InvalidTransitionError
from .models import Operation, Status
from .states import Draft, PendingReview, Published, State

__version__ = "0.1.0"
__author__ = "DraftMachine Contributors"
__license__ = "MIT"

__all__ = [
    "Document",
    "State",
    "Draft",
    "PendingReview",
    "Published",
    "Status",
    "Operation",
    "WorkflowSettings",
    "DraftMachineError",
    "InvalidTransitionError",
    "ConfigurationError",
]
