"""
Custom exceptions for the editorial workflow.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Operation
    from .states import State


class DraftMachineError(Exception):
    """Base exception for workflow errors."""

    pass


class InvalidTransitionError(DraftMachineError):
    """Raised in strict mode when an operation has no rule in the current state."""

    def __init__(self, state: "State", operation: "Operation", message=None):
        self.state = state
        self.operation = operation
        self.message = message or (
            f"Cannot {operation.verb}: document is in state {state.name}"
        )
        super().__init__(self.message)


class ConfigurationError(DraftMachineError):
    """Raised when workflow settings cannot be built from the environment."""

    def __init__(self, message="Invalid workflow configuration", original_exception=None):
        self.message = message
        self.original_exception = original_exception
        super().__init__(self.message)
