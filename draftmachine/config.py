"""
Workflow settings.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

APPROVALS_REQUIRED_ENV = "DRAFTMACHINE_APPROVALS_REQUIRED"
STRICT_ENV = "DRAFTMACHINE_STRICT"

_TRUE_VALUES = ('true', '1', 'yes', 'on')
_FALSE_VALUES = ('false', '0', 'no', 'off')


class WorkflowSettings(BaseModel):
    """Settings that shape how a document moves through review.

    The defaults reproduce the classic workflow: two approvals publish a
    document, and operations that do not apply in the current state are
    silently ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "approvals_required": 2,
                "strict": False,
            }
        }
    )

    approvals_required: int = Field(
        2,
        ge=1,
        description="Number of approvals that move a pending document to published"
    )

    strict: bool = Field(
        False,
        description="Raise InvalidTransitionError instead of ignoring operations the current state does not accept"
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WorkflowSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            WorkflowSettings with unset variables left at their defaults

        Raises:
            ConfigurationError: If a variable holds an unusable value
        """
        if environ is None:
            environ = os.environ

        values: Dict[str, Any] = {}

        approvals = environ.get(APPROVALS_REQUIRED_ENV, '').strip()
        if approvals:
            values["approvals_required"] = approvals

        strict = environ.get(STRICT_ENV, '').strip().lower()
        if strict in _TRUE_VALUES:
            values["strict"] = True
        elif strict in _FALSE_VALUES:
            values["strict"] = False
        elif strict:
            raise ConfigurationError(f"{STRICT_ENV} must be a boolean, got {strict!r}")

        try:
            settings = cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid workflow configuration in environment: {e.errors()[0]['msg']}",
                original_exception=e,
            ) from e

        logger.debug(f"Loaded workflow settings from environment: {settings}")
        return settings
