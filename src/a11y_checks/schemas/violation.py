"""
Violation schema - the outcome of a failed rule.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .element import Element


class Severity(str, Enum):
    """
    Advisory severity.

    FAILURE should be fixed; WARNING should be reviewed. Mapping either to a
    hard test failure is left to the caller.
    """

    FAILURE = "failure"
    WARNING = "warning"

    @property
    def heading(self) -> str:
        return self.value.capitalize()


class Violation(BaseModel):
    """
    One reported rule outcome.
    """

    model_config = ConfigDict(frozen=True)

    severity: Severity = Field(description="Failure or warning")
    message: str = Field(description="What is wrong, without element details")
    reason: Optional[str] = Field(
        default=None, description="Threshold or offending value, if any"
    )
    elements: Tuple[Element, ...] = Field(
        default=(), description="Elements implicated by the violation"
    )
    rule: Optional[str] = Field(
        default=None, description="Rule name, or 'snapshot' for snapshot diffs"
    )
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Structured values behind the message"
    )

    @property
    def is_failure(self) -> bool:
        return self.severity == Severity.FAILURE

    @property
    def text(self) -> str:
        """Formatted one-line report."""
        from ..services.reporting import format_message

        return format_message(self.severity, self.message, self.elements, self.reason)

    def __str__(self) -> str:
        return self.text
