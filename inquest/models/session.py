"""
Shell session and statement evaluation models.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ShellSession(BaseModel):
    """
    State of one interactive shell session.

    ``active_context`` is the evaluation context acquired from the runner
    when the session starts; it is ``None`` once the session has ended.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    current_line: int = Field(default=0, ge=0, description="Number of statements submitted")
    active_context: Any = Field(default=None, description="Runner evaluation context")

    @property
    def is_active(self) -> bool:
        return self.active_context is not None


class SubmittedStatement(BaseModel):
    """One line of shell input, submitted to the runner as a single test."""

    content: str = Field(description="Statement source as typed")
    ref: str = Field(description="Label identifying where the statement came from")
    line: int = Field(ge=1, description="Shell line number at submission time")


class OutcomeStatus(str, Enum):
    """Status of an evaluated statement."""

    PASSED = "passed"
    FAILED = "failed"


class TestOutcome(BaseModel):
    """Outcome of evaluating one submitted statement."""

    __test__ = False

    model_config = ConfigDict(arbitrary_types_allowed=True)

    statement: SubmittedStatement
    status: OutcomeStatus
    value: Any = Field(default=None, description="Expression value, if any")
    has_value: bool = Field(default=False, description="Whether the statement was an expression")
    error: str | None = Field(default=None, description="Error message if failed")
    error_type: str | None = Field(default=None, description="Exception class name if failed")
    duration: float = Field(default=0.0, description="Evaluation time in seconds")

    @property
    def passed(self) -> bool:
        return self.status == OutcomeStatus.PASSED

    def get_summary(self) -> str:
        """Get a brief summary of the outcome."""
        return f"[{self.status.value.upper()}] {self.statement.ref}:{self.statement.line}"
