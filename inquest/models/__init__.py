"""Inquest models package."""

from inquest.models.config import (
    InquestConfig,
    ShellConfig,
    RunnerConfig,
    LoggingConfig,
)
from inquest.models.resources import ResourceInfo
from inquest.models.session import (
    ShellSession,
    SubmittedStatement,
    TestOutcome,
    OutcomeStatus,
)
from inquest.models.target import TargetFacts, CommandResult

__all__ = [
    # Config
    "InquestConfig",
    "ShellConfig",
    "RunnerConfig",
    "LoggingConfig",
    # Resources
    "ResourceInfo",
    # Session
    "ShellSession",
    "SubmittedStatement",
    "TestOutcome",
    "OutcomeStatus",
    # Target
    "TargetFacts",
    "CommandResult",
]
