"""
Models describing the target a shell is connected to.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TargetFacts(BaseModel):
    """Snapshot of operating system facts reported by the backend."""

    name: str | None = Field(default=None, description="Platform name (e.g. ubuntu)")
    family: str | None = Field(default=None, description="Platform family (e.g. debian)")
    release: str | None = Field(default=None, description="Platform release")


class CommandResult(BaseModel):
    """Result of a command executed on the target."""

    command: str = Field(description="Command line that was executed")
    stdout: str = Field(default="")
    stderr: str = Field(default="")
    exit_status: int = Field(default=0)
