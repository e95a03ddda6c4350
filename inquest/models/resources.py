"""
Resource catalog models.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ResourceInfo(BaseModel):
    """Information about a registered resource."""

    name: str = Field(description="Resource name, as called in the shell")
    description: str = Field(description="What the resource checks")
    example: str = Field(default="", description="Usage example")
