"""Inquest resources package - checks callable from the shell."""

from inquest.resources.base import BaseResource
from inquest.resources.registry import ResourceRegistry, get_registry

__all__ = [
    "BaseResource",
    "ResourceRegistry",
    "get_registry",
]
