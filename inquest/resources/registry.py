"""
Resource registry for discovering and looking up shell resources.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from inquest.models.resources import ResourceInfo

if TYPE_CHECKING:
    from inquest.resources.base import BaseResource


class ResourceRegistry:
    """
    Registry of resources available in the shell.

    Iteration follows registration order, which is also the order in which
    the shell lists resources.

    Example:
        >>> registry = ResourceRegistry()
        >>> registry.register(FileResource)
        >>> registry.register(CommandResource)
        >>> registry.names()
        ['file', 'command']
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._resources: dict[str, type[BaseResource]] = {}

    def register(self, resource: type[BaseResource]) -> None:
        """
        Register a resource class under its name.

        Args:
            resource: Resource class to register

        Raises:
            ValueError: If a resource with the same name is already registered
        """
        if resource.name in self._resources:
            raise ValueError(f"Resource '{resource.name}' is already registered")
        self._resources[resource.name] = resource

    def get(self, name: str) -> type[BaseResource] | None:
        """
        Get a resource by name.

        Args:
            name: Resource name

        Returns:
            Resource class or None if not found
        """
        return self._resources.get(name)

    def names(self) -> list[str]:
        """Get resource names in registration order."""
        return list(self._resources)

    def get_info(self) -> list[ResourceInfo]:
        """Get catalog information about all registered resources."""
        return [r.get_info() for r in self._resources.values()]

    def __getitem__(self, name: str) -> type[BaseResource]:
        return self._resources[name]

    def __contains__(self, name: object) -> bool:
        return name in self._resources

    def __iter__(self) -> Iterator[str]:
        return iter(self._resources)

    def __len__(self) -> int:
        return len(self._resources)


def register_builtin_resources(registry: ResourceRegistry) -> None:
    """Register all built-in resources."""
    from inquest.resources.builtin.command import CommandResource
    from inquest.resources.builtin.file import FileResource
    from inquest.resources.builtin.os_info import OsResource
    from inquest.resources.builtin.os_env import OsEnvResource

    registry.register(CommandResource)
    registry.register(FileResource)
    registry.register(OsResource)
    registry.register(OsEnvResource)


# Global registry instance
_registry: ResourceRegistry | None = None


def get_registry() -> ResourceRegistry:
    """Get the global resource registry, populated with the built-ins."""
    global _registry
    if _registry is None:
        _registry = ResourceRegistry()
        register_builtin_resources(_registry)
    return _registry
