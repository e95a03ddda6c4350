"""
Base resource class.

A resource is a named check that can be called from the shell, e.g.
``file('/etc/hosts')``. Every resource is built against a backend and
exposes read-only properties describing the target.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from inquest.models.resources import ResourceInfo

if TYPE_CHECKING:
    from inquest.backend.local import LocalBackend


class BaseResource:
    """
    Base class for all resources.

    Subclasses set the catalog metadata and take their own constructor
    arguments after the backend.

    Example:
        >>> class HostnameResource(BaseResource):
        ...     name = "hostname"
        ...     description = "Reports the host name of the target."
        ...     example = '''
        ...         hostname().value
        ...     '''
        ...
        ...     @property
        ...     def value(self):
        ...         return self.backend.run_command("hostname").stdout.strip()
    """

    # Catalog metadata (must be set by subclasses)
    name: str
    description: str
    example: str = ""

    def __init__(self, backend: LocalBackend):
        self.backend = backend

    @classmethod
    def get_info(cls) -> ResourceInfo:
        """Get resource catalog information."""
        return ResourceInfo(
            name=cls.name,
            description=cls.description,
            example=cls.example,
        )

    def _repr_args(self) -> list[Any]:
        return []

    def __repr__(self) -> str:
        args = ", ".join(repr(a) for a in self._repr_args())
        return f"{self.name}({args})"
