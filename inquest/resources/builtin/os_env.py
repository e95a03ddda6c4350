"""
Environment variable resource.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from inquest.resources.base import BaseResource

if TYPE_CHECKING:
    from inquest.backend.local import LocalBackend


class OsEnvResource(BaseResource):

    name = "os_env"
    description = (
        "Use the os_env resource to test the environment variables of the "
        "platform on which the system is running."
    )
    example = """
        os_env('PATH').split

        os_env('HOME').value is not None
    """

    def __init__(self, backend: LocalBackend, variable: str):
        super().__init__(backend)
        self.variable = variable

    @property
    def value(self) -> str | None:
        return self.backend.env.get(self.variable)

    @property
    def split(self) -> list[str]:
        """Value split on the path separator; empty when unset."""
        if self.value is None:
            return []
        return self.value.split(os.pathsep)

    def _repr_args(self) -> list[Any]:
        return [self.variable]
