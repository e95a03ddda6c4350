"""
OS resource - platform facts of the target.
"""

from __future__ import annotations

from inquest.resources.base import BaseResource


class OsResource(BaseResource):
    """``name`` is the catalog key here, so the platform name is ``platform_name``."""

    name = "os"
    description = (
        "Use the os resource to test the platform on which the system is "
        "running."
    )
    example = """
        os().family == 'debian'

        os().release
    """

    @property
    def platform_name(self) -> str | None:
        return self.backend.os.name

    @property
    def family(self) -> str | None:
        return self.backend.os.family

    @property
    def release(self) -> str | None:
        return self.backend.os.release
