"""
File resource - inspect a file or directory on the target.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from inquest.resources.base import BaseResource

if TYPE_CHECKING:
    from inquest.backend.local import LocalBackend


class FileResource(BaseResource):
    """Missing paths are not an error: ``exists`` is False and content is None."""

    name = "file"
    description = (
        "Use the file resource to test all system file types, including "
        "files, directories and symbolic links."
    )
    example = """
        file('/proc/cpuinfo').content

        file('/etc/hosts').exists

        oct(file('/etc/passwd').mode)
    """

    def __init__(self, backend: LocalBackend, path: str):
        super().__init__(backend)
        self.path = path
        self._path = backend.file(path)

    @property
    def exists(self) -> bool:
        return self._path.exists()

    @property
    def is_file(self) -> bool:
        return self._path.is_file()

    @property
    def is_directory(self) -> bool:
        return self._path.is_dir()

    @property
    def basename(self) -> str:
        return self._path.name

    @property
    def content(self) -> str | None:
        if not self.is_file:
            return None
        return self._path.read_text(encoding="utf-8", errors="replace")

    @property
    def size(self) -> int | None:
        if not self.exists:
            return None
        return self._path.stat().st_size

    @property
    def mode(self) -> int | None:
        """Permission bits, e.g. ``0o644``."""
        if not self.exists:
            return None
        return self._path.stat().st_mode & 0o7777

    def _repr_args(self) -> list[Any]:
        return [self.path]
