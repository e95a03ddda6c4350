"""
Command resource - run a command on the target.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from inquest.models.target import CommandResult
from inquest.resources.base import BaseResource

if TYPE_CHECKING:
    from inquest.backend.local import LocalBackend


class CommandResource(BaseResource):
    """Runs a command once, on first access, and exposes its results."""

    name = "command"
    description = (
        "Use the command resource to test an arbitrary command that is run "
        "on the target, checking its output and exit status."
    )
    example = """
        command('ls -al /').stdout

        command('uname -a').exit_status == 0

        'No such file' in command('ls /missing').stderr
    """

    def __init__(self, backend: LocalBackend, cmd: str):
        super().__init__(backend)
        self.cmd = cmd
        self._result: CommandResult | None = None

    @property
    def result(self) -> CommandResult:
        if self._result is None:
            self._result = self.backend.run_command(self.cmd)
        return self._result

    @property
    def stdout(self) -> str:
        return self.result.stdout

    @property
    def stderr(self) -> str:
        return self.result.stderr

    @property
    def exit_status(self) -> int:
        return self.result.exit_status

    def _repr_args(self) -> list[Any]:
        return [self.cmd]
