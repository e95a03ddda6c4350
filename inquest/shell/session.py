"""
Interactive shell session.

A Shell connects a runner to a read-eval loop: every line typed is
evaluated as a single test inside an in-memory profile that lives for the
duration of one ``start`` call.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from rich.console import Console

from inquest.exceptions import SessionActiveError
from inquest.models.session import ShellSession
from inquest.resources.base import BaseResource
from inquest.resources.registry import get_registry
from inquest.runner.runner import Runner
from inquest.shell.decoration import GREEN, bold, colorize
from inquest.shell.help import HelpRenderer
from inquest.shell.loop import ReplLoop
from inquest.shell.pipeline import EvaluationPipeline
from inquest.utils.logger import get_logger

logger = get_logger(__name__)

SHELL_CONTEXT = "shell_context.py"


class Shell:
    """
    Interactive shell over a runner.

    Example:
        >>> shell = Shell(Runner(LocalBackend()))
        >>> shell.start({"command_timeout": 30})
        inquest:0> command('uname -s').stdout
        'Linux\\n'
    """

    def __init__(
        self,
        runner: Runner,
        registry: Mapping[str, type[BaseResource]] | None = None,
        console: Console | None = None,
        input_func: Callable[[str], str] = input,
        prompt_name: str = "inquest",
    ):
        self.runner = runner
        self.console = console or Console(highlight=False)
        self.input_func = input_func
        self.prompt_name = prompt_name
        self.session = ShellSession()
        self.pipeline = EvaluationPipeline(runner)
        self.help_renderer = HelpRenderer(
            registry if registry is not None else get_registry(),
            lambda: runner.backend.os,
            self.console,
        )

    @property
    def current_line(self) -> int:
        return self.session.current_line

    @property
    def is_active(self) -> bool:
        return self.session.is_active

    def start(self, options: dict[str, Any] | None = None) -> None:
        """
        Run an interactive session until the user exits.

        Blocks until the loop ends. The evaluation context is released on
        every exit path, including errors raised out of the loop.

        Args:
            options: Passed unchanged to the runner when the context is created

        Raises:
            SessionActiveError: If this shell already has an active session
        """
        if self.is_active:
            raise SessionActiveError("This shell already has an active session")

        self.session = ShellSession()
        self.session.active_context = self.runner.add_target({SHELL_CONTEXT: ""}, options or {})
        logger.debug(f"session started with context {self.session.active_context.id}")

        try:
            self._configure_loop().run()
        finally:
            self.session.active_context = None
            logger.debug("session ended, context released")

    def _configure_loop(self) -> ReplLoop:
        loop = ReplLoop(self, self.input_func, self.console)
        loop.command("help", self.help)
        return loop

    def intro(self) -> None:
        self.help_renderer.intro()

    def prompt(self) -> str:
        return bold(self.prompt_name) + colorize(f":{self.current_line}> ", GREEN)

    def before_eval(self, code: str) -> None:
        """Evaluate one line of input in the session's context."""
        self.pipeline.evaluate(self.session, code)

    def help(self, resource: str | None = None) -> None:
        self.help_renderer.help(resource)
