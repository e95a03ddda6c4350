"""
Read-eval loop driving an interactive shell.
"""

from __future__ import annotations

import atexit
import inspect
from pathlib import Path
from typing import Callable, Protocol

from rich.console import Console
from rich.markup import escape

from inquest.utils.logger import get_logger

logger = get_logger(__name__)

EXIT_COMMANDS = {"exit", "quit"}


class ShellHooks(Protocol):
    """Callbacks the loop invokes on the shell it drives."""

    def intro(self) -> None:
        """Called once before the first prompt."""

    def prompt(self) -> str:
        """Return the prompt for the next line."""

    def before_eval(self, code: str) -> None:
        """Evaluate a line that is not a loop command."""


def setup_readline(history_file: str | None, history_length: int) -> None:
    """
    Enable line editing and history for ``input()``.

    Does nothing on platforms without the readline module.
    """
    try:
        import readline
    except ImportError:
        return

    readline.set_history_length(history_length)
    if not history_file:
        return

    path = Path(history_file).expanduser()
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"cannot read history file {path}: {e}")

    atexit.register(_write_history, readline, path)


def _write_history(readline, path: Path) -> None:
    try:
        readline.write_history_file(path)
    except OSError as e:
        logger.warning(f"cannot write history file {path}: {e}")


class ReplLoop:
    """
    Interactive loop: read a line, dispatch it, repeat.

    Lines whose first word is a bound command (``help``) and whose remaining
    words fit that command's parameters are handled by the command;
    everything else, such as ``help = 1``, goes to ``hooks.before_eval``. The loop
    ends on ``exit``, ``quit`` or end of input.

    Example:
        >>> loop = ReplLoop(shell)
        >>> loop.command("help", shell.help)
        >>> loop.run()
    """

    def __init__(
        self,
        hooks: ShellHooks,
        input_func: Callable[[str], str] = input,
        console: Console | None = None,
    ):
        self.hooks = hooks
        self.input_func = input_func
        self.console = console or Console(highlight=False)
        self.commands: dict[str, Callable[..., None]] = {}

    def command(self, name: str, func: Callable[..., None]) -> None:
        """Bind a command; its arguments are the words after the name."""
        self.commands[name] = func

    def run(self) -> None:
        self.hooks.intro()

        while True:
            try:
                line = self.input_func(self.hooks.prompt())
            except EOFError:
                self.console.print()
                break
            except KeyboardInterrupt:
                self.console.print()
                continue

            line = line.strip()
            if not line:
                continue
            if line in EXIT_COMMANDS:
                break

            self.handle(line)

    def handle(self, line: str) -> None:
        """Dispatch one line, reporting errors instead of raising them."""
        try:
            if not self._dispatch_command(line):
                self.hooks.before_eval(line)
        except KeyboardInterrupt:
            self.console.print("[yellow]Interrupted[/]")
        except Exception as e:
            logger.debug(f"evaluation failed: {e!r}", exc_info=True)
            self.console.print(f"[bold red]Error:[/] {escape(str(e))}", soft_wrap=True, emoji=False)

    def _dispatch_command(self, line: str) -> bool:
        name, *args = line.split()
        func = self.commands.get(name)
        if func is None:
            return False
        try:
            inspect.signature(func).bind(*args)
        except TypeError:
            return False
        func(*args)
        return True
