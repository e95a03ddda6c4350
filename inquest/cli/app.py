"""
Main CLI application.

This module defines the main Typer application and entry point.
"""

from __future__ import annotations

import os

import typer
from rich.console import Console

from inquest import __version__
from inquest.cli.commands import config, resources

# Create the main app
app = typer.Typer(
    name="inquest",
    help="Interactive shell for ad-hoc infrastructure checks",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Add sub-commands
app.add_typer(resources.app, name="resources", help="Browse the resource catalog")
app.add_typer(config.app, name="config", help="Configuration management")

console = Console()


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]Inquest[/] v{__version__}")
        raise typer.Exit()


# Global state for CLI options
class CLIState:
    """Global CLI state for options like quiet, debug, color."""

    quiet: bool = False
    debug: bool = False
    no_color: bool = False


cli_state = CLIState()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-essential output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
):
    """
    Inquest - interactive shell for ad-hoc infrastructure checks

    Evaluate check statements one at a time against the target machine
    and browse the catalog of available resources.
    """
    cli_state.quiet = quiet
    cli_state.debug = debug
    cli_state.no_color = no_color

    # Set environment variable for no-color (used by Rich)
    if no_color:
        os.environ["NO_COLOR"] = "1"


def get_console() -> Console:
    """Get a console instance with current CLI state applied."""
    return Console(
        quiet=cli_state.quiet,
        no_color=cli_state.no_color,
        highlight=False,
    )


@app.command()
def shell(
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path",
    ),
):
    """
    Start an interactive shell.

    Every line is evaluated immediately against the local machine. Type
    `help` for usage, `help resources` for the resource list and `exit`
    to leave.

    Example:
        inquest shell
        inquest shell --config inquest.yaml
    """
    from inquest.backend.local import LocalBackend
    from inquest.cli.ui.console import print_error
    from inquest.exceptions import InquestError
    from inquest.models.config import InquestConfig
    from inquest.runner.reporter import Reporter
    from inquest.runner.runner import Runner
    from inquest.shell.loop import setup_readline
    from inquest.shell.session import Shell
    from inquest.utils.logger import setup_logging

    try:
        cfg = InquestConfig.load(config_file)
    except InquestError as e:
        print_error(str(e), prefix="Error loading config")
        raise typer.Exit(1)

    setup_logging(
        level="debug" if cli_state.debug else cfg.logging.level,
        log_file=cfg.logging.file,
        json_format=cfg.logging.json_format,
    )
    setup_readline(cfg.shell.history_file, cfg.shell.history_length)

    out = get_console()
    runner = Runner(LocalBackend(), reporter=Reporter(out))
    Shell(runner, console=out, prompt_name=cfg.shell.prompt_name).start(cfg.to_options())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
