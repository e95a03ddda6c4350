"""
Configuration commands for Inquest CLI.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.panel import Panel

from inquest.cli.ui.console import console, print_error, print_success, print_warning
from inquest.exceptions import InquestError

app = typer.Typer(help="Configuration management")


@app.command("show")
def config_show(
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file to read",
    ),
):
    """Show current configuration."""
    from inquest.models.config import InquestConfig

    try:
        config = InquestConfig.load(config_file)
    except InquestError as e:
        print_error(str(e), prefix="Error loading config")
        raise typer.Exit(1)

    console.print(
        Panel.fit(
            f"[bold]Shell Configuration:[/]\n"
            f"  Prompt Name: {config.shell.prompt_name}\n"
            f"  History File: {config.shell.history_file or 'disabled'}\n"
            f"  History Length: {config.shell.history_length}\n"
            f"\n[bold]Runner Configuration:[/]\n"
            f"  Command Timeout: {config.runner.command_timeout}s\n"
            f"  Show Summary: {config.runner.show_summary}\n"
            f"\n[bold]Logging Configuration:[/]\n"
            f"  Level: {config.logging.level}\n"
            f"  File: {config.logging.file or 'console only'}",
            title="[bold blue]Inquest Configuration[/]",
        )
    )


@app.command("init")
def config_init(
    config_file: str = typer.Option(
        "inquest.yaml",
        "--config",
        "-c",
        help="Configuration file path",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing file",
    ),
):
    """Write a configuration file with default values."""
    init_config(config_file, force=force)


def init_config(config_file: str, force: bool = False) -> None:
    from inquest.models.config import InquestConfig

    path = Path(config_file)
    if path.exists() and not force:
        print_warning(f"{path} already exists, use --force to overwrite")
        raise typer.Exit(1)

    InquestConfig().save(path)
    print_success(f"Configuration written to {path}")
