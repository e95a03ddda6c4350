"""
Resource catalog commands for Inquest CLI.
"""

from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from inquest.cli.ui.console import console, print_error

app = typer.Typer(help="Browse the resource catalog")


@app.command("list")
def resources_list():
    """List all resources in registration order."""
    from inquest.resources.registry import get_registry

    registry = get_registry()

    table = Table(title="Resources", show_header=True)
    table.add_column("Name", style="resource")
    table.add_column("Description")

    for info in registry.get_info():
        description = info.description
        if len(description) > 60:
            description = description[:60] + "..."
        table.add_row(info.name, escape(description))

    console.print(table)
    console.print(f"\n[dim]Total: {len(registry)}[/]")


@app.command("info")
def resources_info(
    name: str = typer.Argument(..., help="Resource name"),
):
    """Show description, example and documentation link for a resource."""
    from inquest.backend.local import LocalBackend
    from inquest.resources.registry import get_registry
    from inquest.shell.help import HelpRenderer

    registry = get_registry()

    if name not in registry:
        print_error(f"Resource '{name}' not found")
        raise typer.Exit(1)

    backend = LocalBackend()
    HelpRenderer(registry, lambda: backend.os, console).help(name)
