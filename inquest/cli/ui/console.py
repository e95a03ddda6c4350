"""
Console utilities for Inquest CLI.

Provides styled console output and message helpers.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme


INQUEST_THEME = Theme({
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "resource": "bold magenta",
})

# Global console instance
console = Console(theme=INQUEST_THEME, highlight=False)


def print_error(message: str, prefix: str = "Error") -> None:
    """Print an error message."""
    console.print(f"[error]{prefix}:[/] {escape(message)}")


def print_warning(message: str, prefix: str = "Warning") -> None:
    """Print a warning message."""
    console.print(f"[warning]{prefix}:[/] {escape(message)}")


def print_success(message: str, prefix: str = "Success") -> None:
    """Print a success message."""
    console.print(f"[success]{prefix}:[/] {escape(message)}")
