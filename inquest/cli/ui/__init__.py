"""Console helpers for the Inquest CLI."""

from inquest.cli.ui.console import console, print_error, print_success, print_warning

__all__ = ["console", "print_error", "print_success", "print_warning"]
