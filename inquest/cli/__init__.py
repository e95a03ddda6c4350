"""
CLI package for Inquest.

Provides a rich command-line interface using Typer.
"""

from inquest.cli.app import app, main

__all__ = ["app", "main"]
