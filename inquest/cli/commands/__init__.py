"""CLI commands package."""

from inquest.cli.commands import config, resources

__all__ = ["config", "resources"]
