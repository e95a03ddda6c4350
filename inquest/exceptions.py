"""
Exception types raised by Inquest.
"""

from __future__ import annotations


class InquestError(Exception):
    """Base class for all Inquest errors."""


class SessionActiveError(InquestError):
    """Raised when a shell is started while its previous session is still active."""


class SessionInactiveError(InquestError):
    """Raised when a statement is submitted without an active evaluation context."""


class BackendError(InquestError):
    """Raised when the backend cannot carry out a request against the target."""


class ConfigError(InquestError):
    """Raised when a configuration file cannot be read or validated."""
