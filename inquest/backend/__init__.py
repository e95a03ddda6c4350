"""Backend package - access to the target being inspected."""

from inquest.backend.local import LocalBackend

__all__ = ["LocalBackend"]
