"""
Utility modules for Inquest.

This package provides common utilities:
- logger: Structured logging
"""

from inquest.utils.logger import (
    get_logger,
    setup_logging,
    LogLevel,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "LogLevel",
]
