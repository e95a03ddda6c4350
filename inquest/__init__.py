"""
Inquest - interactive shell for ad-hoc infrastructure checks

Type a check statement such as ``command('uname -a').stdout`` and it is
evaluated immediately against the target, one statement at a time, with
the built-in resource catalog available as plain callables.
"""

__version__ = "0.1.0"
__author__ = "Inquest Team"
__license__ = "MIT"

from inquest.models.config import InquestConfig

__all__ = [
    "__version__",
    "InquestConfig",
]
