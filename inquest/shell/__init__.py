"""
Interactive shell package.

Provides the shell session, the statement evaluation pipeline, help
output and the read-eval loop.
"""

from inquest.shell.help import HelpRenderer
from inquest.shell.loop import ReplLoop, ShellHooks
from inquest.shell.pipeline import EvaluationPipeline, SHELL_REFERENCE
from inquest.shell.session import Shell

__all__ = [
    "Shell",
    "EvaluationPipeline",
    "SHELL_REFERENCE",
    "HelpRenderer",
    "ReplLoop",
    "ShellHooks",
]
