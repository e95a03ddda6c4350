"""Runner package - evaluates submitted statements against a backend."""

from inquest.runner.context import EvaluationContext
from inquest.runner.reporter import Reporter
from inquest.runner.runner import Runner

__all__ = [
    "EvaluationContext",
    "Reporter",
    "Runner",
]
