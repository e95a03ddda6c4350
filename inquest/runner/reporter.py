"""
Console reporter for statement outcomes.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from inquest.models.session import TestOutcome


class Reporter:
    """
    Prints the outcome of each evaluated statement.

    Expression values are printed like an interactive interpreter would
    print them; failures are printed in red. The pass/fail summary is off by
    default since a shell evaluates exactly one statement per run.
    """

    def __init__(self, console: Console | None = None, show_summary: bool = False):
        self.console = console or Console(highlight=False)
        self.show_summary = show_summary

    def report(self, outcomes: list[TestOutcome]) -> None:
        for outcome in outcomes:
            self.report_outcome(outcome)

        if self.show_summary:
            self.report_summary(outcomes)

    def report_outcome(self, outcome: TestOutcome) -> None:
        if outcome.passed:
            if outcome.has_value and outcome.value is not None:
                self.console.print(escape(repr(outcome.value)), soft_wrap=True, emoji=False)
        else:
            self.console.print(
                f"[bold red]{outcome.error_type}:[/] [red]{escape(outcome.error or '')}[/]",
                soft_wrap=True,
                emoji=False,
            )

    def report_summary(self, outcomes: list[TestOutcome]) -> None:
        passed = sum(1 for o in outcomes if o.passed)
        failed = len(outcomes) - passed
        duration = sum(o.duration for o in outcomes)
        color = "green" if failed == 0 else "red"
        self.console.print(
            f"[{color}]{passed} passed, {failed} failed[/] [dim]({duration:.2f}s)[/]"
        )
