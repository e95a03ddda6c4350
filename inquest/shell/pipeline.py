"""
Turns one line of shell input into a single-test run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inquest.exceptions import SessionInactiveError
from inquest.models.session import ShellSession, SubmittedStatement
from inquest.utils.logger import get_logger

if TYPE_CHECKING:
    from inquest.runner.runner import Runner

logger = get_logger(__name__)

SHELL_REFERENCE = "inquest-shell"


class EvaluationPipeline:
    """
    Evaluates shell statements in isolation.

    Each statement becomes the only test attached to the session's context:
    results of earlier statements are discarded before it is submitted, and
    the runner is invoked synchronously. Errors from the runner are not
    caught here.
    """

    def __init__(self, runner: Runner):
        self.runner = runner

    def evaluate(self, session: ShellSession, code: str) -> SubmittedStatement:
        """
        Submit a statement and run it.

        Args:
            session: Active shell session; its line counter is advanced
            code: Statement as typed by the user

        Returns:
            The statement that was submitted

        Raises:
            SessionInactiveError: If the session has no evaluation context
        """
        if not session.is_active:
            raise SessionInactiveError("No active shell session to evaluate in")

        session.current_line += 1
        self.runner.reset_tests()

        statement = SubmittedStatement(
            content=code,
            ref=SHELL_REFERENCE,
            line=session.current_line,
        )
        self.runner.append_content(session.active_context, statement, [])

        logger.debug(f"evaluating line {statement.line}")
        self.runner.run()
        return statement
