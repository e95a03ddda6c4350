"""
Statement runner.

The runner owns evaluation contexts, the set of pending tests and the
results of the last run. A shell drives it one statement at a time:
reset, append, run.
"""

from __future__ import annotations

import time
import weakref
from typing import Any

from inquest.backend.local import LocalBackend
from inquest.exceptions import BackendError
from inquest.models.session import OutcomeStatus, SubmittedStatement, TestOutcome
from inquest.resources.registry import ResourceRegistry, get_registry
from inquest.runner.context import EvaluationContext
from inquest.runner.reporter import Reporter
from inquest.utils.logger import get_logger

logger = get_logger(__name__)


class Runner:
    """
    Evaluates submitted statements against a backend.

    Example:
        >>> runner = Runner(LocalBackend())
        >>> ctx = runner.add_target({"checks.py": ""}, {})
        >>> runner.append_content(ctx, SubmittedStatement(content="1 + 1", ref="doc", line=1), [])
        >>> runner.run()[0].value
        2
    """

    def __init__(
        self,
        backend: LocalBackend | None = None,
        registry: ResourceRegistry | None = None,
        reporter: Reporter | None = None,
    ):
        self._backend = backend or LocalBackend()
        self._registry = registry if registry is not None else get_registry()
        self.reporter = reporter or Reporter()
        self._pending: list[tuple[EvaluationContext, SubmittedStatement]] = []
        self._results: list[TestOutcome] = []
        self._contexts: weakref.WeakSet[EvaluationContext] = weakref.WeakSet()

    @property
    def backend(self) -> LocalBackend:
        return self._backend

    @property
    def results(self) -> list[TestOutcome]:
        """Outcomes of the last run."""
        return list(self._results)

    @property
    def pending(self) -> list[SubmittedStatement]:
        """Statements queued for the next run."""
        return [test for _, test in self._pending]

    def add_target(self, unit_map: dict[str, str], options: dict[str, Any]) -> EvaluationContext:
        """
        Create an evaluation context from a map of unit name to content.

        Args:
            unit_map: Units to load into the context (may be empty strings)
            options: Configuration options; ``command_timeout`` and
                ``show_summary`` are applied, the rest is kept on the context

        Returns:
            The new context
        """
        options = dict(options or {})
        if "command_timeout" in options:
            self._backend.command_timeout = options["command_timeout"]
        if "show_summary" in options:
            self.reporter.show_summary = options["show_summary"]

        ctx = EvaluationContext(unit_map, options, self._backend, self._registry)
        ctx.load_units()
        self._contexts.add(ctx)
        logger.debug(f"created context {ctx.id} with units {list(unit_map)}")
        return ctx

    def reset_tests(self) -> None:
        """Discard pending tests, the tests attached to contexts and the last results."""
        self._pending.clear()
        for ctx in self._contexts:
            ctx.clear_tests()
        self._results.clear()

    def append_content(
        self,
        context: EvaluationContext,
        test: SubmittedStatement,
        dependencies: list[Any],
    ) -> None:
        """Attach a statement to a context and queue it for the next run."""
        context.add_test(test, dependencies)
        self._pending.append((context, test))

    def run(self) -> list[TestOutcome]:
        """
        Evaluate all pending statements and report their outcomes.

        Errors raised by a statement become failed outcomes. A
        ``BackendError`` means the target itself could not be reached and is
        raised to the caller.
        """
        self._results = [self._evaluate(ctx, test) for ctx, test in self._pending]
        self.reporter.report(self._results)
        return list(self._results)

    def _evaluate(self, ctx: EvaluationContext, test: SubmittedStatement) -> TestOutcome:
        filename = f"<{test.ref}:{test.line}>"
        start_time = time.time()

        try:
            try:
                code = compile(test.content, filename, "eval")
                has_value = True
            except SyntaxError:
                code = compile(test.content, filename, "exec")
                has_value = False

            value = eval(code, ctx.namespace)

        except BackendError:
            raise
        except Exception as e:
            logger.debug(f"{filename} failed: {e!r}")
            return TestOutcome(
                statement=test,
                status=OutcomeStatus.FAILED,
                error=str(e),
                error_type=type(e).__name__,
                duration=time.time() - start_time,
            )

        return TestOutcome(
            statement=test,
            status=OutcomeStatus.PASSED,
            value=value if has_value else None,
            has_value=has_value,
            duration=time.time() - start_time,
        )
