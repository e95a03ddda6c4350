"""
Evaluation contexts.

A context is an in-memory profile: a set of named units whose content is
executed into a shared namespace, plus the statements appended to it.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from inquest.models.session import SubmittedStatement

if TYPE_CHECKING:
    from inquest.backend.local import LocalBackend
    from inquest.resources.registry import ResourceRegistry


class EvaluationContext:
    """
    Namespace and statements of one in-memory profile.

    Every registered resource is bound in the namespace under its name, so
    ``file('/etc/hosts')`` builds a FileResource against the context's
    backend. Names assigned by one statement stay visible to later ones.
    """

    def __init__(
        self,
        units: dict[str, str],
        options: dict[str, Any],
        backend: LocalBackend,
        registry: ResourceRegistry,
    ):
        self.id = uuid4().hex[:12]
        self.units = dict(units)
        self.options = options
        self.tests: list[tuple[SubmittedStatement, list[Any]]] = []
        self.namespace: dict[str, Any] = {"__name__": "__inquest__"}

        for name in registry:
            self.namespace[name] = functools.partial(registry[name], backend)

    def load_units(self) -> None:
        """Execute each unit's content into the namespace."""
        for filename, content in self.units.items():
            if content.strip():
                exec(compile(content, filename, "exec"), self.namespace)

    def add_test(self, test: SubmittedStatement, dependencies: list[Any]) -> None:
        self.tests.append((test, list(dependencies)))

    def clear_tests(self) -> None:
        self.tests.clear()

    def __repr__(self) -> str:
        return f"EvaluationContext(id={self.id!r}, units={list(self.units)!r})"
