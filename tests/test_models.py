"""
Tests for Pydantic models.
"""

import pytest
from pydantic import ValidationError

from inquest.models.session import (
    OutcomeStatus,
    ShellSession,
    SubmittedStatement,
    TestOutcome,
)


class TestShellSession:
    """Tests for ShellSession model."""

    def test_new_session(self):
        session = ShellSession()
        assert session.current_line == 0
        assert session.active_context is None
        assert not session.is_active

    def test_active_with_context(self):
        assert ShellSession(active_context=object()).is_active


class TestSubmittedStatement:
    """Tests for SubmittedStatement model."""

    def test_create(self):
        statement = SubmittedStatement(content="file('/').exists", ref="inquest-shell", line=3)
        assert statement.line == 3

    def test_line_starts_at_one(self):
        with pytest.raises(ValidationError):
            SubmittedStatement(content="1", ref="inquest-shell", line=0)


class TestTestOutcome:
    """Tests for TestOutcome model."""

    def test_summary(self):
        statement = SubmittedStatement(content="1", ref="inquest-shell", line=2)
        outcome = TestOutcome(statement=statement, status=OutcomeStatus.FAILED, error="boom")
        assert not outcome.passed
        assert outcome.get_summary() == "[FAILED] inquest-shell:2"
