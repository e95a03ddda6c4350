"""
Tests for the local backend.
"""

import sys

import pytest

from inquest.backend.local import LocalBackend, parse_os_release
from inquest.exceptions import BackendError
from inquest.models.target import TargetFacts


OS_RELEASE = """
NAME="Ubuntu"
VERSION_ID="22.04"
ID=ubuntu
ID_LIKE=debian
# comment
"""


class TestParseOsRelease:
    """Tests for os-release parsing."""

    def test_parses_quoted_and_plain_values(self):
        values = parse_os_release(OS_RELEASE)
        assert values["NAME"] == "Ubuntu"
        assert values["VERSION_ID"] == "22.04"
        assert values["ID"] == "ubuntu"
        assert "# comment" not in values

    def test_empty(self):
        assert parse_os_release("") == {}


class TestLocalBackend:
    """Tests for LocalBackend."""

    def test_facts(self):
        facts = LocalBackend().os
        assert isinstance(facts, TargetFacts)
        assert facts.name

    def test_facts_cached(self):
        backend = LocalBackend()
        assert backend.os is backend.os

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell required")
    def test_run_command(self):
        result = LocalBackend().run_command("echo hello; echo oops >&2; exit 3")
        assert result.stdout == "hello\n"
        assert result.stderr == "oops\n"
        assert result.exit_status == 3

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell required")
    def test_command_timeout(self):
        with pytest.raises(BackendError):
            LocalBackend(command_timeout=1).run_command("sleep 5")

    def test_env(self, monkeypatch):
        monkeypatch.setenv("INQUEST_TEST_VAR", "yes")
        assert LocalBackend().env["INQUEST_TEST_VAR"] == "yes"
