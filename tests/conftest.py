"""
Test configuration and fixtures.
"""

import io
from pathlib import Path

import pytest
from rich.console import Console

from inquest.models.target import CommandResult, TargetFacts
from inquest.resources.builtin.command import CommandResource
from inquest.resources.builtin.file import FileResource
from inquest.resources.registry import ResourceRegistry
from inquest.runner.reporter import Reporter
from inquest.runner.runner import Runner


class FakeBackend:
    """Backend double that records commands instead of running them."""

    def __init__(self, facts=None, env=None):
        self.os = facts if facts is not None else TargetFacts(
            name="ubuntu", family="debian", release="22.04"
        )
        self.env = env if env is not None else {}
        self.command_timeout = 60
        self.commands = []

    def run_command(self, command):
        self.commands.append(command)
        return CommandResult(command=command, stdout=f"ran {command}\n", exit_status=0)

    def file(self, path):
        return Path(path)


class RecordingRunner(Runner):
    """Runner that remembers which statements each run evaluated."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.runs = []

    def run(self):
        self.runs.append([s.content for s in self.pending])
        return super().run()


def make_console():
    return Console(file=io.StringIO(), force_terminal=False, width=200, highlight=False)


def output_of(console):
    return console.file.getvalue()


def scripted_input(*lines):
    """An input function returning the given lines, then signalling end of input."""
    remaining = list(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read.prompts = prompts
    return read


@pytest.fixture
def fixture_registry():
    """Registry with two resources, registered out of alphabetical order."""
    registry = ResourceRegistry()
    registry.register(FileResource)
    registry.register(CommandResource)
    return registry


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def runner(backend, fixture_registry, console):
    return RecordingRunner(backend, fixture_registry, Reporter(console))
