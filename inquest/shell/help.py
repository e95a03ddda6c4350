"""
Help and introspection output for the interactive shell.
"""

from __future__ import annotations

from typing import Callable, Mapping

from rich.console import Console
from rich.markup import escape

from inquest.models.target import TargetFacts
from inquest.resources.base import BaseResource
from inquest.shell.examples import dedent_example

DOCS_URL = "https://inquest.readthedocs.io/en/latest/resources.html"
UNKNOWN = "unknown"

GENERAL_HELP = """
Available commands:

    `\\[resource]` - run resource on target machine
    `help resources` - show all available resources that can be used as commands
    `help \\[resource]` - information about a specific resource
    `exit` - exit the inquest shell

You can use resources in this environment to test the target machine. For example:

    command('uname -a').stdout
    file('/proc/cpuinfo').content

You are currently running on:

    OS platform: [bold]{name}[/]
    OS family:   [bold]{family}[/]
    OS release:  [bold]{release}[/]
"""

RESOURCE_HELP = """[bold]Name:[/] {name}

[bold]Description:[/]

{description}

[bold]Example:[/]
{example}

[bold]Web Reference:[/]

{url}
"""


def resource_url(name: str) -> str:
    """Documentation link for a resource."""
    return f"{DOCS_URL}#{name}"


class HelpRenderer:
    """
    Renders the shell's help screens.

    The resource catalog and the target facts are injected, so the output
    depends only on what is passed in.

    Example:
        >>> renderer = HelpRenderer(registry, lambda: backend.os)
        >>> renderer.help("resources")
        command file os os_env
    """

    def __init__(
        self,
        registry: Mapping[str, type[BaseResource]],
        facts: Callable[[], TargetFacts | None],
        console: Console | None = None,
    ):
        self.registry = registry
        self.facts = facts
        self.console = console or Console(highlight=False)

    def intro(self) -> None:
        """Print the banner shown when a session starts."""
        self.console.print("Welcome to the interactive inquest shell")
        self.console.print("To find out how to use it, type: [bold]help[/]")
        self.console.print()

    def help(self, resource: str | None = None) -> None:
        """
        Print help.

        Args:
            resource: None for general help, ``resources`` for the list of
                resources, or the name of a resource for its details
        """
        if resource is None:
            self.general()
        elif resource == "resources":
            self.resources()
        elif resource in self.registry:
            self.resource(resource)
        else:
            self.console.print("Only the following resources are available:")
            self.resources()

    def general(self) -> None:
        facts = self.facts() or TargetFacts()
        self.console.print(GENERAL_HELP.format(
            name=escape(facts.name or UNKNOWN),
            family=escape(facts.family or UNKNOWN),
            release=escape(facts.release or UNKNOWN),
        ), soft_wrap=True, emoji=False)

    def resources(self) -> None:
        """Print all resource names in registration order."""
        self.console.print(escape(" ".join(self.registry)), soft_wrap=True, emoji=False)

    def resource(self, name: str) -> None:
        info = self.registry[name]
        self.console.print(RESOURCE_HELP.format(
            name=escape(name),
            description=escape(info.description),
            example=escape(dedent_example(info.example)),
            url=resource_url(name),
        ), soft_wrap=True, emoji=False)
