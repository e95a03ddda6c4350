"""
Tests for shell help output.
"""

import pytest

from inquest.models.target import TargetFacts
from inquest.resources.base import BaseResource
from inquest.resources.registry import ResourceRegistry
from inquest.shell.help import DOCS_URL, HelpRenderer, resource_url

from conftest import make_console, output_of


@pytest.fixture
def facts():
    return TargetFacts(name="ubuntu", family="debian", release="22.04")


@pytest.fixture
def renderer(fixture_registry, facts, console):
    return HelpRenderer(fixture_registry, lambda: facts, console)


def render(registry, facts, resource):
    console = make_console()
    HelpRenderer(registry, lambda: facts, console).help(resource)
    return output_of(console)


class TestGeneralHelp:
    """Tests for general help output."""

    def test_lists_commands_and_examples(self, renderer, console):
        renderer.help()
        out = output_of(console)
        assert "Available commands:" in out
        assert "`[resource]` - run resource on target machine" in out
        assert "`help resources`" in out
        assert "`help [resource]`" in out
        assert "`exit`" in out
        assert "command('uname -a').stdout" in out
        assert "file('/proc/cpuinfo').content" in out

    def test_shows_target_facts(self, renderer, console):
        renderer.help()
        out = output_of(console)
        assert "OS platform: ubuntu" in out
        assert "OS family:   debian" in out
        assert "OS release:  22.04" in out

    def test_missing_facts_render_unknown(self, fixture_registry):
        out = render(fixture_registry, TargetFacts(), None)
        assert "OS platform: unknown" in out
        assert "OS family:   unknown" in out
        assert "OS release:  unknown" in out

    def test_partial_facts(self, fixture_registry):
        out = render(fixture_registry, TargetFacts(name="alpine"), None)
        assert "OS platform: alpine" in out
        assert "OS family:   unknown" in out

    def test_no_facts_at_all(self, fixture_registry):
        out = render(fixture_registry, None, None)
        assert out.count("unknown") == 3


class TestResourceListing:
    """Tests for the resource listing."""

    def test_registration_order(self, renderer, console):
        renderer.help("resources")
        assert output_of(console) == "file command\n"

    def test_unknown_resource_falls_back_to_listing(self, fixture_registry, facts):
        listing = render(fixture_registry, facts, "resources")
        fallback = render(fixture_registry, facts, "no-such-resource")
        assert fallback == "Only the following resources are available:\n" + listing

    def test_unknown_resource_does_not_raise(self, renderer):
        renderer.help("")
        renderer.help("[bold]")


class TestResourceDetail:
    """Tests for per-resource help."""

    def test_resource_block(self, renderer, console):
        renderer.help("command")
        out = output_of(console)
        assert "Name: command" in out
        assert "Description:" in out
        assert "arbitrary command" in out
        assert "Example:" in out
        assert "Web Reference:" in out
        assert f"{DOCS_URL}#command" in out

    def test_example_is_dedented(self, renderer, console):
        renderer.help("command")
        lines = output_of(console).splitlines()
        assert "command('ls -al /').stdout" in lines

    def test_resource_url(self):
        assert resource_url("file") == f"{DOCS_URL}#file"


class TestIntro:
    """Tests for the intro banner."""

    def test_banner(self, renderer, console):
        renderer.intro()
        out = output_of(console)
        assert out == (
            "Welcome to the interactive inquest shell\n"
            "To find out how to use it, type: help\n"
            "\n"
        )


class RatioResource(BaseResource):
    name = "ratio:100:"
    description = "ratio :100: ok [bold]raw[/]"
    example = """
        ratio(':smile:')
    """


class TestCatalogTextShownAsWritten:
    """Tests that catalog text is printed verbatim."""

    @pytest.fixture
    def registry(self):
        registry = ResourceRegistry()
        registry.register(RatioResource)
        return registry

    def test_description_keeps_emoji_codes_and_markup(self, registry, facts):
        out = render(registry, facts, "ratio:100:")
        assert "ratio :100: ok [bold]raw[/]" in out
        assert "ratio(':smile:')" in out
        assert "Name: ratio:100:" in out

    def test_listing_keeps_emoji_codes(self, registry, facts):
        assert render(registry, facts, "resources") == "ratio:100:\n"

    def test_facts_keep_emoji_codes(self, registry):
        out = render(registry, TargetFacts(name=":smile:"), None)
        assert "OS platform: :smile:" in out
