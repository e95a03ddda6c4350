"""
Tests for the resource registry and built-in resources.
"""

import pytest

from inquest.models.target import TargetFacts
from inquest.resources.builtin.command import CommandResource
from inquest.resources.builtin.file import FileResource
from inquest.resources.builtin.os_env import OsEnvResource
from inquest.resources.builtin.os_info import OsResource
from inquest.resources.registry import ResourceRegistry, get_registry

from conftest import FakeBackend


class TestResourceRegistry:
    """Tests for ResourceRegistry."""

    def test_registration_order(self, fixture_registry):
        assert fixture_registry.names() == ["file", "command"]
        assert list(fixture_registry) == ["file", "command"]

    def test_lookup(self, fixture_registry):
        assert fixture_registry.get("file") is FileResource
        assert fixture_registry["command"] is CommandResource
        assert fixture_registry.get("missing") is None
        assert "file" in fixture_registry
        assert "missing" not in fixture_registry
        assert len(fixture_registry) == 2

    def test_duplicate_name_rejected(self, fixture_registry):
        with pytest.raises(ValueError):
            fixture_registry.register(FileResource)

    def test_get_info(self, fixture_registry):
        infos = fixture_registry.get_info()
        assert [i.name for i in infos] == ["file", "command"]
        assert infos[0].description == FileResource.description

    def test_global_registry_builtins(self):
        registry = get_registry()
        assert registry.names() == ["command", "file", "os", "os_env"]
        assert get_registry() is registry

    def test_empty_registry(self):
        assert list(ResourceRegistry()) == []


class TestCommandResource:
    """Tests for the command resource."""

    def test_runs_once(self):
        backend = FakeBackend()
        cmd = CommandResource(backend, "uname -a")
        assert cmd.stdout == "ran uname -a\n"
        assert cmd.exit_status == 0
        assert cmd.stderr == ""
        assert backend.commands == ["uname -a"]

    def test_lazy(self):
        backend = FakeBackend()
        CommandResource(backend, "id")
        assert backend.commands == []

    def test_repr(self):
        assert repr(CommandResource(FakeBackend(), "id")) == "command('id')"


class TestFileResource:
    """Tests for the file resource."""

    def test_existing_file(self, tmp_path):
        path = tmp_path / "hosts"
        path.write_text("127.0.0.1 localhost\n")
        path.chmod(0o640)

        f = FileResource(FakeBackend(), str(path))
        assert f.exists
        assert f.is_file
        assert not f.is_directory
        assert f.content == "127.0.0.1 localhost\n"
        assert f.size == len("127.0.0.1 localhost\n")
        assert f.mode == 0o640
        assert f.basename == "hosts"

    def test_directory(self, tmp_path):
        f = FileResource(FakeBackend(), str(tmp_path))
        assert f.is_directory
        assert f.content is None

    def test_missing_file(self, tmp_path):
        f = FileResource(FakeBackend(), str(tmp_path / "missing"))
        assert not f.exists
        assert f.content is None
        assert f.size is None
        assert f.mode is None


class TestOsResources:
    """Tests for the os and os_env resources."""

    def test_os_facts(self):
        backend = FakeBackend(TargetFacts(name="ubuntu", family="debian", release="22.04"))
        os_ = OsResource(backend)
        assert os_.platform_name == "ubuntu"
        assert os_.family == "debian"
        assert os_.release == "22.04"
        assert repr(os_) == "os()"

    def test_os_env(self):
        backend = FakeBackend(env={"PATH": "/usr/bin:/bin"})
        assert OsEnvResource(backend, "PATH").value == "/usr/bin:/bin"
        assert OsEnvResource(backend, "HOME").value is None
        assert OsEnvResource(backend, "HOME").split == []
