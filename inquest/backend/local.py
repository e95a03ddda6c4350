"""
Local backend.

Runs commands and reads files on the machine Inquest itself runs on.
"""

from __future__ import annotations

import os
import platform
import subprocess
from pathlib import Path
from typing import Mapping

from inquest.exceptions import BackendError
from inquest.models.target import CommandResult, TargetFacts
from inquest.utils.logger import get_logger

logger = get_logger(__name__)

OS_RELEASE_FILE = Path("/etc/os-release")

# ID_LIKE is unreliable for these, so map known IDs directly.
LINUX_FAMILIES = {
    "ubuntu": "debian",
    "debian": "debian",
    "linuxmint": "debian",
    "raspbian": "debian",
    "centos": "redhat",
    "rhel": "redhat",
    "fedora": "redhat",
    "rocky": "redhat",
    "almalinux": "redhat",
    "amzn": "redhat",
    "opensuse": "suse",
    "opensuse-leap": "suse",
    "sles": "suse",
    "arch": "arch",
    "alpine": "alpine",
}


def parse_os_release(text: str) -> dict[str, str]:
    """
    Parse the contents of an os-release file.

    Args:
        text: File contents

    Returns:
        Mapping of keys to unquoted values
    """
    values: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip().strip("\"'")
    return values


class LocalBackend:
    """
    Backend for the local machine.

    Example:
        >>> backend = LocalBackend()
        >>> backend.os.family
        'debian'
        >>> backend.run_command("uname -s").stdout
        'Linux\\n'
    """

    def __init__(self, command_timeout: int = 60):
        self.command_timeout = command_timeout
        self._facts: TargetFacts | None = None

    @property
    def os(self) -> TargetFacts:
        """Operating system facts, detected once and cached."""
        if self._facts is None:
            self._facts = self._detect_os()
        return self._facts

    def _detect_os(self) -> TargetFacts:
        system = platform.system().lower()

        if system == "linux":
            try:
                release = parse_os_release(OS_RELEASE_FILE.read_text(encoding="utf-8"))
            except OSError:
                release = {}
            name = release.get("ID") or "linux"
            family = LINUX_FAMILIES.get(name)
            if family is None and release.get("ID_LIKE"):
                family = release["ID_LIKE"].split()[0]
            return TargetFacts(
                name=name,
                family=family or "linux",
                release=release.get("VERSION_ID") or platform.release() or None,
            )

        if system == "darwin":
            return TargetFacts(
                name="mac_os_x",
                family="darwin",
                release=platform.mac_ver()[0] or None,
            )

        if system == "windows":
            return TargetFacts(
                name="windows",
                family="windows",
                release=platform.version() or None,
            )

        return TargetFacts(
            name=system or None,
            family="unix" if os.name == "posix" else None,
            release=platform.release() or None,
        )

    def run_command(self, command: str) -> CommandResult:
        """
        Run a shell command on the target.

        Args:
            command: Command line, interpreted by the system shell

        Returns:
            CommandResult with captured output and exit status

        Raises:
            BackendError: If the command cannot be started or times out
        """
        logger.debug(f"running command: {command}")
        try:
            proc = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
                timeout=self.command_timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise BackendError(
                f"Command timed out after {self.command_timeout} seconds: {command}"
            ) from e
        except OSError as e:
            raise BackendError(f"Cannot run command {command!r}: {e}") from e

        return CommandResult(
            command=command,
            stdout=proc.stdout,
            stderr=proc.stderr,
            exit_status=proc.returncode,
        )

    def file(self, path: str) -> Path:
        """Get a path on the target."""
        return Path(path)

    @property
    def env(self) -> Mapping[str, str]:
        """Environment variables visible on the target."""
        return os.environ
