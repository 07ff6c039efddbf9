import contextlib
import io
import subprocess
import sys
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import override
from unittest import TestCase, mock

from .exceptions import Fail

UBUNTU_OSRELEASE = """PRETTY_NAME="Ubuntu 24.04.1 LTS"
NAME="Ubuntu"
VERSION_ID="24.04"
VERSION="24.04.1 LTS (Noble Numbat)"
VERSION_CODENAME=noble
ID=ubuntu
ID_LIKE=debian
HOME_URL="https://www.ubuntu.com/"
UBUNTU_CODENAME=noble
"""

ARCH_OSRELEASE = """NAME="Arch Linux"
PRETTY_NAME="Arch Linux"
ID=arch
BUILD_ID=rolling
ANSI_COLOR="38;2;23;147;209"
HOME_URL="https://archlinux.org/"
LOGO=archlinux-logo
"""

FEDORA_OSRELEASE = """NAME="Fedora Linux"
VERSION="40 (Workstation Edition)"
ID=fedora
VERSION_ID=40
PLATFORM_ID="platform:f40"
PRETTY_NAME="Fedora Linux 40 (Workstation Edition)"
"""

MINT_OSRELEASE = """NAME="Linux Mint"
VERSION="21.3 (Virginia)"
ID=linuxmint
ID_LIKE="ubuntu debian"
PRETTY_NAME="Linux Mint 21.3"
"""


class WhatadistroTestCase(TestCase):
    """
    Test case with helpers to work with os-release fixtures
    """

    def tempdir(self) -> Path:
        """Create a temporary directory."""
        return Path(self.enterContext(tempfile.TemporaryDirectory()))

    def write_osrelease(self, contents: str | bytes) -> Path:
        """
        Write an os-release file in a temporary directory, and return its path
        """
        path = self.tempdir() / "os-release"
        if isinstance(contents, bytes):
            path.write_bytes(contents)
        else:
            path.write_text(contents)
        return path

    def mock_osrelease(self, contents: str | bytes | None) -> Path:
        """
        Make identify() read the given contents as the system os-release.

        If contents is None, the system os-release is made to not exist.
        """
        if contents is None:
            path = self.tempdir() / "os-release"
        else:
            path = self.write_osrelease(contents)
        self.enterContext(mock.patch("whatadistro.distro.OS_RELEASE", path))
        return path


class CLITestCase(WhatadistroTestCase):
    """Test case for CLI commands."""

    @override
    def setUp(self) -> None:
        super().setUp()
        self.enterContext(mock.patch("coloredlogs.install"))

    def assertNoStderr(self, res: subprocess.CompletedProcess[str]) -> None:
        self.assertEqual(res.stderr, "")

    @contextlib.contextmanager
    def argv(self, *args: str) -> Generator[None]:
        orig_argv = sys.argv
        sys.argv = list(args)
        try:
            yield None
        finally:
            sys.argv = orig_argv

    def call(self, *args: str) -> subprocess.CompletedProcess[str]:
        """
        Run whatadistro with the given command line, capturing its output.

        Fail is reported as a return code of 1, with the message in stderr.
        """
        from whatadistro.__main__ import main

        stdout = io.StringIO()
        stderr = io.StringIO()
        returnvalue: int | None
        with self.argv(*args), contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            try:
                returnvalue = main() or 0
            except Fail as e:
                print(e, file=sys.stderr)
                returnvalue = 1

        return subprocess.CompletedProcess(args, returnvalue, stdout.getvalue(), stderr.getvalue())
