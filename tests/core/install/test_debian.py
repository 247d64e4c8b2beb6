"""Tests for the Debian package installer."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from ghfetch.core.install.debian import install_debian_package
from ghfetch.domain.types import ClassifiedFile, Executable, FormatTag
from ghfetch.exceptions import CommandError


def test_runs_dpkg_install(downloads: Path, destination: Path):
    package = downloads / "tool_1.0_amd64.deb"
    package.write_bytes(b"!<arch>\n")
    completed = subprocess.CompletedProcess(
        args=[], returncode=0, stdout=b"", stderr=b""
    )

    with patch(
        "ghfetch.core.install.command.subprocess.run", return_value=completed
    ) as mock_run:
        result = install_debian_package(
            ClassifiedFile(package, FormatTag.DEBIAN_PACKAGE),
            destination,
            Executable("tool"),
        )

    assert result is None
    mock_run.assert_called_once_with(
        ["dpkg", "--install", str(package)],
        capture_output=True,
        check=False,
    )
    assert list(destination.iterdir()) == []


def test_dpkg_failure_is_fatal(downloads: Path, destination: Path):
    package = downloads / "tool.deb"
    package.write_bytes(b"")
    completed = subprocess.CompletedProcess(
        args=[],
        returncode=2,
        stdout=b"",
        stderr=b"dpkg: error: requested operation requires superuser privilege",
    )

    with (
        patch(
            "ghfetch.core.install.command.subprocess.run", return_value=completed
        ),
        pytest.raises(CommandError) as exc_info,
    ):
        install_debian_package(
            ClassifiedFile(package, FormatTag.DEBIAN_PACKAGE),
            destination,
            Executable("tool"),
        )

    assert "superuser" in str(exc_info.value)
    assert exc_info.value.command_name == "dpkg"
