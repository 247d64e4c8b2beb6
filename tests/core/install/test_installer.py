"""End-to-end tests for classify-and-install dispatch."""

import gzip
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from ghfetch.core.install import INSTALLERS, install, validate_destination
from ghfetch.domain.types import Executable, FormatTag
from ghfetch.exceptions import DestinationError, InstallError, UnsupportedFormatError
from tests.core.install.conftest import EXECUTABLE_CONTENT


def test_every_installable_format_has_one_installer():
    installable = set(FormatTag) - {FormatTag.UNSUPPORTED}

    assert set(INSTALLERS) == installable


def test_raw_executable_end_to_end(downloads: Path, destination: Path):
    downloaded = downloads / "ghfetch-tmp123"
    downloaded.write_bytes(EXECUTABLE_CONTENT)

    result = install("mytool-linux", downloaded, destination, Executable("mytool"))

    assert result == destination / "mytool"
    assert result.read_bytes() == EXECUTABLE_CONTENT
    if os.name == "posix":
        assert result.stat().st_mode & 0o111


def test_gzip_end_to_end(downloads: Path, destination: Path):
    downloaded = downloads / "ghfetch-tmp456"
    downloaded.write_bytes(gzip.compress(EXECUTABLE_CONTENT))

    result = install("mytool-linux.gz", downloaded, destination, Executable("mytool"))

    assert result is not None
    assert result.read_bytes() == EXECUTABLE_CONTENT


def test_unsupported_format(downloads: Path, destination: Path):
    downloaded = downloads / "notes"
    downloaded.write_text("hello", encoding="utf-8")

    with pytest.raises(UnsupportedFormatError) as exc_info:
        install("notes.foobar", downloaded, destination, Executable("mytool"))

    assert "notes.foobar" in str(exc_info.value)
    assert isinstance(exc_info.value, InstallError)


def test_destination_not_a_directory_fails_before_classifying(
    downloads: Path, tmp_path: Path
):
    downloaded = downloads / "asset"
    downloaded.write_bytes(EXECUTABLE_CONTENT)
    not_a_dir = tmp_path / "file.txt"
    not_a_dir.write_text("x", encoding="utf-8")

    with (
        patch("ghfetch.core.install.installer.classify") as mock_classify,
        pytest.raises(DestinationError) as exc_info,
    ):
        install("asset", downloaded, not_a_dir, Executable("mytool"))

    mock_classify.assert_not_called()
    assert str(not_a_dir) in str(exc_info.value)
    assert "directory" in str(exc_info.value)


def test_validate_destination_returns_directory(destination: Path):
    assert validate_destination(destination) == destination


def test_validate_destination_missing_path(tmp_path: Path):
    missing = tmp_path / "missing"

    with pytest.raises(DestinationError, match="is not a directory"):
        validate_destination(missing)
