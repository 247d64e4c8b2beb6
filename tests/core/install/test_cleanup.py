"""Tests for downloaded artifact cleanup."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from ghfetch.core.install.cleanup import cleanup_artifact, removing_artifact
from ghfetch.exceptions import InstallError


def test_removes_file(downloads: Path):
    artifact = downloads / "asset.tar.gz"
    artifact.write_bytes(b"data")

    assert cleanup_artifact(artifact) is True
    assert not artifact.exists()


def test_cleanup_twice_is_tolerated(downloads: Path):
    artifact = downloads / "asset.tar.gz"
    artifact.write_bytes(b"data")

    assert cleanup_artifact(artifact) is True
    assert cleanup_artifact(artifact) is True


def test_failure_is_logged_not_raised(downloads: Path, caplog):
    artifact = downloads / "asset"
    artifact.write_bytes(b"data")

    with (
        patch.object(Path, "unlink", side_effect=PermissionError("denied")),
        caplog.at_level(logging.WARNING),
    ):
        assert cleanup_artifact(artifact) is False

    assert "Unable to remove downloaded file" in caplog.text


def test_context_removes_file_after_success(downloads: Path):
    artifact = downloads / "asset"
    artifact.write_bytes(b"data")

    with removing_artifact(artifact) as path:
        assert path.exists()

    assert not artifact.exists()


def test_context_removes_file_and_keeps_install_error(downloads: Path):
    artifact = downloads / "asset"
    artifact.write_bytes(b"data")

    with pytest.raises(InstallError, match="boom"), removing_artifact(artifact):
        raise InstallError("boom")

    assert not artifact.exists()


def test_cleanup_failure_does_not_mask_install_error(downloads: Path):
    artifact = downloads / "asset"
    artifact.write_bytes(b"data")

    with (
        patch.object(Path, "unlink", side_effect=PermissionError("denied")),
        pytest.raises(InstallError, match="boom"),
        removing_artifact(artifact),
    ):
        raise InstallError("boom")
