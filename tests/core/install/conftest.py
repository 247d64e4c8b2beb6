"""Fixtures for installer tests."""

from pathlib import Path

import pytest

EXECUTABLE_CONTENT = b"#!/bin/sh\necho hi"


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """Existing, empty install directory."""
    d = tmp_path / "bin"
    d.mkdir()
    return d


@pytest.fixture
def downloads(tmp_path: Path) -> Path:
    """Directory holding downloaded artifacts."""
    d = tmp_path / "downloads"
    d.mkdir()
    return d
