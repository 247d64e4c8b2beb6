"""Tests for user-facing error messages."""

from ghfetch.domain.types import SystemDescriptor
from ghfetch.exceptions import (
    AssetNotFoundError,
    CommandError,
    DestinationError,
    DownloadError,
    GhfetchError,
    InstallError,
    UnsupportedFormatError,
)


def test_message_with_and_without_target():
    assert str(DownloadError("timed out")) == "Error downloading asset: timed out"
    assert str(DownloadError("timed out", target="tool.zip")) == (
        "Error downloading asset for 'tool.zip': timed out"
    )


def test_install_errors_share_a_base():
    for error in (
        UnsupportedFormatError("a.rpm"),
        DestinationError("/tmp/file"),
        CommandError("failed", command_name="dpkg"),
    ):
        assert isinstance(error, InstallError)
        assert isinstance(error, GhfetchError)


def test_destination_error_names_path():
    assert str(DestinationError("/tmp/x")) == (
        "Installation failed: /tmp/x is not a directory"
    )


def test_unsupported_format_names_file():
    error = UnsupportedFormatError("tool.rpm")

    assert error.file_name == "tool.rpm"
    assert "tool.rpm" in str(error)


def test_asset_not_found_keeps_system():
    system = SystemDescriptor(os="linux", arch="riscv64")

    error = AssetNotFoundError("nothing matches", system=system)

    assert error.system is system
    assert not isinstance(error, InstallError)
