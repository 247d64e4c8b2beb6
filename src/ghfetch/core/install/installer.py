"""Format dispatch for installing a downloaded asset.

Each FormatTag maps to exactly one installer. Adding a format means one
new FormatTag member and one entry in INSTALLERS.
"""

from collections.abc import Callable
from pathlib import Path

from ghfetch.core.install.archive import install_tar, install_zip
from ghfetch.core.install.classifier import classify
from ghfetch.core.install.compressed import (
    install_bzip2,
    install_gzip,
    install_xz,
)
from ghfetch.core.install.debian import install_debian_package
from ghfetch.core.install.raw import install_raw_executable
from ghfetch.domain.types import ClassifiedFile, Executable, FormatTag
from ghfetch.exceptions import DestinationError, UnsupportedFormatError
from ghfetch.logger import get_logger

logger = get_logger(__name__)

Installer = Callable[[ClassifiedFile, Path, Executable], Path | None]

INSTALLERS: dict[FormatTag, Installer] = {
    FormatTag.GZIP: install_gzip,
    FormatTag.XZ: install_xz,
    FormatTag.BZIP2: install_bzip2,
    FormatTag.TAR: install_tar,
    FormatTag.TAR_GZIP: install_tar,
    FormatTag.TAR_XZ: install_tar,
    FormatTag.TAR_BZIP2: install_tar,
    FormatTag.ZIP: install_zip,
    FormatTag.DEBIAN_PACKAGE: install_debian_package,
    FormatTag.RAW_EXECUTABLE: install_raw_executable,
}


def validate_destination(path: Path) -> Path:
    """Ensure the install destination is an existing directory.

    Raises:
        DestinationError: If ``path`` is not a directory

    """
    if not path.is_dir():
        raise DestinationError(path)
    return path


def install(
    asset_name: str,
    path: Path,
    destination: Path,
    executable: Executable,
) -> Path | None:
    """Install a downloaded asset.

    Args:
        asset_name: Name the asset was published under
        path: Local downloaded file
        destination: Existing directory receiving the executable
        executable: Desired executable name

    Returns:
        Path of the installed executable, or None for package formats
        installed by the system package manager

    Raises:
        InstallError: If the format is unsupported or installing fails

    """
    validate_destination(destination)
    classified = classify(path, asset_name)
    if classified.format is FormatTag.UNSUPPORTED:
        raise UnsupportedFormatError(asset_name)

    logger.debug(
        "Installing %s as %s into %s",
        asset_name,
        executable.name,
        destination,
    )
    return INSTALLERS[classified.format](classified, destination, executable)
