"""Installer for Debian packages through dpkg."""

from pathlib import Path

from ghfetch.constants import DPKG
from ghfetch.core.install.command import run_command
from ghfetch.domain.types import ClassifiedFile, Executable
from ghfetch.logger import get_logger

logger = get_logger(__name__)


def install_debian_package(
    file: ClassifiedFile,
    destination: Path,  # noqa: ARG001
    executable: Executable,  # noqa: ARG001
) -> None:
    """Install a .deb with ``dpkg --install``.

    The package manager owns the file layout, so destination and
    executable name do not apply and no path is returned.

    Raises:
        CommandError: If dpkg cannot run or reports failure

    """
    logger.info("Installing %s with %s", file.path.name, DPKG)
    run_command(DPKG, [DPKG, "--install", str(file.path)])
