"""Installer for files that are already executables."""

from pathlib import Path

from ghfetch.domain.types import ClassifiedFile, Executable
from ghfetch.exceptions import InstallError
from ghfetch.infrastructure.file_ops import install_stream
from ghfetch.logger import get_logger

logger = get_logger(__name__)


def install_raw_executable(
    file: ClassifiedFile, destination: Path, executable: Executable
) -> Path:
    """Copy the file as-is to ``destination/executable.name``."""
    try:
        source = file.path.open("rb")
    except OSError as e:
        msg = f"Error opening {file.path}: {e}"
        raise InstallError(msg) from e

    executable_path = destination / executable.name
    logger.debug("Copying %s to %s", file.path, executable_path)
    with source:
        return install_stream(source, executable_path, file.path)
