"""File operations shared by the installers.

Streaming writes to the install destination, executable permissions and
partial-file removal.
"""

import lzma
import os
import shutil
import tarfile
import zipfile
import zlib
from pathlib import Path
from typing import BinaryIO

from ghfetch.constants import CHUNK_SIZE, EXECUTABLE_MODE
from ghfetch.exceptions import InstallError
from ghfetch.logger import get_logger

logger = get_logger(__name__)

# Raised by compressed and archive readers on corrupt or truncated input
STREAM_ERRORS = (
    OSError,
    EOFError,
    lzma.LZMAError,
    zlib.error,
    zipfile.BadZipFile,
    tarfile.TarError,
)


def supports_permission_bits() -> bool:
    """Whether the host has a POSIX permission model."""
    return os.name == "posix"


def make_executable(path: Path) -> None:
    """Give ``path`` mode 0o755. No-op on platforms without permission bits.

    Raises:
        InstallError: If permissions cannot be changed

    """
    if not supports_permission_bits():
        return
    logger.debug("Making executable: %s", path)
    try:
        path.chmod(EXECUTABLE_MODE)
    except OSError as e:
        msg = f"Cannot set executable permissions on {path}: {e}"
        raise InstallError(msg) from e


def discard_partial_file(path: Path) -> None:
    """Remove a half-written destination file, ignoring missing files."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Cannot remove partial file %s: %s", path, e)
    else:
        logger.debug("Removed partial file: %s", path)


def write_stream(source: BinaryIO, destination: Path, origin: Path) -> Path:
    """Copy ``source`` to ``destination`` in fixed-size chunks.

    A destination left half-written by a failure is removed before the
    error propagates.

    Args:
        source: Readable binary stream (plain or decompressing)
        destination: File to create or overwrite
        origin: File the stream comes from, used in error messages

    Returns:
        The destination path

    Raises:
        InstallError: If reading ``origin`` or writing ``destination`` fails

    """
    try:
        target = destination.open("wb")
    except OSError as e:
        msg = f"Error creating {destination}: {e}"
        raise InstallError(msg) from e

    try:
        with target:
            shutil.copyfileobj(source, target, CHUNK_SIZE)
    except STREAM_ERRORS as e:
        discard_partial_file(destination)
        msg = f"Error saving {destination} from {origin}: {e}"
        raise InstallError(msg) from e

    return destination


def install_stream(
    source: BinaryIO, destination: Path, origin: Path
) -> Path:
    """Write ``source`` to ``destination`` and make it executable."""
    write_stream(source, destination, origin)
    try:
        make_executable(destination)
    except InstallError:
        discard_partial_file(destination)
        raise
    return destination
