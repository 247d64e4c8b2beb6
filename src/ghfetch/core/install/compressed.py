"""Installers for single-stream compressed executables (gz, xz, bz2).

These formats wrap exactly one file, so the decompressed stream is the
executable itself.
"""

import bz2
import gzip
import lzma
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO

from ghfetch.domain.types import ClassifiedFile, Executable
from ghfetch.exceptions import InstallError
from ghfetch.infrastructure.file_ops import install_stream
from ghfetch.logger import get_logger

logger = get_logger(__name__)

Decoder = Callable[[BinaryIO], BinaryIO]


def _decompress_and_move(
    decode: Decoder,
    file: ClassifiedFile,
    destination: Path,
    executable: Executable,
) -> Path:
    try:
        compressed = file.path.open("rb")
    except OSError as e:
        msg = f"Error opening {file.path}: {e}"
        raise InstallError(msg) from e

    executable_path = destination / executable.name
    logger.debug(
        "Decompressing %s (%s) to %s",
        file.path,
        file.format.value,
        executable_path,
    )
    with compressed, decode(compressed) as stream:
        return install_stream(stream, executable_path, file.path)


def install_gzip(
    file: ClassifiedFile, destination: Path, executable: Executable
) -> Path:
    """Decompress a gzip file into ``destination/executable.name``."""
    return _decompress_and_move(
        lambda f: gzip.GzipFile(fileobj=f, mode="rb"),
        file,
        destination,
        executable,
    )


def install_xz(
    file: ClassifiedFile, destination: Path, executable: Executable
) -> Path:
    """Decompress an xz file into ``destination/executable.name``."""
    return _decompress_and_move(
        lambda f: lzma.LZMAFile(f, mode="rb"),
        file,
        destination,
        executable,
    )


def install_bzip2(
    file: ClassifiedFile, destination: Path, executable: Executable
) -> Path:
    """Decompress a bzip2 file into ``destination/executable.name``."""
    return _decompress_and_move(
        lambda f: bz2.BZ2File(f, mode="rb"),
        file,
        destination,
        executable,
    )
