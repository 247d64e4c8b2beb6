"""Installers for multi-file archives (zip, tar, compressed tar).

The executable is located among the archive's file entries and streamed
straight to the destination; nothing else is extracted.

Entry choice, in order:
    1. an entry whose base name is the executable name (or ``<name>.exe``)
    2. the only file entry of the archive
    3. the only file entry carrying an execute permission bit
"""

import stat
import tarfile
import zipfile
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from ghfetch.domain.types import ClassifiedFile, Executable, FormatTag
from ghfetch.exceptions import InstallError
from ghfetch.infrastructure.file_ops import install_stream
from ghfetch.logger import get_logger

logger = get_logger(__name__)

TAR_MODES: dict[FormatTag, str] = {
    FormatTag.TAR: "r:",
    FormatTag.TAR_GZIP: "r:gz",
    FormatTag.TAR_XZ: "r:xz",
    FormatTag.TAR_BZIP2: "r:bz2",
}

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True)
class ArchiveEntry:
    """File entry inside an archive."""

    path: str
    executable_bit: bool

    @property
    def basename(self) -> str:
        return PurePosixPath(self.path).name


def select_entry(
    entries: Sequence[ArchiveEntry], executable: Executable
) -> ArchiveEntry | None:
    """Pick the archive entry to install, or None if it is ambiguous."""
    wanted = {executable.name, f"{executable.name}.exe"}
    named = [entry for entry in entries if entry.basename in wanted]
    if named:
        return named[0]

    if len(entries) == 1:
        return entries[0]

    with_bit = [entry for entry in entries if entry.executable_bit]
    if len(with_bit) == 1:
        return with_bit[0]

    return None


def _entry_not_found(file: ClassifiedFile, executable: Executable) -> InstallError:
    msg = (
        f"Cannot find executable '{executable.name}' in {file.path}; "
        "use a different executable name"
    )
    return InstallError(msg)


def install_zip(
    file: ClassifiedFile, destination: Path, executable: Executable
) -> Path:
    """Install the executable contained in a zip archive."""
    executable_path = destination / executable.name
    try:
        with zipfile.ZipFile(file.path) as archive:
            infos = {
                info.filename: info
                for info in archive.infolist()
                if not info.is_dir()
            }
            entries = [
                ArchiveEntry(
                    path=name,
                    executable_bit=bool((info.external_attr >> 16) & _EXECUTE_BITS),
                )
                for name, info in infos.items()
            ]
            entry = select_entry(entries, executable)
            if entry is None:
                raise _entry_not_found(file, executable)

            logger.debug("Extracting %s from %s", entry.path, file.path)
            with archive.open(infos[entry.path]) as stream:
                return install_stream(stream, executable_path, file.path)
    except (OSError, zipfile.BadZipFile) as e:
        msg = f"Error reading zip archive {file.path}: {e}"
        raise InstallError(msg) from e


def install_tar(
    file: ClassifiedFile, destination: Path, executable: Executable
) -> Path:
    """Install the executable contained in a (compressed) tar archive."""
    executable_path = destination / executable.name
    try:
        with tarfile.open(file.path, mode=TAR_MODES[file.format]) as archive:
            members = {
                member.name: member
                for member in archive.getmembers()
                if member.isfile()
            }
            entries = [
                ArchiveEntry(
                    path=name,
                    executable_bit=bool(member.mode & _EXECUTE_BITS),
                )
                for name, member in members.items()
            ]
            entry = select_entry(entries, executable)
            if entry is None:
                raise _entry_not_found(file, executable)

            logger.debug("Extracting %s from %s", entry.path, file.path)
            stream = archive.extractfile(members[entry.path])
            if stream is None:
                raise _entry_not_found(file, executable)
            with stream:
                return install_stream(stream, executable_path, file.path)
    except (OSError, EOFError, tarfile.TarError) as e:
        msg = f"Error reading tar archive {file.path}: {e}"
        raise InstallError(msg) from e
