"""Classify downloaded files by archive, package or executable format.

The declared asset name decides first. Only names without a known
extension are inspected on disk, and then only for an executable
signature or an execute permission bit.
"""

import os
import stat
from pathlib import Path

from ghfetch.domain.types import ClassifiedFile, FormatTag
from ghfetch.logger import get_logger

logger = get_logger(__name__)

# Longest suffix first so ".tar.gz" wins over ".gz"
EXTENSION_FORMATS: tuple[tuple[str, FormatTag], ...] = tuple(
    sorted(
        (
            (".tar.gz", FormatTag.TAR_GZIP),
            (".tgz", FormatTag.TAR_GZIP),
            (".tar.xz", FormatTag.TAR_XZ),
            (".txz", FormatTag.TAR_XZ),
            (".tar.bz2", FormatTag.TAR_BZIP2),
            (".tbz2", FormatTag.TAR_BZIP2),
            (".tbz", FormatTag.TAR_BZIP2),
            (".tar", FormatTag.TAR),
            (".gz", FormatTag.GZIP),
            (".xz", FormatTag.XZ),
            (".bz2", FormatTag.BZIP2),
            (".deb", FormatTag.DEBIAN_PACKAGE),
            (".zip", FormatTag.ZIP),
        ),
        key=lambda item: len(item[0]),
        reverse=True,
    )
)

EXECUTABLE_SIGNATURES: tuple[bytes, ...] = (
    b"\x7fELF",  # Linux/BSD
    b"\xcf\xfa\xed\xfe",  # Mach-O 64-bit
    b"\xce\xfa\xed\xfe",  # Mach-O 32-bit
    b"\xca\xfe\xba\xbe",  # Mach-O universal
    b"MZ",  # Windows PE
    b"#!",  # script with shebang
)
_SIGNATURE_LENGTH = max(len(signature) for signature in EXECUTABLE_SIGNATURES)


def format_from_name(name: str) -> FormatTag | None:
    """Map a file name to a format by extension, or None if unknown."""
    lowered = name.lower()
    for suffix, format_tag in EXTENSION_FORMATS:
        if lowered.endswith(suffix):
            return format_tag
    return None


def is_native_executable(path: Path) -> bool:
    """Check a file for an executable signature or execute permission."""
    try:
        with path.open("rb") as f:
            header = f.read(_SIGNATURE_LENGTH)
        mode = path.stat().st_mode
    except OSError as e:
        logger.debug("Cannot inspect %s: %s", path, e)
        return False

    if header.startswith(EXECUTABLE_SIGNATURES):
        return True
    return os.name == "posix" and stat.S_ISREG(mode) and bool(
        mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    )


def classify(path: Path, declared_name: str) -> ClassifiedFile:
    """Classify a downloaded file.

    Args:
        path: Local file (may be a temp file with an unrelated name)
        declared_name: Asset name the file was published under

    Returns:
        ClassifiedFile; format is UNSUPPORTED when nothing matches

    """
    format_tag = format_from_name(declared_name)
    if format_tag is None:
        format_tag = (
            FormatTag.RAW_EXECUTABLE
            if is_native_executable(path)
            else FormatTag.UNSUPPORTED
        )

    logger.debug("Classified %s as %s", declared_name, format_tag.value)
    return ClassifiedFile(path=path, format=format_tag)
