"""Removal of downloaded artifacts after an install attempt.

Cleanup failures are reported as warnings and never replace the
install outcome.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ghfetch.logger import get_logger

logger = get_logger(__name__)


def cleanup_artifact(path: Path) -> bool:
    """Delete a downloaded artifact.

    An already missing file counts as removed.

    Returns:
        False if the file exists but could not be deleted

    """
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Unable to remove downloaded file %s: %s", path, e)
        return False
    logger.debug("Removed downloaded file: %s", path)
    return True


@contextmanager
def removing_artifact(path: Path) -> Iterator[Path]:
    """Yield ``path`` and delete it on exit, whatever the outcome."""
    try:
        yield path
    finally:
        cleanup_artifact(path)
