"""Run external programs and turn their exit status into typed errors.

The runner never interprets the program's own diagnostics beyond its
exit status; stderr is passed through for display.
"""

import subprocess
from collections.abc import Sequence

from ghfetch.exceptions import CommandError
from ghfetch.logger import get_logger

logger = get_logger(__name__)

NO_EXIT_CODE = "NA"


def exit_code_text(returncode: int) -> str:
    """Exit status for display; negative codes mean killed by a signal."""
    if returncode < 0:
        return NO_EXIT_CODE
    return str(returncode)


def decode_stderr(name: str, stderr: bytes) -> str:
    """Decode stderr as UTF-8, with a generic message for invalid text."""
    try:
        return stderr.decode("utf-8")
    except UnicodeDecodeError:
        return f"Unknown {name} error"


def run_command(name: str, args: Sequence[str]) -> None:
    """Run ``args`` and wait for it to finish.

    Args:
        name: Program name used in error messages
        args: Full command line, program first

    Raises:
        CommandError: If the program cannot be spawned or exits non-zero

    """
    logger.debug("Running %s: %s", name, " ".join(args))
    try:
        completed = subprocess.run(  # noqa: S603
            list(args),
            capture_output=True,
            check=False,
        )
    except OSError as e:
        msg = f"An error occurred executing '{name}': {e}"
        raise CommandError(msg, command_name=name) from e

    if completed.returncode == 0:
        logger.debug("%s finished successfully", name)
        return

    exit_code = exit_code_text(completed.returncode)
    stderr = decode_stderr(name, completed.stderr or b"")
    msg = f"An error occurred while executing (status: {exit_code}):\n  {stderr}"
    raise CommandError(
        msg,
        command_name=name,
        exit_code=exit_code,
        stderr=stderr,
    )
