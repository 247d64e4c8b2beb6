"""Exception classes for ghfetch operations.

Errors fall in two propagation classes:

- Fatal: ``InstallError`` and its subclasses abort the install attempt.
- Not found: ``AssetNotFoundError`` reports that no release asset fits.

Every ``str()`` is suitable for direct display to a user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ghfetch.domain.types import SystemDescriptor


class GhfetchError(Exception):
    """Base exception for ghfetch operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class InstallError(GhfetchError):
    """Raised when an install attempt fails. Always fatal, never retried."""

    error_prefix = "Installation failed"


class UnsupportedFormatError(InstallError):
    """Raised when a downloaded file has no installer."""

    def __init__(self, file_name: str) -> None:
        super().__init__(
            f"{file_name} is not a supported archive, package or executable"
        )
        self.file_name = file_name


class DestinationError(InstallError):
    """Raised when the install destination is not an existing directory."""

    def __init__(self, path: object) -> None:
        super().__init__(f"{path} is not a directory")
        self.path = path


class CommandError(InstallError):
    """Raised when an external command cannot run or exits with failure.

    Attributes:
        command_name: Name of the program that was executed.
        exit_code: Numeric exit status as text, or "NA" when the process
            was terminated without one. None when the process never spawned.
        stderr: Captured standard error text.

    """

    def __init__(
        self,
        message: str,
        command_name: str,
        exit_code: str | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command_name = command_name
        self.exit_code = exit_code
        self.stderr = stderr


class AssetNotFoundError(GhfetchError):
    """Raised when no release asset matches the request."""

    error_prefix = "No asset found"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        system: SystemDescriptor | None = None,
    ) -> None:
        super().__init__(message, target)
        self.system = system


class SelectionCancelledError(GhfetchError):
    """Raised when the user quits the interactive asset prompt."""

    error_prefix = "Selection cancelled"


class ValidationError(GhfetchError):
    """Raised when user input fails validation."""

    error_prefix = "Validation failed"


class GitHubError(GhfetchError):
    """Raised when the GitHub API request fails."""

    error_prefix = "Error fetching the release"


class ReleaseNotFoundError(GitHubError):
    """Raised when the repository or release tag does not exist."""


class DownloadError(GhfetchError):
    """Raised when an asset download fails."""

    error_prefix = "Error downloading asset"
