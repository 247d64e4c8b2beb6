"""Centralized constants module for the ghfetch application.

Constants are organized by logical categories and use typing.Final
annotations to ensure immutability.

Usage:
    from ghfetch.constants import CHUNK_SIZE
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "ghfetch"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# Environment variables
ENV_LOG_DIR: Final[str] = "GHFETCH_LOG_DIR"
ENV_GITHUB_TOKEN: Final[str] = "GITHUB_TOKEN"

# =============================================================================
# GitHub Constants
# =============================================================================

GITHUB_API_URL: Final[str] = "https://api.github.com"
GITHUB_API_ACCEPT: Final[str] = "application/vnd.github+json"
GITHUB_API_VERSION: Final[str] = "2022-11-28"
HTTP_NOT_FOUND: Final[int] = 404

# =============================================================================
# Download / Install Constants
# =============================================================================

# Read/write size for every streaming copy (download, decompression, copy)
CHUNK_SIZE: Final[int] = 8192

# Files under this size do not get a progress bar
MIN_SIZE_FOR_PROGRESS: Final[int] = 1_048_576

EXECUTABLE_MODE: Final[int] = 0o755

# Placeholder used by untagged asset names, e.g. "tool-{tag}-linux.tar.gz"
TAG_PLACEHOLDER: Final[str] = "{tag}"

TEMP_FILE_PREFIX: Final[str] = "ghfetch-"

DPKG: Final[str] = "dpkg"

# =============================================================================
# Logging Constants
# =============================================================================

LOG_FILE_NAME: Final[str] = "ghfetch.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
