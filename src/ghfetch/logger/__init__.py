"""Logging utilities for ghfetch.

Structured logging with colored console output, a rotating log file and
a QueueHandler/QueueListener pair so that the download event loop never
blocks on handler I/O.

Usage:
    >>> from ghfetch.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Installing %s", executable_name)  # %-style only

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Handlers are only attached to the root 'ghfetch' logger
"""

from typing import TYPE_CHECKING

from ghfetch.logger.config import (
    update_logger_from_config as _update_config,
)
from ghfetch.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from ghfetch.logger.handlers import ConfigurationError
from ghfetch.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from ghfetch.logger.state import get_state

if TYPE_CHECKING:
    from ghfetch.config.settings import GlobalConfig

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config: "GlobalConfig") -> None:
    """Apply log levels from loaded settings to the active handlers."""
    _update_config(get_state(), config)
