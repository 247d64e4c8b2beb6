"""Global INI settings for ghfetch.

The settings file is optional. Example ``~/.config/ghfetch/settings.conf``::

    [DEFAULT]
    log_level = DEBUG  # file log level
    console_log_level = WARNING

    [network]
    timeout_seconds = 30
"""

import configparser
from pathlib import Path
from typing import TypedDict

from ghfetch.config.parser import CommentAwareConfigParser
from ghfetch.config.paths import Paths
from ghfetch.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_TIMEOUT_SECONDS,
    SECTION_DEFAULT,
    SECTION_NETWORK,
    VALID_LOG_LEVELS,
)
from ghfetch.logger import get_logger

logger = get_logger(__name__)


class NetworkConfig(TypedDict):
    """Network configuration options."""

    timeout_seconds: int


class GlobalConfig(TypedDict):
    """Global application configuration."""

    log_level: str
    console_log_level: str
    network: NetworkConfig


class GlobalConfigManager:
    """Loads global settings, falling back to defaults for missing keys."""

    def __init__(self, config_file: Path | None = None) -> None:
        """Initialize the manager.

        Args:
            config_file: Settings file path (default: Paths.GLOBAL_CONFIG_FILE)

        """
        self.config_file = config_file or Paths.GLOBAL_CONFIG_FILE

    def get_default_global_config(self) -> GlobalConfig:
        """Return the built-in defaults."""
        return {
            "log_level": DEFAULT_LOG_LEVEL,
            "console_log_level": DEFAULT_CONSOLE_LOG_LEVEL,
            "network": {"timeout_seconds": DEFAULT_TIMEOUT_SECONDS},
        }

    def load_global_config(self) -> GlobalConfig:
        """Load settings from the INI file.

        Returns:
            Merged configuration. Unreadable files and invalid values
            fall back to defaults with a warning.

        """
        config = self.get_default_global_config()
        if not self.config_file.exists():
            return config

        parser = CommentAwareConfigParser()
        try:
            parser.read(self.config_file, encoding="utf-8")
        except (configparser.Error, OSError, UnicodeDecodeError) as e:
            logger.warning(
                "Cannot read settings file %s, using defaults: %s",
                self.config_file,
                e,
            )
            return config

        defaults = parser[SECTION_DEFAULT]
        if KEY_LOG_LEVEL in defaults:
            config["log_level"] = self._parse_level(
                parser.get(SECTION_DEFAULT, KEY_LOG_LEVEL),
                DEFAULT_LOG_LEVEL,
            )
        if KEY_CONSOLE_LOG_LEVEL in defaults:
            config["console_log_level"] = self._parse_level(
                parser.get(SECTION_DEFAULT, KEY_CONSOLE_LOG_LEVEL),
                DEFAULT_CONSOLE_LOG_LEVEL,
            )

        if parser.has_option(SECTION_NETWORK, KEY_TIMEOUT_SECONDS):
            raw_timeout = parser.get(SECTION_NETWORK, KEY_TIMEOUT_SECONDS)
            try:
                timeout = int(raw_timeout)
            except ValueError:
                timeout = 0
            if timeout > 0:
                config["network"]["timeout_seconds"] = timeout
            else:
                logger.warning(
                    "Invalid %s '%s', using %s",
                    KEY_TIMEOUT_SECONDS,
                    raw_timeout,
                    DEFAULT_TIMEOUT_SECONDS,
                )

        return config

    @staticmethod
    def _parse_level(value: str, default: str) -> str:
        level = value.strip().upper()
        if level in VALID_LOG_LEVELS:
            return level
        logger.warning("Invalid log level '%s', using %s", value, default)
        return default
