"""Configuration management for ghfetch.

- GlobalConfigManager: INI settings (settings.py)
- Paths: Path constants (paths.py)
- CommentAwareConfigParser: INI parser helper (parser.py)
"""

from ghfetch.config.parser import CommentAwareConfigParser
from ghfetch.config.paths import Paths
from ghfetch.config.settings import GlobalConfig, GlobalConfigManager

__all__ = [
    "CommentAwareConfigParser",
    "GlobalConfig",
    "GlobalConfigManager",
    "Paths",
]
