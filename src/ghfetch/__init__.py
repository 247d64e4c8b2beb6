"""Top-level package for ghfetch.

Download and install GitHub release assets.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ghfetch")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
