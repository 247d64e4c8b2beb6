"""Asset installation: classification, per-format installers, cleanup."""

from ghfetch.core.install.cleanup import cleanup_artifact, removing_artifact
from ghfetch.core.install.installer import (
    INSTALLERS,
    install,
    validate_destination,
)

__all__ = [
    "INSTALLERS",
    "cleanup_artifact",
    "install",
    "removing_artifact",
    "validate_destination",
]
