"""GitHub release access."""

from ghfetch.core.github.client import GitHubClient

__all__ = ["GitHubClient"]
