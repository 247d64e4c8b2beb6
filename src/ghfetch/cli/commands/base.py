"""Base command handler for ghfetch CLI commands."""

import os
from abc import ABC, abstractmethod
from argparse import Namespace

import aiohttp

from ghfetch.config import GlobalConfig
from ghfetch.constants import ENV_GITHUB_TOKEN
from ghfetch.core.github import GitHubClient


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner owns the HTTP session and injects it together with the
    global configuration.
    """

    def __init__(
        self,
        global_config: GlobalConfig,
        session: aiohttp.ClientSession,
        token: str | None = None,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            global_config: Loaded global settings
            session: Shared HTTP session
            token: GitHub token (default: GITHUB_TOKEN environment variable)

        """
        self.global_config = global_config
        self.session = session
        self.token = token if token is not None else os.getenv(ENV_GITHUB_TOKEN)
        self.github_client = GitHubClient(session, token=self.token)

    @abstractmethod
    async def execute(self, args: Namespace) -> None:
        """Execute the command with parsed arguments."""
