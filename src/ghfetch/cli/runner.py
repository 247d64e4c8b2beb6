"""CLI runner for ghfetch.

Routes parsed arguments to command handlers and turns typed errors into
user-facing messages and exit codes.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence

from ghfetch import __version__
from ghfetch.cli.commands import BaseCommandHandler, DownloadHandler, UntagHandler
from ghfetch.cli.parser import CLIParser
from ghfetch.config import GlobalConfig, GlobalConfigManager
from ghfetch.core.http_session import create_http_session
from ghfetch.exceptions import GhfetchError
from ghfetch.logger import get_logger, update_logger_from_config

logger = get_logger(__name__)

COMMAND_HANDLERS: dict[str, type[BaseCommandHandler]] = {
    "download": DownloadHandler,
    "untag": UntagHandler,
}


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, config_manager: GlobalConfigManager | None = None) -> None:
        self.config_manager = config_manager or GlobalConfigManager()
        self.global_config: GlobalConfig = (
            self.config_manager.load_global_config()
        )
        update_logger_from_config(self.global_config)

    async def run(self, argv: Sequence[str] | None = None) -> None:
        """Parse arguments and execute the requested command.

        Exits with status 1 on any ghfetch error or cancellation.
        """
        args = CLIParser().parse_args(argv)

        if args.version:
            print(__version__)
            return

        if not args.command:
            print("❌ No command specified. Use --help.")
            sys.exit(1)

        try:
            await self._execute_command(args)
        except GhfetchError as e:
            logger.debug("Command %s failed: %s", args.command, e)
            print(f"❌ {e}")
            sys.exit(1)
        except KeyboardInterrupt:
            print("\n⏹️  Operation cancelled by user")
            sys.exit(1)

    async def _execute_command(self, args: Namespace) -> None:
        handler_class = COMMAND_HANDLERS[args.command]
        async with create_http_session(self.global_config) as session:
            handler = handler_class(self.global_config, session)
            await handler.execute(args)
