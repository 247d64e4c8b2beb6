"""Download command handler."""

from argparse import Namespace
from pathlib import Path

from ghfetch.cli.commands.base import BaseCommandHandler
from ghfetch.core.download import DownloadService
from ghfetch.core.workflows.download import DownloadOptions, DownloadWorkflow
from ghfetch.domain.types import InstallConfig, Repository, Tag
from ghfetch.logger import get_logger
from ghfetch.ui.progress import ConsoleProgressReporter

logger = get_logger(__name__)


def build_options(args: Namespace) -> DownloadOptions:
    """Translate parsed arguments into workflow options."""
    install = None
    if args.install is not None:
        install = InstallConfig(desired_executable_name=args.install or None)
    return DownloadOptions(
        repository=Repository.parse(args.repository),
        select=args.select,
        automatic=args.automatic,
        tag=Tag(args.tag) if args.tag else None,
        output=Path(args.output).expanduser() if args.output else None,
        install=install,
    )


class DownloadHandler(BaseCommandHandler):
    """Handler for the download command."""

    async def execute(self, args: Namespace) -> None:
        options = build_options(args)
        download_service = DownloadService(
            self.session,
            progress_reporter=ConsoleProgressReporter(),
            headers=self.github_client.build_headers(
                accept="application/octet-stream"
            ),
        )
        workflow = DownloadWorkflow(self.github_client, download_service)
        result = await workflow.run(options)

        if result.installed_path is not None:
            print(f"✅ Installed {result.installed_path}")
        elif result.download_path is not None:
            print(f"✅ Saved {result.download_path}")
        else:
            print(f"✅ Installed {result.asset.name}")
