"""Untag command handler."""

from argparse import Namespace

from ghfetch.cli.commands.base import BaseCommandHandler
from ghfetch.core.workflows.untag import untagged_asset_names
from ghfetch.domain.types import Repository, Tag


class UntagHandler(BaseCommandHandler):
    """Print untagged asset names usable with ``download --select``."""

    async def execute(self, args: Namespace) -> None:
        names = await untagged_asset_names(
            self.github_client,
            Repository.parse(args.repository),
            Tag(args.tag) if args.tag else None,
        )
        for name in names:
            print(name)
