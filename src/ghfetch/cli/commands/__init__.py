"""Command handlers for the ghfetch CLI."""

from ghfetch.cli.commands.base import BaseCommandHandler
from ghfetch.cli.commands.download import DownloadHandler
from ghfetch.cli.commands.untag import UntagHandler

__all__ = ["BaseCommandHandler", "DownloadHandler", "UntagHandler"]
