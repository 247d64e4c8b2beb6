"""CLI argument parser for ghfetch."""

import argparse
from argparse import Namespace
from collections.abc import Sequence


class CLIParser:
    """Command-line argument parser for ghfetch."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (default: sys.argv[1:])

        Returns:
            Parsed arguments namespace

        """
        parser = self.create_parser()
        return parser.parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="ghfetch",
            description="Download and install assets from GitHub releases",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Pick an asset interactively from the latest release
  %(prog)s download BurntSushi/ripgrep

  # Download the asset matching this system and install it
  %(prog)s download -a -i rg BurntSushi/ripgrep

  # Select an asset by its untagged name
  %(prog)s download -s "ripgrep-{tag}-x86_64-unknown-linux-musl.tar.gz" \\
      BurntSushi/ripgrep

  # Show untagged asset names of a release
  %(prog)s untag BurntSushi/ripgrep
            """,
        )
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show ghfetch version and exit",
        )
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )
        self._add_download_command(subparsers)
        self._add_untag_command(subparsers)
        return parser

    def _add_download_command(self, subparsers) -> None:
        download_parser = subparsers.add_parser(
            "download",
            help="Download (and optionally install) a release asset",
        )
        download_parser.add_argument(
            "repository", help="Repository as <owner>/<repo> or GitHub URL"
        )
        mode = download_parser.add_mutually_exclusive_group()
        mode.add_argument(
            "-s",
            "--select",
            metavar="NAME",
            help="Untagged asset name; {tag} is replaced by the version",
        )
        mode.add_argument(
            "-a",
            "--automatic",
            action="store_true",
            help="Pick the asset matching this operating system and CPU",
        )
        download_parser.add_argument(
            "-t", "--tag", help="Release tag (default: latest release)"
        )
        download_parser.add_argument(
            "-o",
            "--output",
            help=(
                "Output file or directory; with --install, the directory "
                "receiving the executable"
            ),
        )
        download_parser.add_argument(
            "-i",
            "--install",
            nargs="?",
            const="",
            default=None,
            metavar="EXECUTABLE",
            help=(
                "Install the downloaded asset, optionally naming the "
                "executable (default: repository name)"
            ),
        )

    def _add_untag_command(self, subparsers) -> None:
        untag_parser = subparsers.add_parser(
            "untag",
            help="Show release asset names with the version as {tag}",
        )
        untag_parser.add_argument(
            "repository", help="Repository as <owner>/<repo> or GitHub URL"
        )
        untag_parser.add_argument(
            "-t", "--tag", help="Release tag (default: latest release)"
        )
