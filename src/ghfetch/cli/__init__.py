"""Command-line interface for ghfetch."""

from ghfetch.cli.parser import CLIParser
from ghfetch.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
