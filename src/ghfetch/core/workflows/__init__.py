"""Workflows composing the GitHub client, downloader and installers."""
