"""Protocols implemented by UI layers."""

from ghfetch.core.protocols.progress import (
    NullProgressReporter,
    ProgressReporter,
    ProgressType,
)

__all__ = ["NullProgressReporter", "ProgressReporter", "ProgressType"]
