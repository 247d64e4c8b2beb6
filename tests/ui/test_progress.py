"""Tests for the console progress display."""

import io

import pytest

from ghfetch.core.protocols import ProgressType
from ghfetch.ui.progress import ConsoleProgressReporter, format_bytes


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (512, "512 B"),
        (1536, "1.5 KiB"),
        (5 * 1024 * 1024, "5.0 MiB"),
        (3 * 1024**3, "3.0 GiB"),
    ],
)
def test_format_bytes(size: int, expected: str):
    assert format_bytes(size) == expected


def test_inactive_when_not_a_terminal():
    assert ConsoleProgressReporter(io.StringIO()).is_active() is False


@pytest.mark.asyncio
async def test_renders_bar_and_summary():
    stream = io.StringIO()
    reporter = ConsoleProgressReporter(stream)

    task_id = await reporter.add_task("tool.tar.gz", ProgressType.DOWNLOAD, 2048)
    await reporter.update_task(task_id, completed=1024)
    await reporter.finish_task(task_id, success=True)

    output = stream.getvalue()
    assert task_id.startswith("download-")
    assert "50%" in output
    assert "✓ tool.tar.gz 1.0 KiB\n" in output


@pytest.mark.asyncio
async def test_failed_task_without_total():
    stream = io.StringIO()
    reporter = ConsoleProgressReporter(stream)

    task_id = await reporter.add_task("tool", ProgressType.DOWNLOAD)
    await reporter.update_task(task_id, completed=100)
    await reporter.finish_task(task_id, success=False, description="failed")

    assert "✗ tool 100 B (failed)" in stream.getvalue()


@pytest.mark.asyncio
async def test_unknown_task_is_ignored():
    stream = io.StringIO()
    reporter = ConsoleProgressReporter(stream)

    await reporter.update_task("missing", completed=1)
    await reporter.finish_task("missing")

    assert stream.getvalue() == ""
