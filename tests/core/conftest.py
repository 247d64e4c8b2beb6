"""Shared fixtures for core tests: HTTP doubles and a recording reporter."""

from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from ghfetch.core.protocols import ProgressReporter, ProgressType
from ghfetch.domain.types import Asset, Release, Tag


async def async_chunk_gen(
    chunks: list[bytes],
) -> AsyncGenerator[bytes, None]:
    """Yield chunks like ``response.content.iter_chunked``."""
    for chunk in chunks:
        yield chunk


async def failing_chunk_gen(
    chunks: list[bytes], error: Exception
) -> AsyncGenerator[bytes, None]:
    """Yield ``chunks`` then raise ``error`` mid-stream."""
    for chunk in chunks:
        yield chunk
    raise error


def make_response(
    status: int = 200,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
    chunks: list[bytes] | None = None,
) -> AsyncMock:
    """Build an aiohttp response double usable with ``async with``."""
    response = AsyncMock()
    response.__aenter__.return_value = response
    response.__aexit__.return_value = None
    response.status = status
    response.headers = headers or {}
    response.read = AsyncMock(return_value=body)
    response.raise_for_status = MagicMock()
    if status >= 400:
        response.raise_for_status.side_effect = aiohttp.ClientResponseError(
            request_info=MagicMock(),
            history=(),
            status=status,
            message="Server Error",
        )
    response.content.iter_chunked = lambda _size: async_chunk_gen(
        chunks if chunks is not None else [body]
    )
    return response


def http_error(status: int) -> aiohttp.ClientResponseError:
    return aiohttp.ClientResponseError(
        request_info=MagicMock(), history=(), status=status, message="Error"
    )


class MockProgressReporter(ProgressReporter):
    """Records every call for verification in tests."""

    def __init__(self) -> None:
        self.tasks: dict[str, dict[str, Any]] = {}
        self.updates: list[tuple[str, float | None]] = []
        self.finished: list[tuple[str, bool, str | None]] = []
        self._task_counter = 0

    def is_active(self) -> bool:
        return True

    async def add_task(
        self,
        name: str,
        progress_type: ProgressType,
        total: float | None = None,
    ) -> str:
        self._task_counter += 1
        task_id = f"mock-task-{self._task_counter}"
        self.tasks[task_id] = {
            "name": name,
            "progress_type": progress_type,
            "total": total,
        }
        return task_id

    async def update_task(
        self,
        task_id: str,
        completed: float | None = None,
        description: str | None = None,  # noqa: ARG002
    ) -> None:
        self.updates.append((task_id, completed))

    async def finish_task(
        self,
        task_id: str,
        *,
        success: bool = True,
        description: str | None = None,
    ) -> None:
        self.finished.append((task_id, success, description))


@pytest.fixture
def mock_session() -> MagicMock:
    """Provide a mock aiohttp.ClientSession."""
    return MagicMock()


@pytest.fixture
def sample_asset() -> Asset:
    return Asset(
        name="tool-1.2.0-x86_64-linux.tar.gz",
        download_url="https://example.com/tool-1.2.0-x86_64-linux.tar.gz",
        size=11,
    )


@pytest.fixture
def sample_release() -> Release:
    names = [
        "tool-1.2.0-x86_64-unknown-linux-gnu.tar.gz",
        "tool-1.2.0-aarch64-apple-darwin.tar.gz",
        "tool-1.2.0-x86_64-pc-windows-msvc.zip",
    ]
    return Release(
        tag=Tag("v1.2.0"),
        assets=[
            Asset(name=name, download_url=f"https://example.com/{name}")
            for name in names
        ],
    )
