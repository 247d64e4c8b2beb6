"""HTTP session utilities for ghfetch."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from ghfetch.config import GlobalConfig


@asynccontextmanager
async def create_http_session(
    global_config: GlobalConfig,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create an HTTP session with timeouts from the global configuration.

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout_seconds = int(global_config["network"]["timeout_seconds"])
    timeout = aiohttp.ClientTimeout(
        total=None,
        sock_read=timeout_seconds * 3,
        sock_connect=timeout_seconds,
    )
    async with aiohttp.ClientSession(timeout=timeout) as session:
        yield session
