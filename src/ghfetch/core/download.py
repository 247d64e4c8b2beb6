"""Download service for release assets.

Assets are streamed to disk in fixed-size chunks with progress tracking
via the ``ProgressReporter`` protocol. A failed download never leaves a
partial file behind and is never retried.
"""

from pathlib import Path

import aiofiles
import aiohttp

from ghfetch.constants import CHUNK_SIZE, MIN_SIZE_FOR_PROGRESS
from ghfetch.core.protocols import (
    NullProgressReporter,
    ProgressReporter,
    ProgressType,
)
from ghfetch.domain.types import Asset
from ghfetch.exceptions import DownloadError
from ghfetch.logger import get_logger

logger = get_logger(__name__)


def content_length(response: aiohttp.ClientResponse) -> int | None:
    """Declared body length, or None when absent or malformed."""
    raw = response.headers.get("Content-Length")
    if raw is None:
        return None
    try:
        length = int(raw)
    except ValueError:
        return None
    return length if length >= 0 else None


class DownloadService:
    """Service for downloading release assets."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        progress_reporter: ProgressReporter | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize download service with HTTP session.

        Args:
            session: aiohttp session for downloads
            progress_reporter: Progress reporter for tracking downloads.
                Uses NullProgressReporter if not provided.
            headers: Extra request headers (e.g. authentication)

        """
        self.session = session
        self.progress_reporter = progress_reporter or NullProgressReporter()
        self.headers = headers or {}

    async def download_asset(self, asset: Asset, dest: Path) -> Path:
        """Download ``asset`` to ``dest``.

        Returns:
            Path to the downloaded file

        Raises:
            DownloadError: If the request or the file write fails

        """
        logger.debug("Downloading %s from %s", asset.name, asset.download_url)
        try:
            async with self.session.get(
                asset.download_url, headers=self.headers
            ) as response:
                response.raise_for_status()
                await self._save(response, asset.name, dest)
        except aiohttp.ClientResponseError as e:
            self._remove_partial(dest)
            msg = f"HTTP {e.status} {e.message}"
            raise DownloadError(msg, target=asset.name) from e
        except (aiohttp.ClientError, TimeoutError) as e:
            self._remove_partial(dest)
            raise DownloadError(
                str(e) or type(e).__name__, target=asset.name
            ) from e
        except OSError as e:
            self._remove_partial(dest)
            msg = f"Error saving {asset.name} to {dest}: {e}"
            raise DownloadError(msg, target=asset.name) from e

        logger.debug("Download completed: %s", dest)
        return dest

    async def _save(
        self, response: aiohttp.ClientResponse, name: str, dest: Path
    ) -> None:
        total = content_length(response)
        show_progress = self.progress_reporter.is_active() and (
            total is None or total > MIN_SIZE_FOR_PROGRESS
        )
        task_id = None
        if show_progress:
            task_id = await self.progress_reporter.add_task(
                name=name,
                progress_type=ProgressType.DOWNLOAD,
                total=total,
            )

        downloaded_bytes = 0
        success = False
        try:
            async with aiofiles.open(dest, mode="wb") as f:
                async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                    if not chunk:
                        continue
                    await f.write(chunk)
                    downloaded_bytes += len(chunk)
                    if task_id is not None:
                        await self.progress_reporter.update_task(
                            task_id, completed=downloaded_bytes
                        )
            success = True
        finally:
            if task_id is not None:
                await self.progress_reporter.finish_task(
                    task_id,
                    success=success,
                    description=None if success else "download failed",
                )

    @staticmethod
    def _remove_partial(dest: Path) -> None:
        try:
            dest.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Cannot remove partial download %s: %s", dest, e)
        else:
            logger.debug("Removed partial download: %s", dest)
