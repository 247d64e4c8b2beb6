"""GitHub API client for release data."""

from typing import Any

import aiohttp
import orjson

from ghfetch.constants import (
    GITHUB_API_ACCEPT,
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    HTTP_NOT_FOUND,
)
from ghfetch.domain.types import Release, Repository, Tag
from ghfetch.exceptions import GitHubError, ReleaseNotFoundError
from ghfetch.logger import get_logger

logger = get_logger(__name__)


class GitHubClient:
    """Fetches release metadata from the GitHub REST API."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        token: str | None = None,
        api_url: str = GITHUB_API_URL,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session for making requests
            token: Optional bearer token forwarded as Authorization header
            api_url: Base API URL

        """
        self.session = session
        self.token = token
        self.api_url = api_url.rstrip("/")

    def build_headers(self, accept: str = GITHUB_API_ACCEPT) -> dict[str, str]:
        """Build request headers, with authentication when a token is set."""
        headers = {
            "Accept": accept,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def release_url(self, repository: Repository, tag: Tag | None) -> str:
        base = f"{self.api_url}/repos/{repository.owner}/{repository.repo}"
        if tag is None:
            return f"{base}/releases/latest"
        return f"{base}/releases/tags/{tag.value}"

    async def fetch_release(
        self, repository: Repository, tag: Tag | None = None
    ) -> Release:
        """Fetch the latest release, or the release for ``tag``.

        Raises:
            ReleaseNotFoundError: If the repository or tag does not exist
            GitHubError: On any other HTTP or network failure

        """
        url = self.release_url(repository, tag)
        logger.debug("Fetching release: %s", url)
        data = await self._get_json(url, target=str(repository))
        release = Release.from_api_response(data)
        logger.debug(
            "Release %s of %s has %d assets",
            release.tag,
            repository,
            len(release.assets),
        )
        return release

    async def _get_json(self, url: str, target: str) -> dict[str, Any]:
        try:
            async with self.session.get(
                url, headers=self.build_headers()
            ) as response:
                if response.status == HTTP_NOT_FOUND:
                    msg = "release not found"
                    raise ReleaseNotFoundError(msg, target=target)
                response.raise_for_status()
                body = await response.read()
        except aiohttp.ClientResponseError as e:
            msg = f"HTTP {e.status} {e.message}"
            raise GitHubError(msg, target=target) from e
        except (aiohttp.ClientError, TimeoutError) as e:
            raise GitHubError(str(e) or type(e).__name__, target=target) from e

        try:
            data = orjson.loads(body)
        except orjson.JSONDecodeError as e:
            msg = f"invalid JSON response: {e}"
            raise GitHubError(msg, target=target) from e

        if not isinstance(data, dict):
            msg = "unexpected response payload"
            raise GitHubError(msg, target=target)
        return data
