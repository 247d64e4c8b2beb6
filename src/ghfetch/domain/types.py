"""Domain types for asset resolution and installation.

Pure data types without any IO or infrastructure dependencies.
"""

import platform
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from ghfetch.exceptions import ValidationError

_GITHUB_URL_PATTERN = re.compile(
    r"^(?:https?://)?(?:www\.)?github\.com/"
    r"(?P<owner>[^/\s]+)/(?P<repo>[^/\s]+?)(?:\.git)?/?$"
)
_REPOSITORY_PATTERN = re.compile(r"^(?P<owner>[^/\s]+)/(?P<repo>[^/\s]+)$")


@dataclass(frozen=True)
class Repository:
    """GitHub repository reference."""

    owner: str
    repo: str

    @classmethod
    def parse(cls, value: str) -> "Repository":
        """Parse ``owner/repo`` or a github.com URL.

        Raises:
            ValidationError: If the value is neither form

        """
        text = value.strip()
        match = _GITHUB_URL_PATTERN.match(text) or _REPOSITORY_PATTERN.match(
            text
        )
        if match is None:
            msg = "expected <owner>/<repo> or a GitHub repository URL"
            raise ValidationError(msg, target=value)
        return cls(owner=match["owner"], repo=match["repo"])

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class Tag:
    """Version identifier of a release, e.g. "v1.2.0"."""

    value: str

    @property
    def version(self) -> str:
        """Tag value without its leading 'v'."""
        return self.value.removeprefix("v")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Asset:
    """Downloadable file attached to a release. Identity is ``name``."""

    name: str
    download_url: str
    size: int = 0

    @classmethod
    def from_api_response(cls, asset_data: dict[str, Any]) -> "Asset | None":
        """Create Asset from GitHub API response data.

        Returns:
            Asset instance or None if required fields are missing

        """
        name = asset_data.get("name") or ""
        download_url = asset_data.get("browser_download_url") or ""
        if not name or not download_url:
            return None
        try:
            size = int(asset_data.get("size") or 0)
        except (TypeError, ValueError):
            size = 0
        return cls(name=name, download_url=download_url, size=size)


@dataclass(frozen=True)
class Release:
    """Tagged release with its assets in API order."""

    tag: Tag
    assets: list[Asset] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, api_data: dict[str, Any]) -> "Release":
        """Create Release from GitHub API response data."""
        assets = []
        for asset_data in api_data.get("assets") or []:
            asset = Asset.from_api_response(asset_data)
            if asset:
                assets.append(asset)
        return cls(tag=Tag(api_data.get("tag_name") or ""), assets=assets)


@dataclass(frozen=True)
class SystemDescriptor:
    """Host operating system and architecture."""

    os: str
    arch: str

    @classmethod
    def current(cls) -> "SystemDescriptor":
        """Describe the running host."""
        return cls(
            os=platform.system().lower(),
            arch=platform.machine().lower(),
        )

    def __str__(self) -> str:
        return f"{self.os} {self.arch}"


class FormatTag(Enum):
    """Archive/package kind of a downloaded file."""

    GZIP = "gzip"
    XZ = "xz"
    BZIP2 = "bzip2"
    TAR = "tar"
    TAR_GZIP = "tar.gz"
    TAR_XZ = "tar.xz"
    TAR_BZIP2 = "tar.bz2"
    ZIP = "zip"
    DEBIAN_PACKAGE = "deb"
    RAW_EXECUTABLE = "executable"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class ClassifiedFile:
    """Downloaded file together with its detected format."""

    path: Path
    format: FormatTag


@dataclass(frozen=True)
class Executable:
    """Desired final executable file name."""

    name: str

    def __post_init__(self) -> None:
        if not self.name or Path(self.name).name != self.name:
            msg = "executable name must be a plain file name"
            raise ValidationError(msg, target=self.name)


@dataclass(frozen=True)
class InstallConfig:
    """Install options chosen by the user.

    Attributes:
        desired_executable_name: Name for the installed file. None means
            the repository short name.

    """

    desired_executable_name: str | None = None

    def executable_for(self, repository: Repository) -> Executable:
        """Resolve the executable name, defaulting to the repository name."""
        return Executable(self.desired_executable_name or repository.repo)
