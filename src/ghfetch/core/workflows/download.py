"""Download workflow: resolve, download and optionally install one asset.

Steps run strictly in sequence:

    validate destination -> fetch release -> select asset -> download
    -> classify and install -> remove downloaded artifact
"""

import os
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ghfetch import __version__
from ghfetch.constants import TEMP_FILE_PREFIX
from ghfetch.core.download import DownloadService
from ghfetch.core.github import GitHubClient
from ghfetch.core.install import install, removing_artifact, validate_destination
from ghfetch.domain.asset import find_asset_by_system, select_tagged_asset
from ghfetch.domain.types import (
    Asset,
    InstallConfig,
    Release,
    Repository,
    SystemDescriptor,
    Tag,
)
from ghfetch.exceptions import AssetNotFoundError, InstallError
from ghfetch.logger import get_logger
from ghfetch.ui.prompts import ask_select_asset

logger = get_logger(__name__)


class DownloadMode(Enum):
    """How the asset is chosen."""

    INTERACTIVE = "interactive"
    SELECTION = "selection"
    AUTOMATIC = "automatic"


@dataclass(frozen=True)
class DownloadOptions:
    """Per-run inputs of the download workflow.

    Attributes:
        repository: Repository to download from
        select: Untagged asset name (see ``tag_asset_name``)
        automatic: Pick the asset matching the host system
        tag: Release tag; None means the latest release
        output: Output file or directory; install destination when installing
        install: Install options; None downloads without installing

    """

    repository: Repository
    select: str | None = None
    automatic: bool = False
    tag: Tag | None = None
    output: Path | None = None
    install: InstallConfig | None = None

    @property
    def mode(self) -> DownloadMode:
        if self.select is not None:
            return DownloadMode.SELECTION
        if self.automatic:
            return DownloadMode.AUTOMATIC
        return DownloadMode.INTERACTIVE


@dataclass(frozen=True)
class DownloadResult:
    """Outcome of a successful run.

    Attributes:
        asset: Selected asset
        download_path: Where the asset was saved; None once it was
            installed and removed
        installed_path: Installed executable; None when not installed or
            installed by a system package manager

    """

    asset: Asset
    download_path: Path | None = None
    installed_path: Path | None = None


def temp_file() -> Path:
    """Create an empty temporary file for an asset that will be installed."""
    fd, name = tempfile.mkstemp(prefix=TEMP_FILE_PREFIX)
    os.close(fd)
    return Path(name)


def choose_output_path(
    output: Path | None,
    install: bool,  # noqa: FBT001
    asset_name: str,
    is_dir: Callable[[Path], bool] = Path.is_dir,
) -> Path:
    """Decide where the downloaded asset is written.

    - installing: a fresh temporary file
    - output is a directory: ``output/asset_name``
    - output is a file path: ``output``
    - no output: ``asset_name`` in the current directory
    """
    if install:
        return temp_file()
    if output is None:
        return Path(asset_name)
    if is_dir(output):
        return output / asset_name
    return output


def no_matching_asset_error(
    repository: Repository, release: Release, system: SystemDescriptor
) -> AssetNotFoundError:
    """Build the automatic mode error, with details for a bug report."""
    message = (
        f"nothing matches your system {system.os} {system.arch}\n"
        "If you think this is a bug, please report an issue with these "
        "details:\n"
        f"  ghfetch version: {__version__}\n"
        f"  Repository: {repository}\n"
        f"  Release: {release.tag}\n"
        f"  OS: {system.os}\n"
        f"  ARCH: {system.arch}"
    )
    return AssetNotFoundError(message, system=system)


class DownloadWorkflow:
    """Runs one download (and optional install) per invocation."""

    def __init__(
        self,
        github_client: GitHubClient,
        download_service: DownloadService,
        system: SystemDescriptor | None = None,
        prompt: Callable[[list[Asset]], Asset] = ask_select_asset,
        cwd: Callable[[], Path] = Path.cwd,
    ) -> None:
        """Initialize the workflow.

        Args:
            github_client: Release metadata source
            download_service: Asset downloader
            system: Host description for automatic mode (default: current)
            prompt: Interactive asset picker
            cwd: Current directory provider (install destination default)

        """
        self.github_client = github_client
        self.download_service = download_service
        self.system = system or SystemDescriptor.current()
        self.prompt = prompt
        self.cwd = cwd

    async def run(self, options: DownloadOptions) -> DownloadResult:
        """Run the workflow.

        Raises:
            GhfetchError: Any typed failure, ready for display

        """
        destination = None
        executable = None
        if options.install is not None:
            destination = self.install_destination(options.output)
            executable = options.install.executable_for(options.repository)

        release = await self.github_client.fetch_release(
            options.repository, options.tag
        )
        asset = self.select_asset(options, release)

        if destination is None or executable is None:
            output_path = choose_output_path(options.output, False, asset.name)
            logger.info("Downloading %s", asset.name)
            await self.download_service.download_asset(asset, output_path)
            logger.info("Saved %s", output_path)
            return DownloadResult(asset=asset, download_path=output_path)

        # The temp file exists from here on and must stay in the cleanup scope
        output_path = choose_output_path(options.output, True, asset.name)
        with removing_artifact(output_path):
            logger.info("Downloading %s", asset.name)
            await self.download_service.download_asset(asset, output_path)
            logger.info("Installing %s", asset.name)
            installed_path = install(
                asset.name, output_path, destination, executable
            )

        if installed_path is None:
            logger.info("Installed %s", asset.name)
        else:
            logger.info("Installed %s", installed_path)
        return DownloadResult(asset=asset, installed_path=installed_path)

    def install_destination(self, output: Path | None) -> Path:
        """Resolve the install directory before anything is downloaded.

        Raises:
            DestinationError: If ``output`` is not an existing directory
            InstallError: If the current directory cannot be determined

        """
        if output is not None:
            return validate_destination(output)
        try:
            return self.cwd()
        except OSError as e:
            msg = f"Error retrieving current directory: {e}"
            raise InstallError(msg) from e

    def select_asset(self, options: DownloadOptions, release: Release) -> Asset:
        """Choose the asset according to the download mode.

        Raises:
            AssetNotFoundError: If no asset matches
            SelectionCancelledError: If the user quits the prompt

        """
        mode = options.mode
        if mode is DownloadMode.SELECTION and options.select is not None:
            return select_tagged_asset(release, options.select)
        if mode is DownloadMode.AUTOMATIC:
            asset = find_asset_by_system(self.system, release.assets)
            if asset is None:
                raise no_matching_asset_error(
                    options.repository, release, self.system
                )
            logger.debug("Matched %s for %s", asset.name, self.system)
            return asset
        return self.prompt(release.assets)
