"""List release assets in untagged form, for use with ``--select``."""

from ghfetch.core.github import GitHubClient
from ghfetch.domain.asset import untag_asset_name
from ghfetch.domain.types import Repository, Tag


async def untagged_asset_names(
    github_client: GitHubClient,
    repository: Repository,
    tag: Tag | None = None,
) -> list[str]:
    """Return every asset name of a release with its version as ``{tag}``."""
    release = await github_client.fetch_release(repository, tag)
    return [untag_asset_name(release.tag, asset.name) for asset in release.assets]
