"""Asset selection logic.

Pure business logic for picking one asset out of a release, either by
matching the host system or by rebuilding a tagged asset name.
"""

import re

from ghfetch.constants import TAG_PLACEHOLDER
from ghfetch.domain.types import Asset, Release, SystemDescriptor, Tag
from ghfetch.exceptions import AssetNotFoundError

_TOKEN_SEPARATOR = re.compile(r"[^a-z0-9]+")

# Canonical key -> aliases seen in release asset names
OS_ALIASES: dict[str, tuple[str, ...]] = {
    "linux": ("linux",),
    "macos": ("macos", "darwin", "osx", "apple", "mac"),
    "windows": ("windows", "win64", "win32", "win"),
    "freebsd": ("freebsd",),
}

ARCH_ALIASES: dict[str, tuple[str, ...]] = {
    "x86_64": ("x86_64", "x86-64", "amd64", "x64"),
    "aarch64": ("aarch64", "arm64"),
    "arm": ("armv7", "armv7l", "armhf", "arm"),
    # No bare "x86": its tokens would also match "x86_64"
    "i686": ("i686", "i386", "386", "x86_32"),
}


def tokenize(name: str) -> list[str]:
    """Split a name into lower-cased alphanumeric tokens."""
    return [token for token in _TOKEN_SEPARATOR.split(name.lower()) if token]


def _contains_alias(tokens: list[str], alias: str) -> bool:
    alias_tokens = tokenize(alias)
    size = len(alias_tokens)
    return any(
        tokens[index : index + size] == alias_tokens
        for index in range(len(tokens) - size + 1)
    )


def _aliases_for(value: str, table: dict[str, tuple[str, ...]]) -> tuple[str, ...]:
    """Return the alias group that ``value`` belongs to.

    Unknown values match only themselves.
    """
    normalized = value.lower()
    for key, aliases in table.items():
        if normalized == key or normalized in aliases:
            return aliases
    return (normalized,)


def find_asset_by_system(
    system: SystemDescriptor, assets: list[Asset]
) -> Asset | None:
    """Pick the first asset naming both the host OS and architecture.

    Asset naming across projects is inconsistent, so both sides are
    compared through alias groups ("darwin" == "macos", "amd64" ==
    "x86_64"). The first match in release order wins.

    Args:
        system: Host description
        assets: Release assets in API order

    Returns:
        Matching asset, or None when nothing fits

    """
    os_aliases = _aliases_for(system.os, OS_ALIASES)
    arch_aliases = _aliases_for(system.arch, ARCH_ALIASES)

    for asset in assets:
        tokens = tokenize(asset.name)
        if any(_contains_alias(tokens, alias) for alias in os_aliases) and any(
            _contains_alias(tokens, alias) for alias in arch_aliases
        ):
            return asset
    return None


def tag_asset_name(tag: Tag, untagged: str) -> str:
    """Insert a release version into an untagged asset name.

    Every ``{tag}`` placeholder is replaced with the tag's version, i.e.
    the tag without its leading "v". For tag ``v1.2.0``,
    ``mytool-{tag}-linux.tar.gz`` becomes ``mytool-1.2.0-linux.tar.gz``.
    Names without a placeholder are returned unchanged.
    """
    return untagged.replace(TAG_PLACEHOLDER, tag.version)


def untag_asset_name(tag: Tag, name: str) -> str:
    """Replace the release version inside an asset name with ``{tag}``.

    Only stand-alone occurrences are replaced, optionally prefixed by
    ``v``. For tag ``v1``, ``tool-1-linux-musl1.2`` becomes
    ``tool-{tag}-linux-musl1.2``.
    """
    if not tag.version:
        return name
    pattern = re.compile(
        r"(?<![0-9A-Za-z.])([vV]?)"
        + re.escape(tag.version)
        + r"(?![0-9A-Za-z]|\.\d)"
    )
    return pattern.sub(lambda match: match.group(1) + TAG_PLACEHOLDER, name)


def select_tagged_asset(release: Release, untagged: str) -> Asset:
    """Find the asset whose name is exactly the tagged form of ``untagged``.

    Raises:
        AssetNotFoundError: If zero or several assets carry that name

    """
    asset_name = tag_asset_name(release.tag, untagged)
    matches = [asset for asset in release.assets if asset.name == asset_name]
    if len(matches) != 1:
        msg = f"release {release.tag} has no asset named {asset_name}"
        raise AssetNotFoundError(msg, target=untagged)
    return matches[0]
