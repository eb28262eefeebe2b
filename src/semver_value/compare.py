# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-beta < 1.0.0
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Iterable, Union

from .precedence import compare_prerelease
from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions by SemVer precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Note:
        Strings are parsed leniently, so malformed text compares as 0.0.0.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    # Compare major.minor.patch
    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    # Compare pre-release (build metadata is ignored)
    return compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _coerce(version).precedence_key


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Return the versions as Version objects in precedence order.

    The sort is stable, so versions differing only in build metadata keep
    their input order.
    """
    return sorted((_coerce(v) for v in versions), key=version_key, reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> Version:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If no versions are given
    """
    coerced = [_coerce(v) for v in versions]
    if not coerced:
        raise ValueError("max_version() requires at least one version")
    return max(coerced, key=version_key)
