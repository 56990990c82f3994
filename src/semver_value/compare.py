# SPDX-License-Identifier: MIT
"""Version comparison helpers.

Ordering: MAJOR, then MINOR, then PATCH, then pre-release.
Pre-release ordering: prealpha < alpha < beta < rc < release, with
identifiers of the same stage ordered as plain strings.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .exceptions import TypeMismatchError
from .ordering import prerelease_key
from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    if isinstance(version, Version):
        return version
    if isinstance(version, str):
        return parse_version(version)
    raise TypeMismatchError(version)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionFormatError: If either version string is malformed
        PreReleaseFormatError: If either pre-release identifier is malformed
        TypeMismatchError: If an operand is neither a string nor a Version

    Examples:
        >>> compare_versions("1.2.3", "2.1.1")
        -1
        >>> compare_versions("1.0.0-Alpha", "1.0.0-RC.1")
        -1
        >>> compare_versions("1.0.0", "1.0.0-Alpha")
        1
    """
    return int(_coerce(version1).compare(_coerce(version2)))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-beta"], key=version_key)
        ['1.0.0-beta', '1.0.0', '2.0.0']
    """
    v = _coerce(version)
    return (v.major, v.minor, v.patch, prerelease_key(v.prerelease))


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions, earliest first unless reverse is set."""
    return sorted((_coerce(v) for v in versions), key=version_key, reverse=reverse)


def latest_version(
    versions: Iterable[VersionLike], include_prereleases: bool = True
) -> Optional[Version]:
    """Return the latest version, or None if no version qualifies.

    Args:
        versions: Version strings or Version objects
        include_prereleases: If False, pre-release versions are skipped
    """
    candidates = [_coerce(v) for v in versions]
    if not include_prereleases:
        candidates = [v for v in candidates if not v.is_prerelease]
    if not candidates:
        return None
    return max(candidates, key=version_key)
