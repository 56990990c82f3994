# SPDX-License-Identifier: MIT
"""Ordering primitives shared by Version and the comparison helpers.

Pre-release ordering is a best-guess heuristic: each identifier is ranked by the
first keyword it contains (prealpha < alpha < beta < rc), and identifiers of the
same rank are ordered as plain strings. Any pre-release sorts before the final
release it belongs to.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class VersionTime(IntEnum):
    """Result of comparing one version with another."""

    EARLIER = -1
    SAME = 0
    LATER = 1

    @classmethod
    def of(cls, left, right) -> "VersionTime":
        """Return the VersionTime of ``left`` relative to ``right``."""
        if left == right:
            return cls.SAME
        return cls.EARLIER if left < right else cls.LATER


class PreReleaseType(IntEnum):
    """Release stages recognised inside pre-release identifiers.

    Members are declared in rank order, which is also the order keywords are
    searched in. ``PRE_ALPHA`` must come before ``ALPHA`` since every string
    containing "prealpha" also contains "alpha".
    """

    PRE_ALPHA = 0
    ALPHA = 1
    BETA = 2
    RC = 3

    @property
    def keyword(self) -> str:
        return self.name.replace("_", "").lower()


DEFAULT_PRERELEASE_TYPE = PreReleaseType.PRE_ALPHA


def prerelease_type(prerelease: str) -> PreReleaseType:
    """Return the rank of a pre-release identifier.

    Examples:
        >>> prerelease_type("RC.1")
        <PreReleaseType.RC: 3>
        >>> prerelease_type("nightly")
        <PreReleaseType.PRE_ALPHA: 0>
    """
    lowered = prerelease.lower()
    for stage in PreReleaseType:
        if stage.keyword in lowered:
            return stage
    return DEFAULT_PRERELEASE_TYPE


def prerelease_key(prerelease: Optional[str]) -> tuple:
    """Return a sort key for a pre-release identifier.

    A missing identifier sorts after every present one.
    """
    if not prerelease:
        return (1,)
    return (0, int(prerelease_type(prerelease)), prerelease)


def compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> VersionTime:
    """Compare two pre-release identifiers.

    Returns:
        VersionTime.EARLIER if pre1 sorts before pre2
        VersionTime.SAME if they are equal
        VersionTime.LATER if pre1 sorts after pre2
    """
    # Final release > any pre-release
    if not pre1 and not pre2:
        return VersionTime.SAME
    if not pre1:
        return VersionTime.LATER
    if not pre2:
        return VersionTime.EARLIER
    if pre1 == pre2:
        return VersionTime.SAME

    rank1 = prerelease_type(pre1)
    rank2 = prerelease_type(pre2)
    if rank1 != rank2:
        return VersionTime.of(rank1, rank2)

    # Same stage, fall back to ordinal comparison
    return VersionTime.of(pre1, pre2)
