# SPDX-License-Identifier: MIT
"""Semantic version value type.

Supports MAJOR.MINOR.PATCH with an optional single pre-release identifier:
- 1.2.3
- 1.2.3-alpha, 1.2.3-beta.2, 1.2.3-RC.1, 1.2.3-nightly-20240101

Build metadata is not supported.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .exceptions import (
    PreReleaseFormatError,
    TypeMismatchError,
    VersionFormatError,
)
from .ordering import VersionTime, compare_prerelease

logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF

VERSION_PATTERN = re.compile(
    r"^(?P<major>\d+)"
    r"\.(?P<minor>\d+)"
    r"\.(?P<patch>\d+)"
    r"(?P<prerelease>-[.A-Za-z0-9-]*)?$",
    re.ASCII,
)

# A well formed X.Y.Z followed by something other than another component
_VERSION_PREFIX_PATTERN = re.compile(r"\d+\.\d+\.\d+[^.\d]", re.ASCII)

PRERELEASE_PATTERN = re.compile(r"[.A-Za-z0-9-]*", re.ASCII)


def _check_component(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug("Rejected %s component of type %s", name, type(value).__name__)
        raise VersionFormatError(
            value, f"{name} must be an integer, got {type(value).__name__}"
        )
    if not 0 <= value <= UINT32_MAX:
        logger.debug("Rejected out of range %s component %d", name, value)
        raise VersionFormatError(
            value, f"{name} must be between 0 and {UINT32_MAX}, got {value}"
        )


def _parse_component(name: str, digits: str) -> int:
    # More digits than UINT32_MAX can never fit, and int() caps huge digit strings
    if len(digits.lstrip("0")) > len(str(UINT32_MAX)):
        logger.debug("Rejected out of range %s component %s", name, digits)
        raise VersionFormatError(
            digits, f"{name} must be between 0 and {UINT32_MAX}, got {digits}"
        )
    return int(digits.lstrip("0") or "0")


def _normalize_prerelease(prerelease: object) -> Optional[str]:
    """Strip and validate a pre-release identifier given to the constructor."""
    if prerelease is None:
        return None
    if not isinstance(prerelease, str):
        raise PreReleaseFormatError(
            prerelease,
            f"Pre-release must be a string, got {type(prerelease).__name__}",
        )
    if not prerelease.strip():
        return None

    identifier = prerelease[1:] if prerelease.startswith("-") else prerelease
    if not identifier:
        return None
    if (
        not PRERELEASE_PATTERN.fullmatch(identifier)
        or identifier.startswith(".")
        # Trailing hyphen is refused too so str() output always parses back
        or identifier.endswith((".", "-"))
    ):
        logger.debug("Rejected pre-release identifier %r", prerelease)
        raise PreReleaseFormatError(prerelease)
    return identifier


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifier (e.g., "alpha", "beta.2", "RC.1").
            A single leading hyphen is accepted and stripped.

    Raises:
        VersionFormatError: If a component is not an unsigned 32-bit integer
        PreReleaseFormatError: If the pre-release identifier is malformed
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None

    def __post_init__(self) -> None:
        _check_component("major", self.major)
        _check_component("minor", self.minor)
        _check_component("patch", self.patch)
        object.__setattr__(self, "prerelease", _normalize_prerelease(self.prerelease))

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without the pre-release identifier."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def _keep(self, keep_prerelease: bool) -> Optional[str]:
        # Re-add the separator so the constructor strips it and nothing else
        if keep_prerelease and self.prerelease:
            return f"-{self.prerelease}"
        return None

    def increment_major(self, keep_prerelease: bool = False) -> "Version":
        """Return the next major version, e.g. 1.2.3 -> 2.0.0."""
        return Version(self.major + 1, 0, 0, self._keep(keep_prerelease))

    def increment_minor(self, keep_prerelease: bool = False) -> "Version":
        """Return the next minor version, e.g. 1.2.3 -> 1.3.0."""
        return Version(self.major, self.minor + 1, 0, self._keep(keep_prerelease))

    def increment_patch(self, keep_prerelease: bool = False) -> "Version":
        """Return the next patch version, e.g. 1.2.3 -> 1.2.4."""
        return Version(
            self.major, self.minor, self.patch + 1, self._keep(keep_prerelease)
        )

    def clone(self) -> "Version":
        """Return a new Version equal to this one."""
        return Version(self.major, self.minor, self.patch, self._keep(True))

    def __copy__(self) -> "Version":
        return self.clone()

    def __deepcopy__(self, memo) -> "Version":
        return self.clone()

    def compare(self, other: "Version") -> VersionTime:
        """Compare this version with another one.

        Returns:
            VersionTime.EARLIER, VersionTime.SAME or VersionTime.LATER

        Raises:
            TypeMismatchError: If other is not a Version
        """
        if not isinstance(other, Version):
            raise TypeMismatchError(other)

        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return VersionTime.of(val1, val2)

        return compare_prerelease(self.prerelease, other.prerelease)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == VersionTime.SAME

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == VersionTime.EARLIER

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) != VersionTime.LATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == VersionTime.LATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) != VersionTime.EARLIER


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string in the format MAJOR.MINOR.PATCH[-prerelease]

    Returns:
        A Version object with parsed components

    Raises:
        VersionFormatError: If the MAJOR.MINOR.PATCH part is malformed or a
            component does not fit in 32 bits
        PreReleaseFormatError: If the text after PATCH is not a valid
            pre-release identifier

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None)

        >>> parse_version("1.2.3-RC.1")
        Version(major=1, minor=2, patch=3, prerelease='RC.1')
    """
    if not isinstance(version_string, str):
        raise VersionFormatError(
            version_string,
            f"Version must be a string, got {type(version_string).__name__}",
        )

    text = version_string.strip()
    match = VERSION_PATTERN.fullmatch(text)
    if not match:
        logger.debug("Rejected version string %r", version_string)
        # Trailing junk after X.Y.Z is reported before any component range check
        if _VERSION_PREFIX_PATTERN.match(text):
            raise PreReleaseFormatError(version_string)
        raise VersionFormatError(version_string)

    prerelease = match.group("prerelease")
    # Pre-release identifiers must be non-empty, so "X.Y.Z-" is malformed
    if prerelease == "-":
        logger.debug("Rejected empty pre-release in %r", version_string)
        raise PreReleaseFormatError(version_string)

    return Version(
        major=_parse_component("major", match.group("major")),
        minor=_parse_component("minor", match.group("minor")),
        patch=_parse_component("patch", match.group("patch")),
        prerelease=prerelease,
    )


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid_version("1.0.0-beta")
        True
        >>> is_valid_version("1.0")
        False
    """
    try:
        parse_version(version_string)
    except (VersionFormatError, PreReleaseFormatError):
        return False
    return True
