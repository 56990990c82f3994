# SPDX-License-Identifier: MIT
"""Exception hierarchy for semantic version handling.

- VersionFormatError: the MAJOR.MINOR.PATCH part is malformed or out of range
- PreReleaseFormatError: the pre-release identifier breaks the grammar
- TypeMismatchError: a version was compared against something that is not one

All of them inherit from SemanticVersionError, so callers can catch every
error raised by this package with a single except clause.
"""

from __future__ import annotations

__all__ = [
    "INVALID_VERSION_STRING_FORMAT",
    "INVALID_PRERELEASE_STRING_FORMAT",
    "TYPE_MISMATCH",
    "SemanticVersionError",
    "VersionFormatError",
    "PreReleaseFormatError",
    "TypeMismatchError",
]

INVALID_VERSION_STRING_FORMAT = (
    "Version strings must be in the format X.Y.Z[-prerelease], where X, Y and Z "
    "are non-negative 32-bit integers."
)
INVALID_PRERELEASE_STRING_FORMAT = (
    "Pre-release identifiers may only contain ASCII letters, digits, hyphens and "
    "periods, must not start with a period, and must not end with a period or hyphen."
)
TYPE_MISMATCH = "Versions can only be compared with other Version instances."


class SemanticVersionError(Exception):
    """Base exception for all semantic version errors."""

    default_message = ""

    def __init__(self, value: object = None, message: str = ""):
        self.value = value
        self.message = message or self.default_message
        super().__init__(self.message)


class VersionFormatError(SemanticVersionError, ValueError):
    """Raised when a version string or component is malformed."""

    default_message = INVALID_VERSION_STRING_FORMAT


class PreReleaseFormatError(SemanticVersionError, ValueError):
    """Raised when a pre-release identifier is malformed."""

    default_message = INVALID_PRERELEASE_STRING_FORMAT


class TypeMismatchError(SemanticVersionError, TypeError):
    """Raised when comparing a version against a non-version operand."""

    default_message = TYPE_MISMATCH
