# SPDX-License-Identifier: MIT
"""Immutable semantic version values.

This package parses, builds, increments and orders versions of the form
MAJOR.MINOR.PATCH[-prerelease]. Pre-release identifiers are ranked with a
keyword heuristic (prealpha < alpha < beta < rc) and always sort before the
final release.

Example:
    >>> from semver_value import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-RC.1")
    >>> version.prerelease
    'RC.1'
    >>> str(version.increment_minor())
    '1.3.0'
    >>>
    >>> compare_versions("1.0.0-Alpha", "1.0.0")
    -1
"""

import logging

__version__ = "0.1.0"

from .exceptions import (
    INVALID_PRERELEASE_STRING_FORMAT,
    INVALID_VERSION_STRING_FORMAT,
    TYPE_MISMATCH,
    PreReleaseFormatError,
    SemanticVersionError,
    TypeMismatchError,
    VersionFormatError,
)
from .ordering import (
    PreReleaseType,
    VersionTime,
    compare_prerelease,
    prerelease_type,
)
from .semver import (
    UINT32_MAX,
    VERSION_PATTERN,
    Version,
    is_valid_version,
    parse_version,
)
from .compare import (
    compare_versions,
    latest_version,
    sort_versions,
    version_key,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version value
    "Version",
    "parse_version",
    "is_valid_version",
    "VERSION_PATTERN",
    "UINT32_MAX",
    # Ordering
    "VersionTime",
    "PreReleaseType",
    "prerelease_type",
    "compare_prerelease",
    "compare_versions",
    "version_key",
    "sort_versions",
    "latest_version",
    # Errors
    "SemanticVersionError",
    "VersionFormatError",
    "PreReleaseFormatError",
    "TypeMismatchError",
    "INVALID_VERSION_STRING_FORMAT",
    "INVALID_PRERELEASE_STRING_FORMAT",
    "TYPE_MISMATCH",
]
