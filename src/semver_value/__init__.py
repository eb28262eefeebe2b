# SPDX-License-Identifier: MIT
"""Semantic version value type with SemVer 2.0.0 precedence.

This package provides an immutable ``Version`` type that parses version
text leniently, renders it back in normalized form, orders versions by
SemVer precedence and serializes to JSON through pydantic.

Example:
    >>> from semver_value import Version, compare_versions
    >>>
    >>> version = Version.parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> Version.parse("1.0.0-alpha") < Version.parse("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    strict_parse_version,
    is_valid_semver,
    InvalidVersionError,
    SEMVER_PATTERN,
)
from .precedence import (
    compare_identifiers,
    compare_prerelease,
    is_numeric_identifier,
)
from .compare import (
    compare_versions,
    max_version,
    sort_versions,
    version_key,
)
from .serialization import (
    VERSION_ADAPTER,
    version_from_json,
    version_to_json,
)

__all__ = [
    # Version type and parsing
    "Version",
    "parse_version",
    "strict_parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    "SEMVER_PATTERN",
    # Identifier precedence
    "compare_identifiers",
    "compare_prerelease",
    "is_numeric_identifier",
    # Version comparison
    "compare_versions",
    "max_version",
    "sort_versions",
    "version_key",
    # Serialization
    "VERSION_ADAPTER",
    "version_from_json",
    "version_to_json",
]
