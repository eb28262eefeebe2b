# SPDX-License-Identifier: MIT
"""Semantic version value type and parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +001, +20130313144700, +exp.sha.5114f85

Parsing is lenient: :func:`parse_version` always returns a ``Version`` and
falls back to ``0.0.0`` when the numeric part cannot be understood. Use
:func:`strict_parse_version` to get an error instead.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Iterable, Optional

from .precedence import compare_prerelease, is_numeric_identifier, prerelease_key

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)


class InvalidVersionError(Exception):
    """Raised when a version string cannot be parsed strictly."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


def _check_component(value: Any, name: str) -> None:
    # bool is an int subclass but never a meaningful version number
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Version component '{name}' must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Version component '{name}' must be non-negative, got {value}")


def _check_identifiers(identifiers: Iterable[str], name: str) -> tuple[str, ...]:
    if isinstance(identifiers, str):
        raise TypeError(f"{name} identifiers must be a sequence of strings, not a string")
    result = tuple(identifiers)
    for identifier in result:
        if not isinstance(identifier, str):
            raise TypeError(f"{name} identifiers must be strings, got {type(identifier).__name__}")
        if not identifier:
            raise ValueError(f"{name} identifiers must not be empty")
    return result


def _format_identifiers(identifiers: tuple[str, ...]) -> str:
    return "[" + ", ".join(f'"{identifier}"' for identifier in identifiers) + "]"


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Equality, ordering and hashing follow SemVer precedence: build metadata
    is ignored and pre-release identifiers made of digits compare
    numerically, so ``1.0.0-alpha.01 == 1.0.0-alpha.1``.

    Attributes:
        major: Major version number (incompatible API changes)
        minor: Minor version number (backward compatible features)
        patch: Patch version number (backward compatible bug fixes)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1"))
        metadata: Build metadata identifiers (e.g., ("exp", "sha", "5114f85"))
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: tuple[str, ...] = ()
    metadata: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _check_component(self.major, "major")
        _check_component(self.minor, "minor")
        _check_component(self.patch, "patch")
        object.__setattr__(self, "prerelease", _check_identifiers(self.prerelease, "Pre-release"))
        object.__setattr__(self, "metadata", _check_identifiers(self.metadata, "Metadata"))

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Create a Version from text; see :func:`parse_version`."""
        return parse_version(version_string)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        from .serialization import version_core_schema

        return version_core_schema(cls)

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        return self.prerelease

    @property
    def metadata_identifiers(self) -> tuple[str, ...]:
        return self.metadata

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def precedence_key(self) -> tuple:
        """Key ordering and hashing versions by SemVer precedence."""
        return (self.major, self.minor, self.patch, prerelease_key(self.prerelease))

    @property
    def debug_description(self) -> str:
        """Return a descriptive string of all fields, for diagnostics."""
        description = f"Version: major {self.major}, minor {self.minor}, patch {self.patch}"
        if self.prerelease:
            description += f", prereleaseIdentifiers: {_format_identifiers(self.prerelease)}"
        if self.metadata:
            description += f", metadataIdentifiers: {_format_identifiers(self.metadata)}"
        return description

    def render(self) -> str:
        """Return the normalized string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.metadata:
            version += "+" + ".".join(self.metadata)
        return version

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.patch == other.patch
            and compare_prerelease(self.prerelease, other.prerelease) == 0
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        # Each component only decides when all preceding ones are equal
        for mine, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            if mine != theirs:
                return mine < theirs
        return compare_prerelease(self.prerelease, other.prerelease) < 0

    def __hash__(self) -> int:
        return hash(self.precedence_key)


def _split_version_text(version_string: str) -> tuple[str, Optional[str], Optional[str]]:
    """Split text into its numeric core, pre-release and metadata segments.

    The metadata segment always starts at the first ``+`` and runs to the
    end, so a ``-`` after it is part of the metadata. The pre-release
    segment runs from the first ``-`` up to the metadata marker. The core
    is whatever precedes both markers.
    """
    metadata_start = version_string.find("+")
    if metadata_start == -1:
        metadata_start = len(version_string)
        metadata = None
    else:
        metadata = version_string[metadata_start + 1 :]

    prerelease_start = version_string.find("-", 0, metadata_start)
    if prerelease_start == -1:
        return version_string[:metadata_start], None, metadata

    prerelease = version_string[prerelease_start + 1 : metadata_start]
    return version_string[:prerelease_start], prerelease, metadata


def _split_identifiers(segment: Optional[str]) -> tuple[str, ...]:
    if not segment:
        return ()
    return tuple(part for part in segment.split(".") if part)


def _parse_components(version_string: str) -> tuple[list[int], tuple[str, ...], tuple[str, ...]]:
    if not isinstance(version_string, str):
        raise TypeError(f"Version must be a string, got {type(version_string).__name__}")

    core, prerelease, metadata = _split_version_text(version_string)

    segments = [segment for segment in core.split(".") if segment]
    numbers = [int(segment) for segment in segments if is_numeric_identifier(segment)]
    if len(numbers) != len(segments):
        logger.debug(
            "Dropped %d non-numeric segment(s) from version core %r",
            len(segments) - len(numbers),
            core,
        )

    return numbers, _split_identifiers(prerelease), _split_identifiers(metadata)


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object, leniently.

    Segments of the numeric part that are not plain digits are dropped.
    One, two or three remaining numbers fill major, minor and patch with
    missing components set to 0; any other count yields ``0.0.0``. This
    function never raises for string input.

    Args:
        version_string: Text in MAJOR[.MINOR[.PATCH]][-prerelease][+build] form

    Returns:
        A Version object with parsed components

    Raises:
        TypeError: If version_string is not a string

    Examples:
        >>> str(parse_version("10.1"))
        '10.1.0'

        >>> parse_version("1.0.0-alpha.1+001").prerelease
        ('alpha', '1')

        >>> str(parse_version("Hello"))
        '0.0.0'
    """
    numbers, prerelease, metadata = _parse_components(version_string)

    if not 1 <= len(numbers) <= 3:
        logger.debug("Version %r has %d numeric component(s), using 0.0.0", version_string, len(numbers))
        numbers = [0, 0, 0]
    numbers += [0] * (3 - len(numbers))

    return Version(numbers[0], numbers[1], numbers[2], prerelease, metadata)


def strict_parse_version(version_string: str) -> Version:
    """Parse a version string, rejecting text without a usable numeric part.

    Uses the same grammar as :func:`parse_version` but raises instead of
    falling back to ``0.0.0``.

    Raises:
        InvalidVersionError: If the string is empty or its numeric part does
            not contain one to three numbers
        TypeError: If version_string is not a string

    Examples:
        >>> str(strict_parse_version("2.1"))
        '2.1.0'
    """
    numbers, prerelease, metadata = _parse_components(version_string)

    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")
    if not 1 <= len(numbers) <= 3:
        raise InvalidVersionError(version_string)
    numbers += [0] * (3 - len(numbers))

    return Version(numbers[0], numbers[1], numbers[2], prerelease, metadata)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid SemVer 2.0.0 version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.match(version_string) is not None
