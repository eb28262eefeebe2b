# SPDX-License-Identifier: MIT
"""Pre-release identifier precedence following SemVer 2.0.0.

Precedence for two pre-release sequences is determined by comparing each
dot separated identifier from left to right until a difference is found:

1. Identifiers consisting of only digits are compared numerically.
2. Identifiers with letters or hyphens are compared lexically in ASCII order.
3. Numeric identifiers always have lower precedence than non-numeric ones.
4. A larger set of identifiers has higher precedence than a smaller set,
   if all of the preceding identifiers are equal.

A version without pre-release identifiers has higher precedence than one
with them (1.0.0 > 1.0.0-alpha).
"""

from __future__ import annotations

import re
from typing import Sequence, Union

_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")

IdentifierKey = tuple[int, Union[int, str]]


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if the identifier is made of ASCII digits only."""
    return _NUMERIC_IDENTIFIER.fullmatch(identifier) is not None


def _cmp(left, right) -> int:
    if left == right:
        return 0
    return -1 if left < right else 1


def compare_identifiers(left: str, right: str) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right
    """
    left_numeric = is_numeric_identifier(left)
    right_numeric = is_numeric_identifier(right)

    if left_numeric and right_numeric:
        return _cmp(int(left), int(right))
    if left_numeric:
        # Numeric < alphanumeric per SemVer
        return -1
    if right_numeric:
        return 1
    return _cmp(left, right)


def compare_prerelease(left: Sequence[str], right: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right
    """
    # No pre-release > any pre-release
    if not left and not right:
        return 0
    if not left:
        return 1
    if not right:
        return -1

    for left_part, right_part in zip(left, right):
        result = compare_identifiers(left_part, right_part)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _cmp(len(left), len(right))


def identifier_key(identifier: str) -> IdentifierKey:
    """Return a sort key for a single identifier.

    Numeric identifiers become ``(0, int)`` and sort before alphanumeric
    identifiers, which become ``(1, str)``.
    """
    if is_numeric_identifier(identifier):
        return (0, int(identifier))
    return (1, identifier)


def prerelease_key(identifiers: Sequence[str]) -> tuple:
    """Return a sort key for a pre-release sequence.

    The key orders exactly as :func:`compare_prerelease` does and is equal
    for two sequences exactly when that function returns 0, so it is also
    suitable for hashing.
    """
    # Release sorts after every pre-release
    if not identifiers:
        return (1,)
    return (0, tuple(identifier_key(part) for part in identifiers))
