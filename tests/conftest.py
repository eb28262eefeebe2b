# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for version tests."""

from __future__ import annotations

import pytest

from semver_value import Version


@pytest.fixture
def release() -> Version:
    """A plain release version."""
    return Version(1, 0, 0)


@pytest.fixture
def prerelease() -> Version:
    """A pre-release of the same version carrying build metadata."""
    return Version(1, 0, 0, ["rc", "1"], ["build", "7"])
