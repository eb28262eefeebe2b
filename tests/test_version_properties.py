# SPDX-License-Identifier: MIT
"""Property-based tests for Version parsing and ordering.

These tests verify that:
- Rendering and parsing round-trip for well-formed versions
- Equality is an equivalence relation and agrees with hashing
- Ordering is a strict total order consistent with equality
- version_key and compare_versions agree with the operators
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from semver_value import Version, compare_versions, is_valid_semver, parse_version, version_key


# =============================================================================
# Strategies for generating test data
# =============================================================================

components = st.integers(min_value=0, max_value=2**70)

# Small ranges so that generated versions collide often
small_components = st.integers(min_value=0, max_value=3)

numeric_identifiers = st.from_regex(r"0|[1-9][0-9]{0,5}", fullmatch=True)

alphanumeric_identifiers = st.from_regex(r"[0-9]{0,2}[a-zA-Z-][0-9a-zA-Z-]{0,6}", fullmatch=True)

identifiers = st.one_of(numeric_identifiers, alphanumeric_identifiers)

small_identifiers = st.sampled_from(["0", "1", "2", "01", "10", "alpha", "beta", "Beta", "rc"])


@st.composite
def versions(draw):
    """Generate a well-formed Version."""
    return Version(
        draw(components),
        draw(components),
        draw(components),
        draw(st.lists(identifiers, max_size=4)),
        draw(st.lists(alphanumeric_identifiers, max_size=3)),
    )


@st.composite
def clashing_versions(draw):
    """Generate versions from a small space so ties are common."""
    return Version(
        draw(small_components),
        draw(small_components),
        draw(small_components),
        draw(st.lists(small_identifiers, max_size=3)),
        draw(st.lists(st.sampled_from(["a", "b"]), max_size=1)),
    )


class TestRoundTrip:
    """Round-trip properties between text and Version."""

    @settings(max_examples=100)
    @given(version=versions())
    def test_render_then_parse(self, version):
        """Parsing the rendered form gives an equal version with equal metadata."""
        parsed = parse_version(str(version))
        assert parsed == version
        assert parsed.metadata == version.metadata
        assert parsed.prerelease == version.prerelease

    @settings(max_examples=100)
    @given(version=versions())
    def test_rendered_form_is_semver(self, version):
        """Rendered versions with canonical numbers match the SemVer grammar."""
        assert is_valid_semver(str(version))

    @settings(max_examples=100)
    @given(major=components, minor=components, patch=components)
    def test_parse_then_render(self, major, minor, patch):
        """Rendering a parsed triple reproduces the text."""
        text = f"{major}.{minor}.{patch}"
        assert str(parse_version(text)) == text

    @settings(max_examples=100)
    @given(text=st.text(max_size=30))
    def test_parse_never_raises(self, text):
        """Any text parses to a version with non-empty identifiers."""
        version = parse_version(text)
        assert min(version.major, version.minor, version.patch) >= 0
        assert all(version.prerelease) and all(version.metadata)
        assert str(version).startswith(version.base_version)


class TestEquality:
    """Equality is an equivalence relation compatible with hashing."""

    @settings(max_examples=100)
    @given(a=clashing_versions())
    def test_reflexive(self, a):
        assert a == a

    @settings(max_examples=100)
    @given(a=clashing_versions(), b=clashing_versions())
    def test_symmetric_and_hash(self, a, b):
        assert (a == b) == (b == a)
        if a == b:
            assert hash(a) == hash(b)

    @settings(max_examples=100)
    @given(a=clashing_versions(), b=clashing_versions(), c=clashing_versions())
    def test_transitive(self, a, b, c):
        if a == b and b == c:
            assert a == c


class TestOrdering:
    """Ordering is a strict total order consistent with equality."""

    @settings(max_examples=100)
    @given(a=clashing_versions(), b=clashing_versions())
    def test_trichotomy(self, a, b):
        """Exactly one of a < b, a == b, a > b holds."""
        assert [a < b, a == b, a > b].count(True) == 1

    @settings(max_examples=100)
    @given(a=clashing_versions())
    def test_irreflexive(self, a):
        assert not a < a

    @settings(max_examples=100)
    @given(a=clashing_versions(), b=clashing_versions(), c=clashing_versions())
    def test_transitive(self, a, b, c):
        if a < b and b < c:
            assert a < c

    @settings(max_examples=100)
    @given(a=versions(), b=versions())
    def test_compare_versions_agrees(self, a, b):
        """compare_versions and the operators give the same answer."""
        expected = -1 if a < b else (1 if a > b else 0)
        assert compare_versions(a, b) == expected

    @settings(max_examples=100)
    @given(a=clashing_versions(), b=clashing_versions())
    def test_version_key_agrees(self, a, b):
        """version_key orders exactly like the operators."""
        assert (version_key(a) < version_key(b)) == (a < b)
        assert (version_key(a) == version_key(b)) == (a == b)

    @settings(max_examples=100)
    @given(a=clashing_versions())
    def test_metadata_ignored(self, a):
        """Changing metadata never changes precedence."""
        other = Version(a.major, a.minor, a.patch, a.prerelease, ("changed",))
        assert a == other
        assert not a < other
        assert not other < a
