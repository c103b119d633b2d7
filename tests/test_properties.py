# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and ordering.

These tests verify that:
- Canonical text parses back to the same version
- Version ordering is a total order consistent with equality
- Empty ranges contain nothing and malformed ranges are always rejected
"""

from __future__ import annotations

import random

import pytest
from hypothesis import given, settings, strategies as st

from semval import (
    MalformedRangeError,
    Qualifier,
    UINT32_MAX,
    Version,
    VersionRange,
    parse_lax_version,
    parse_osgi_version,
    parse_version,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

identifiers = st.one_of(
    st.from_regex(r"[0-9]{1,4}", fullmatch=True),
    st.from_regex(r"[A-Za-z0-9-]{1,8}", fullmatch=True),
)

qualifiers = st.lists(identifiers, min_size=1, max_size=4).map(lambda ids: Qualifier(".".join(ids)))

components = st.one_of(st.integers(0, 20), st.integers(0, UINT32_MAX))


@st.composite
def versions(draw):
    """Generate a Version with an optional qualifier."""
    return Version(
        draw(components),
        draw(components),
        draw(components),
        draw(st.none() | qualifiers),
    )


# Small components and qualifiers so that generated versions collide often.
small_versions = st.builds(
    Version,
    st.integers(0, 2),
    st.integers(0, 2),
    st.integers(0, 2),
    st.none() | st.sampled_from(["alpha", "alpha.1", "beta", "1", "SNAPSHOT"]).map(Qualifier),
)


# =============================================================================
# Round trips
# =============================================================================


class TestRoundTrip:
    """Canonical text parses back to the same value."""

    @given(versions())
    @settings(max_examples=200)
    def test_strict_round_trip(self, version):
        assert parse_version(str(version)) == version

    @given(versions())
    def test_lax_accepts_canonical(self, version):
        assert parse_lax_version(str(version)) == version

    @given(versions().filter(lambda v: v.qualifier is not None))
    def test_osgi_writes_hyphen_form(self, version):
        text = f"{version.base_version}.{version.qualifier}"
        parsed = parse_osgi_version(text)
        assert parsed == version
        assert str(parsed) == str(version)

    @given(st.integers(UINT32_MAX + 1, 2**64), st.integers(0, 2))
    def test_overflow_rejected(self, value, position):
        parts = ["0", "0", "0"]
        parts[position] = str(value)
        with pytest.raises(ValueError):
            parse_version(".".join(parts))


# =============================================================================
# Ordering
# =============================================================================


class TestTotalOrder:
    """Version ordering is a total order."""

    @given(small_versions)
    def test_reflexive(self, a):
        assert a.compare_to(a) == 0

    @given(small_versions, small_versions)
    def test_antisymmetric(self, a, b):
        assert a.compare_to(b) == -b.compare_to(a)
        assert (a.compare_to(b) == 0) == (a == b)

    @given(small_versions, small_versions, small_versions)
    def test_transitive(self, a, b, c):
        if a <= b and b <= c:
            assert a <= c

    @given(qualifiers, qualifiers)
    def test_qualifier_antisymmetric(self, a, b):
        assert a.compare_to(b) == -b.compare_to(a)
        assert (a.compare_to(b) == 0) == (a == b)

    @given(qualifiers, qualifiers, qualifiers)
    def test_qualifier_transitive(self, a, b, c):
        if a < b and b < c:
            assert a < c
        ordered = sorted([a, b, c])
        assert ordered[0] <= ordered[2]

    @given(st.lists(versions(), min_size=1, max_size=20), st.randoms())
    def test_sort_is_stable_under_shuffle(self, items, rnd: random.Random):
        expected = sorted(items)
        shuffled = list(items)
        rnd.shuffle(shuffled)
        assert sorted(parse_version(str(v)) for v in shuffled) == expected

    @given(versions().filter(lambda v: v.qualifier is not None))
    def test_release_beats_prerelease(self, version):
        assert version.without_qualifier() > version


# =============================================================================
# Ranges
# =============================================================================


class TestRangeProperties:
    """Containment honours the bounds."""

    @given(versions(), versions())
    def test_empty_range_contains_nothing(self, bound, candidate):
        r = VersionRange(bound, False, bound, False)
        assert not r.contains(candidate)

    @given(versions(), versions(), st.booleans(), st.booleans())
    def test_malformed_always_rejected(self, a, b, lower_inclusive, upper_inclusive):
        if a == b:
            return
        lower, upper = max(a, b), min(a, b)
        with pytest.raises(MalformedRangeError):
            VersionRange(lower, lower_inclusive, upper, upper_inclusive)

    @given(versions(), versions(), versions())
    def test_closed_range_matches_ordering(self, a, b, candidate):
        lower, upper = min(a, b), max(a, b)
        r = VersionRange.closed(lower, upper)
        assert r.contains(candidate) == (lower <= candidate <= upper)
