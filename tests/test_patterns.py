"""Tests for pattern canonicalization and inversion"""

import itertools

import pytest

from commfinder.core.exceptions import InvalidQueryError
from commfinder.utils.patterns import Pattern, PatternCanonicalizer

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWX"

# Every ordered triple of distinct positions from a spread of letters
SAMPLE_PATTERNS = [
    Pattern(triple) for triple in itertools.permutations("ADHMQX", 3)
]


class TestPattern:
    """Test Pattern construction"""

    def test_from_string(self):
        """Patterns are built from three-letter strings"""
        assert Pattern.from_string("CAB").letters == ("C", "A", "B")
        assert str(Pattern.from_string("CAB")) == "CAB"

    def test_list_is_frozen_to_tuple(self):
        """Letters given as a list are stored as a hashable tuple"""
        pattern = Pattern(["A", "B", "C"])
        assert pattern.letters == ("A", "B", "C")
        assert hash(pattern) == hash(Pattern.from_string("ABC"))

    @pytest.mark.parametrize("text", ["AB", "ABCD", "", "aBC", "A1C"])
    def test_rejects_malformed(self, text):
        """Anything but three uppercase letters is rejected"""
        with pytest.raises(InvalidQueryError):
            Pattern.from_string(text)

    @pytest.mark.parametrize("text", ["AAB", "ABA", "BBB"])
    def test_rejects_repeated_letters(self, text):
        """A 3-cycle needs three different positions"""
        with pytest.raises(InvalidQueryError, match="same position"):
            Pattern.from_string(text)


class TestCanonicalize:
    """Test PatternCanonicalizer.canonicalize()"""

    @pytest.mark.parametrize("text", ["CAB", "ABC", "BCA"])
    def test_cab_scenario(self, text):
        """All rotations of ABC canonicalize to ABC"""
        assert PatternCanonicalizer.canonicalize(Pattern.from_string(text)).key == "ABC"

    def test_direction_preserved(self):
        """Canonicalizing never turns a cycle into its inverse"""
        assert PatternCanonicalizer.canonicalize(Pattern.from_string("CBA")).key == "ACB"

    def test_is_a_rotation(self):
        """The canonical form is one of the three rotations"""
        for pattern in SAMPLE_PATTERNS:
            canonical = PatternCanonicalizer.canonicalize(pattern)
            assert canonical in PatternCanonicalizer.rotations(pattern)
            assert canonical.letters[0] == min(pattern.letters)

    def test_idempotent(self):
        """Canonicalizing twice changes nothing"""
        for pattern in SAMPLE_PATTERNS:
            once = PatternCanonicalizer.canonicalize(pattern)
            assert PatternCanonicalizer.canonicalize(once) == once

    def test_rotation_invariant(self):
        """Rotations of a pattern share one canonical form"""
        for pattern in SAMPLE_PATTERNS:
            expected = PatternCanonicalizer.canonicalize(pattern)
            assert PatternCanonicalizer.canonicalize(pattern.rotate(1)) == expected
            assert PatternCanonicalizer.canonicalize(pattern.rotate(2)) == expected


class TestInvert:
    """Test PatternCanonicalizer.invert()"""

    def test_swaps_last_two(self):
        """The first letter stays, the other two swap"""
        assert PatternCanonicalizer.invert(Pattern.from_string("XYZ")).key == "XZY"

    def test_involution(self):
        """Inverting twice gives the original pattern"""
        for pattern in SAMPLE_PATTERNS:
            assert PatternCanonicalizer.invert(PatternCanonicalizer.invert(pattern)) == pattern

    def test_inverse_of_canonical_is_canonical(self):
        """The smallest letter stays first after inversion"""
        for pattern in SAMPLE_PATTERNS:
            canonical = PatternCanonicalizer.canonicalize(pattern)
            inverse = PatternCanonicalizer.invert(canonical)
            assert PatternCanonicalizer.canonicalize(inverse) == inverse
