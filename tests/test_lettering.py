"""Tests for lettering schemes and piece types"""

import pytest

from commfinder.core.exceptions import InvalidLetterError, UnknownPieceTypeError
from commfinder.core.lettering import LetteringScheme, to_canonical, to_custom
from commfinder.core.pieces import CANONICAL_LETTERS, PieceType
from commfinder.utils.patterns import Pattern

# Canonical lettering shifted by one, wrapping X to A, with Y and Z unused
SHIFTED = "BCDEFGHIJKLMNOPQRSTUVWXA"
# A scheme using Y and Z in place of A and B
YZ_SCHEME = "YZCDEFGHIJKLMNOPQRSTUVWX"


class TestLetteringValidation:
    """Test LetteringScheme construction"""

    def test_valid_scheme(self):
        """24 distinct uppercase letters are accepted"""
        assert LetteringScheme(SHIFTED).letters == SHIFTED

    def test_repeated_letter(self):
        """A repeated letter makes translation ambiguous"""
        with pytest.raises(InvalidLetterError, match="repeats 'A'"):
            LetteringScheme("A" + CANONICAL_LETTERS[:-1])

    @pytest.mark.parametrize("letters", ["ABC", CANONICAL_LETTERS + "Y", ""])
    def test_wrong_length(self, letters):
        """Schemes must have exactly 24 letters"""
        with pytest.raises(InvalidLetterError, match="24 letters"):
            LetteringScheme(letters)

    def test_lowercase_rejected(self):
        """Construction does not upper-case for the caller"""
        with pytest.raises(InvalidLetterError, match="uppercase"):
            LetteringScheme(CANONICAL_LETTERS.lower())

    def test_from_value_empty(self):
        """Unset or blank values mean canonical lettering"""
        assert LetteringScheme.from_value(None) is None
        assert LetteringScheme.from_value("   ") is None

    def test_from_value_normalizes(self):
        """Typed values are stripped and upper-cased"""
        assert LetteringScheme.from_value(f" {SHIFTED.lower()} ") == LetteringScheme(SHIFTED)


class TestTranslation:
    """Test translation between user and canonical letters"""

    def test_to_canonical(self):
        """Each letter maps to the canonical letter of its index"""
        scheme = LetteringScheme(SHIFTED)
        assert scheme.to_canonical("BCD").key == "ABC"
        assert scheme.to_canonical("ABC").key == "XAB"

    def test_to_custom(self):
        """Canonical patterns map back to user letters"""
        scheme = LetteringScheme(SHIFTED)
        assert scheme.to_custom(Pattern.from_string("XAB")) == "ABC"

    def test_round_trip(self):
        """Every letter survives a round trip"""
        scheme = LetteringScheme(YZ_SCHEME)
        letters = list(YZ_SCHEME)
        for triple in zip(letters, letters[1:] + letters[:1], letters[2:] + letters[:2]):
            custom = "".join(triple)
            assert scheme.to_custom(scheme.to_canonical(custom)) == custom

    def test_letter_outside_scheme(self):
        """Letters the scheme does not use are rejected"""
        scheme = LetteringScheme(YZ_SCHEME)
        with pytest.raises(InvalidLetterError, match="'A'"):
            scheme.to_canonical("ACD")

    def test_no_scheme_uses_canonical_lettering(self):
        """Without a scheme the 24 canonical letters map to themselves"""
        assert to_canonical(None, "CAB").key == "CAB"
        assert to_custom(None, Pattern.from_string("CAB")) == "CAB"

    @pytest.mark.parametrize("triple", ["AYZ", "YAB", "ABZ"])
    def test_no_scheme_rejects_unused_letters(self, triple):
        """Y and Z are not position letters in canonical lettering"""
        with pytest.raises(InvalidLetterError):
            to_canonical(None, triple)


class TestPieceType:
    """Test piece type names and sticker notation"""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Corner3Cycle", PieceType.CORNER),
            ("corners", PieceType.CORNER),
            ("EDGE", PieceType.EDGE),
            ("x-centers", PieceType.XCENTER),
            ("tcenter", PieceType.TCENTER),
            ("Left obliques", PieceType.LEFT_OBLIQUE),
            ("right_oblique", PieceType.RIGHT_OBLIQUE),
            ("midge3cycle", PieceType.MIDGE),
        ],
    )
    def test_parse(self, name, expected):
        """Dataset names, enum names and aliases all resolve"""
        assert PieceType.parse(name) is expected

    def test_parse_unknown(self):
        """Unknown names list the valid choices"""
        with pytest.raises(UnknownPieceTypeError, match="Corner3Cycle"):
            PieceType.parse("skewb")

    def test_corner_stickers(self):
        """Corner-like types use corner sticker names"""
        assert PieceType.CORNER.describe(Pattern.from_string("ABC")) == "UBL UBR UFR"
        assert PieceType.XCENTER.sticker_name("X") == "DBL"

    def test_edge_stickers(self):
        """Edge-like types use edge sticker names"""
        assert PieceType.WING.describe(Pattern.from_string("CAB")) == "UF UB UR"
        assert PieceType.RIGHT_OBLIQUE.sticker_name("U") == "DF"

    def test_sticker_name_rejects_unknown(self):
        """Only A-X name positions"""
        with pytest.raises(InvalidLetterError):
            PieceType.EDGE.sticker_name("Y")
