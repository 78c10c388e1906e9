"""
Custom lettering schemes

A lettering scheme is a string of 24 distinct uppercase letters. The letter at
index i is what the user calls the position canonical lettering calls
chr(ord('A') + i).
"""

from typing import Optional

from ..utils.patterns import Pattern
from .exceptions import InvalidLetterError
from .pieces import CANONICAL_LETTERS

SCHEME_LENGTH = len(CANONICAL_LETTERS)


class LetteringScheme:
    """Bijection between canonical position letters and user letters"""

    def __init__(self, letters: str):
        self.letters = self._validate(letters)

    @staticmethod
    def _validate(letters: str) -> str:
        if not isinstance(letters, str):
            raise InvalidLetterError(f"Lettering scheme must be a string, got {type(letters).__name__}")
        if len(letters) != SCHEME_LENGTH:
            raise InvalidLetterError(
                f"Lettering scheme must have {SCHEME_LENGTH} letters, got {len(letters)}"
            )
        bad = sorted({c for c in letters if not ("A" <= c <= "Z")})
        if bad:
            raise InvalidLetterError(
                f"Lettering scheme may only contain uppercase letters A-Z, found {''.join(bad)!r}"
            )
        repeated = sorted({c for c in letters if letters.count(c) > 1})
        if repeated:
            raise InvalidLetterError(
                f"Lettering scheme repeats {''.join(repeated)!r}"
            )
        return letters

    @classmethod
    def canonical(cls) -> "LetteringScheme":
        return cls(CANONICAL_LETTERS)

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["LetteringScheme"]:
        """Build a scheme from a typed value; empty means no scheme"""
        if value is None:
            return None
        value = value.strip().upper()
        if not value:
            return None
        return cls(value)

    def to_canonical(self, custom_triple: str) -> Pattern:
        """Translate three user letters to a canonical pattern"""
        canonical = []
        for char in custom_triple:
            index = self.letters.find(char)
            if index < 0:
                raise InvalidLetterError(f"Letter {char!r} is not in the lettering scheme")
            canonical.append(CANONICAL_LETTERS[index])
        return Pattern.from_string("".join(canonical))

    def to_custom(self, pattern: Pattern) -> str:
        """Translate a canonical pattern back to user letters"""
        custom = []
        for letter in pattern.letters:
            index = CANONICAL_LETTERS.find(letter)
            if index < 0:
                raise InvalidLetterError(f"Letter {letter!r} is not a canonical position letter")
            custom.append(self.letters[index])
        return "".join(custom)

    def __eq__(self, other) -> bool:
        return isinstance(other, LetteringScheme) and self.letters == other.letters

    def __hash__(self) -> int:
        return hash(self.letters)

    def __repr__(self) -> str:
        return f"LetteringScheme({self.letters!r})"


def to_canonical(scheme: Optional[LetteringScheme], custom_triple: str) -> Pattern:
    """Translate with a scheme, or with canonical lettering when no scheme is set"""
    return (scheme or LetteringScheme.canonical()).to_canonical(custom_triple)


def to_custom(scheme: Optional[LetteringScheme], pattern: Pattern) -> str:
    return (scheme or LetteringScheme.canonical()).to_custom(pattern)
