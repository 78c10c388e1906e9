"""
Three-letter pattern utilities

A pattern is an ordered triple of canonical letters naming the three positions
of a 3-cycle. Rotations of a triple describe the same cycle; swapping the last
two letters describes the same positions cycled the other way.
"""

from dataclasses import dataclass
from typing import Tuple

from ..core.exceptions import InvalidQueryError


@dataclass(frozen=True)
class Pattern:
    """Immutable triple of canonical letters"""

    letters: Tuple[str, str, str]

    def __post_init__(self):
        object.__setattr__(self, "letters", tuple(self.letters))
        if len(self.letters) != 3:
            raise InvalidQueryError()
        for letter in self.letters:
            if len(letter) != 1 or not ("A" <= letter <= "Z"):
                raise InvalidQueryError()
        if len(set(self.letters)) != 3:
            raise InvalidQueryError(
                f"pattern {''.join(self.letters)} names the same position twice"
            )

    @classmethod
    def from_string(cls, text: str) -> "Pattern":
        if len(text) != 3:
            raise InvalidQueryError()
        return cls(tuple(text))

    @property
    def key(self) -> str:
        """Dataset key form, e.g. 'ABC'"""
        return "".join(self.letters)

    def rotate(self, steps: int = 1) -> "Pattern":
        """Rotate left by the given number of positions"""
        steps %= 3
        return Pattern(self.letters[steps:] + self.letters[:steps])

    def __str__(self) -> str:
        return self.key


class PatternCanonicalizer:
    """Reduce patterns to the rotation the dataset is keyed by"""

    @staticmethod
    def canonicalize(pattern: Pattern) -> Pattern:
        """Return the rotation whose first letter is the smallest of the three

        Letters are distinct, so exactly one rotation qualifies and it is
        reached in at most two steps.
        """
        smallest = min(pattern.letters)
        return pattern.rotate(pattern.letters.index(smallest))

    @staticmethod
    def invert(pattern: Pattern) -> Pattern:
        """Swap the second and third letters (reverse cycle direction)"""
        first, second, third = pattern.letters
        return Pattern((first, third, second))

    @staticmethod
    def rotations(pattern: Pattern) -> Tuple[Pattern, Pattern, Pattern]:
        return pattern, pattern.rotate(1), pattern.rotate(2)
