"""
Piece types and sticker tables

Each piece type has 24 positions labelled A-X in canonical lettering. Corners
and X-centers are named after corner stickers; every other piece type is named
after edge stickers.
"""

from enum import Enum
from typing import Dict, List

from ..utils.patterns import Pattern
from .exceptions import InvalidLetterError, UnknownPieceTypeError

CANONICAL_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWX"

# fmt: off
CORNER_STICKERS = [
    "ubl", "ubr", "ufr", "ufl", "lub", "luf", "ldf", "ldb",
    "ful", "fur", "fdr", "fdl", "ruf", "rub", "rdb", "rdf",
    "bur", "bul", "bdl", "bdr", "dfl", "dfr", "dbr", "dbl",
]

EDGE_STICKERS = [
    "ub", "ur", "uf", "ul", "lu", "lf", "ld", "lb",
    "fu", "fr", "fd", "fl", "ru", "rb", "rd", "rf",
    "bu", "bl", "bd", "br", "df", "dr", "db", "dl",
]
# fmt: on


class PieceType(Enum):
    """Dataset categories, valued by their dataset file name"""

    CORNER = "Corner3Cycle"
    EDGE = "Edge3Cycle"
    WING = "Wing3Cycle"
    MIDGE = "Midge3Cycle"
    XCENTER = "XCenter3Cycle"
    TCENTER = "TCenter3Cycle"
    LEFT_OBLIQUE = "LeftOblique3Cycle"
    RIGHT_OBLIQUE = "RightOblique3Cycle"

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]

    @property
    def stickers(self) -> List[str]:
        if self in (PieceType.CORNER, PieceType.XCENTER):
            return CORNER_STICKERS
        return EDGE_STICKERS

    def sticker_name(self, letter: str) -> str:
        """Sticker name for a canonical letter, e.g. 'A' -> 'UBL' for corners"""
        index = CANONICAL_LETTERS.find(letter)
        if len(letter) != 1 or index < 0:
            raise InvalidLetterError(f"{letter!r} is not a canonical position letter")
        return self.stickers[index].upper()

    def describe(self, pattern: Pattern) -> str:
        return " ".join(self.sticker_name(letter) for letter in pattern.letters)

    @classmethod
    def parse(cls, name: str) -> "PieceType":
        """Resolve a dataset name, enum name or short alias (case-insensitive)"""
        normalized = name.strip().lower().replace("_", "-").replace(" ", "-")
        for piece_type in cls:
            if normalized in (piece_type.value.lower(), piece_type.name.lower().replace("_", "-")):
                return piece_type
        if normalized.endswith("s") and normalized[:-1] in ALIASES:
            normalized = normalized[:-1]
        if normalized in ALIASES:
            return ALIASES[normalized]
        raise UnknownPieceTypeError(
            f"Unknown piece type {name!r}. Choose one of: "
            + ", ".join(piece_type.value for piece_type in cls)
        )


DISPLAY_NAMES: Dict[PieceType, str] = {
    PieceType.CORNER: "Corners",
    PieceType.EDGE: "Edges",
    PieceType.WING: "Wings",
    PieceType.MIDGE: "Midges",
    PieceType.XCENTER: "X-centers",
    PieceType.TCENTER: "T-centers",
    PieceType.LEFT_OBLIQUE: "Left obliques (e.g. Uf3l buffer)",
    PieceType.RIGHT_OBLIQUE: "Right obliques (e.g. Uf3r buffer)",
}

ALIASES: Dict[str, PieceType] = {
    "corner": PieceType.CORNER,
    "edge": PieceType.EDGE,
    "wing": PieceType.WING,
    "midge": PieceType.MIDGE,
    "xcenter": PieceType.XCENTER,
    "x-center": PieceType.XCENTER,
    "center": PieceType.XCENTER,
    "tcenter": PieceType.TCENTER,
    "t-center": PieceType.TCENTER,
    "oblique": PieceType.LEFT_OBLIQUE,
    "left-oblique": PieceType.LEFT_OBLIQUE,
    "right-oblique": PieceType.RIGHT_OBLIQUE,
}
