"""
Data models for comm-finder

Dataclasses for dataset entries (sources and usage records) and for the ranked
lookup output handed to presentation layers.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from ..utils.patterns import Pattern
from .pieces import PieceType

GOOGLE_SHEETS_URL = "https://docs.google.com/spreadsheets/d/{workbook_id}/edit"


def column_letters(index: int) -> str:
    """Spreadsheet column name for a zero-based column index (0 -> A, 26 -> AA)"""
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")
    letters = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


@dataclass(frozen=True)
class GoogleSheetsSource:
    """A cell in a contributor's Google Sheets workbook"""
    workbook_id: str
    sheet_name: str
    x: int  # row, zero-based
    y: int  # column, zero-based

    @property
    def url(self) -> str:
        return GOOGLE_SHEETS_URL.format(workbook_id=self.workbook_id)

    @property
    def cell(self) -> str:
        return f"{column_letters(self.y)}{self.x + 1}"

    @property
    def label(self) -> str:
        return f"{self.sheet_name}, {self.cell}"


@dataclass(frozen=True)
class CustomSource:
    """Any other published list of algorithms"""
    url: str
    name: str

    @property
    def label(self) -> str:
        return self.name


Source = Union[GoogleSheetsSource, CustomSource]


@dataclass(frozen=True)
class Usage:
    """Who uses a variant, with where each of them published it"""
    users: Dict[str, List[Source]] = field(default_factory=dict)
    notes: Optional[str] = None

    @property
    def user_count(self) -> int:
        return len(self.users)


# algorithm text -> variant text -> usage
AlgorithmGroup = Dict[str, Dict[str, Usage]]
# canonical pattern key -> algorithm group
Dataset = Dict[str, AlgorithmGroup]


@dataclass
class RankedVariant:
    """One written form of an algorithm"""
    variant: str
    users: Dict[str, List[Source]]
    notes: Optional[str] = None

    @property
    def user_count(self) -> int:
        return len(self.users)


@dataclass
class RankedAlgorithm:
    """An algorithm with its variants, most used first"""
    alg: str
    user_count: int
    variants: List[RankedVariant] = field(default_factory=list)


@dataclass
class LookupResult:
    """Outcome of one query, covering the pattern and its inverse"""
    piece_type: PieceType
    queried: Pattern
    found: bool
    inverse_queried: Pattern
    inverse_found: bool
    query_text: str = ""  # as typed, upper-cased, in the user's lettering
    inverse_text: str = ""
    algorithms: List[RankedAlgorithm] = field(default_factory=list)
    inverse_algorithms: List[RankedAlgorithm] = field(default_factory=list)

    @property
    def not_found(self) -> bool:
        return not self.found and not self.inverse_found
