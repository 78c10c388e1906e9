"""
comm-finder - Look up known commutators for blindfolded cube solving

Finds every collected three-cycle algorithm for a three-letter search,
read in a custom lettering scheme, ranked by how many people use it.
"""

__version__ = "0.4.0"

from .api import find_commutators, find_commutators_sync
from .core.exceptions import (
    CommFinderError,
    DatasetUnavailableError,
    InvalidLetterError,
    InvalidQueryError,
    UnknownPieceTypeError,
)
from .core.lettering import LetteringScheme
from .core.lookup import CommutatorLookup
from .core.models import (
    CustomSource,
    GoogleSheetsSource,
    LookupResult,
    RankedAlgorithm,
    RankedVariant,
    Usage,
)
from .core.pieces import PieceType
from .core.ranking import VariantRanker
from .core.repository import DatasetCache, DatasetRepository
from .parsers.dataset_parser import DatasetParser
from .utils.patterns import Pattern, PatternCanonicalizer
from .writers.text_writer import TextWriter

# Public API
__all__ = [
    # Version
    "__version__",
    # Core models
    "Pattern",
    "PieceType",
    "LetteringScheme",
    "Usage",
    "GoogleSheetsSource",
    "CustomSource",
    "RankedAlgorithm",
    "RankedVariant",
    "LookupResult",
    # Engine
    "PatternCanonicalizer",
    "DatasetCache",
    "DatasetRepository",
    "DatasetParser",
    "VariantRanker",
    "CommutatorLookup",
    "TextWriter",
    # Errors
    "CommFinderError",
    "InvalidQueryError",
    "InvalidLetterError",
    "UnknownPieceTypeError",
    "DatasetUnavailableError",
    # High-level API functions
    "find_commutators",
    "find_commutators_sync",
]
