"""
Commutator lookup

Ties the pieces together: validate the typed search, translate it from the
user's lettering, canonicalize it, then look up the pattern and its inverse in
the piece type's dataset.

Dataset keys are the rotation of each directed cycle that starts with its
smallest letter. Inverting keeps the first letter in place, so the inverse of
a canonical pattern is canonical too; it is still passed through
canonicalize() so both lookups follow the same rule.
"""

import re
from typing import Optional, Union

from ..utils.logging import CommFinderLogger
from ..utils.patterns import PatternCanonicalizer
from .exceptions import InvalidQueryError
from .lettering import LetteringScheme, to_canonical
from .models import LookupResult
from .pieces import PieceType
from .ranking import VariantRanker
from .repository import DatasetRepository

QUERY_RE = re.compile(r"^[A-Z]{3}$")


class CommutatorLookup:
    """Find the commutators for a three-letter search"""

    def __init__(self, repository: DatasetRepository):
        self.repository = repository

    @staticmethod
    def normalize_query(raw_query: str) -> str:
        """Upper-case a search and check it is three letters

        Raises:
            InvalidQueryError: the search is not exactly three letters A-Z
        """
        query = (raw_query or "").upper()
        if not QUERY_RE.fullmatch(query):
            raise InvalidQueryError()
        return query

    async def query(
        self,
        piece_type: Union[PieceType, str],
        raw_query: str,
        lettering: Optional[LetteringScheme] = None,
    ) -> LookupResult:
        """Look up a search and its inverse

        Args:
            piece_type: PieceType or a name PieceType.parse() accepts
            raw_query: three letters in the user's lettering, any case
            lettering: the user's scheme, or None for canonical lettering

        Returns:
            LookupResult; not_found is set when neither side is in the dataset
        """
        if not isinstance(piece_type, PieceType):
            piece_type = PieceType.parse(piece_type)

        query = self.normalize_query(raw_query)
        pattern = PatternCanonicalizer.canonicalize(to_canonical(lettering, query))
        inverse = PatternCanonicalizer.canonicalize(PatternCanonicalizer.invert(pattern))

        dataset = await self.repository.load(piece_type)

        group = self.repository.lookup(dataset, pattern)
        inverse_group = self.repository.lookup(dataset, inverse)

        result = LookupResult(
            piece_type=piece_type,
            queried=pattern,
            found=group is not None,
            inverse_queried=inverse,
            inverse_found=inverse_group is not None,
            query_text=query,
            inverse_text=query[0] + query[2] + query[1],
        )
        if group is not None:
            result.algorithms = VariantRanker.rank(group)
        if inverse_group is not None:
            result.inverse_algorithms = VariantRanker.rank(inverse_group)

        CommFinderLogger.debug(
            f"{piece_type.value} {query} -> {pattern} "
            f"(found={result.found}, inverse {inverse} found={result.inverse_found})"
        )
        return result
