"""
comm-finder Public API

High-level functions for looking up commutators from other projects.
"""

import asyncio
from typing import Optional, Union

import httpx

from .config import get_settings_manager
from .core.lettering import LetteringScheme
from .core.lookup import CommutatorLookup
from .core.models import LookupResult
from .core.pieces import PieceType
from .core.repository import DatasetCache, DatasetRepository


def _resolve_lettering(lettering: Union[LetteringScheme, str, None]) -> Optional[LetteringScheme]:
    if isinstance(lettering, LetteringScheme) or lettering is None:
        return lettering
    return LetteringScheme.from_value(lettering)


async def find_commutators(
    piece_type: Union[PieceType, str],
    query: str,
    lettering: Union[LetteringScheme, str, None] = None,
    dataset_url: Optional[str] = None,
    cache: Optional[DatasetCache] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> LookupResult:
    """
    Look up the commutators for a three-letter search.

    Args:
        piece_type: PieceType or name such as "Corner3Cycle" or "corners"
        query: three letters in the given lettering
        lettering: LetteringScheme, 24-letter string, or None for canonical
        dataset_url: base URL or directory of datasets (settings if None)
        cache: dataset cache (session cache if None)
        client: httpx.AsyncClient to reuse for fetching

    Returns:
        LookupResult

    Example:
        import asyncio
        import commfinder

        result = asyncio.run(commfinder.find_commutators("corners", "CAB"))
        for alg in result.algorithms:
            print(alg.user_count, alg.alg)
    """
    scheme = _resolve_lettering(lettering)
    if dataset_url is None:
        settings = get_settings_manager()
        repository = DatasetRepository(
            settings.dataset_url, cache=cache, client=client, timeout=settings.timeout
        )
    else:
        repository = DatasetRepository(dataset_url, cache=cache, client=client)

    return await CommutatorLookup(repository).query(piece_type, query, scheme)


def find_commutators_sync(
    piece_type: Union[PieceType, str],
    query: str,
    lettering: Union[LetteringScheme, str, None] = None,
    dataset_url: Optional[str] = None,
    cache: Optional[DatasetCache] = None,
) -> LookupResult:
    """Blocking variant of find_commutators() for scripts"""
    return asyncio.run(
        find_commutators(piece_type, query, lettering=lettering, dataset_url=dataset_url, cache=cache)
    )
