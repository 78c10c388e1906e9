"""
Dataset loading and caching

Datasets are static JSON files, one per piece type, named after the piece
type (e.g. Corner3Cycle.json). They are fetched over HTTP with httpx or read
from a local directory, and kept in memory for the rest of the session.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import httpx

from ..parsers.dataset_parser import DatasetFormatError, DatasetParser
from ..utils.logging import CommFinderLogger
from ..utils.patterns import Pattern
from .exceptions import DatasetUnavailableError
from .models import AlgorithmGroup, Dataset
from .pieces import PieceType

DEFAULT_TIMEOUT = 30.0


class DatasetCache:
    """In-memory datasets keyed by piece type

    Entries are only ever added. Two concurrent loads of the same piece type
    store identical content, so whichever finishes last simply wins.
    """

    def __init__(self):
        self._datasets: Dict[PieceType, Dataset] = {}

    def get(self, piece_type: PieceType) -> Optional[Dataset]:
        return self._datasets.get(piece_type)

    def put(self, piece_type: PieceType, dataset: Dataset) -> None:
        self._datasets[piece_type] = dataset

    def __contains__(self, piece_type: PieceType) -> bool:
        return piece_type in self._datasets

    def __len__(self) -> int:
        return len(self._datasets)

    def reset(self) -> None:
        self._datasets.clear()


# Session-wide cache shared by repositories that are not given their own
_session_cache = None


def get_session_cache() -> DatasetCache:
    """Get or create the session dataset cache"""
    global _session_cache
    if _session_cache is None:
        _session_cache = DatasetCache()
    return _session_cache


def reset_session_cache() -> None:
    get_session_cache().reset()


class DatasetRepository:
    """Load piece type datasets from a URL or directory, once per session"""

    def __init__(
        self,
        dataset_url: Union[str, Path],
        cache: Optional[DatasetCache] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        strict_mode: bool = True,
    ):
        self.dataset_url = str(dataset_url)
        self.cache = cache if cache is not None else get_session_cache()
        self.client = client
        self.timeout = timeout
        self.strict_mode = strict_mode

    @property
    def is_remote(self) -> bool:
        return self.dataset_url.startswith(("http://", "https://"))

    def location_for(self, piece_type: PieceType) -> str:
        """URL or file path of a piece type's dataset"""
        filename = f"{piece_type.value}.json"
        if self.is_remote:
            return f"{self.dataset_url.rstrip('/')}/{filename}"
        base = self.dataset_url
        if base.startswith("file://"):
            base = base[len("file://"):]
        return str(Path(base).expanduser() / filename)

    async def load(self, piece_type: Union[PieceType, str]) -> Dataset:
        """Return the dataset for a piece type, fetching it on first use

        Raises:
            DatasetUnavailableError: fetching or parsing failed. Failures are
                not cached, so a later call tries again.
        """
        if not isinstance(piece_type, PieceType):
            piece_type = PieceType.parse(piece_type)

        dataset = self.cache.get(piece_type)
        if dataset is not None:
            CommFinderLogger.debug(f"Dataset cache hit for {piece_type.value}")
            return dataset

        location = self.location_for(piece_type)
        CommFinderLogger.info(f"Loading {piece_type.value} dataset from {location}")

        if self.is_remote:
            data = await self._fetch(piece_type, location)
        else:
            data = await self._read(piece_type, location)

        try:
            dataset = DatasetParser(strict_mode=self.strict_mode).parse(data)
        except DatasetFormatError as e:
            CommFinderLogger.warning(f"Malformed {piece_type.value} dataset: {e}")
            raise DatasetUnavailableError(piece_type.value, f"malformed dataset: {e}") from e

        self.cache.put(piece_type, dataset)
        CommFinderLogger.debug(f"Cached {len(dataset)} {piece_type.value} patterns")
        return dataset

    async def _fetch(self, piece_type: PieceType, url: str) -> Any:
        try:
            if self.client is not None:
                response = await self.client.get(url)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            CommFinderLogger.warning(f"Fetching {url} failed: {e}")
            raise DatasetUnavailableError(piece_type.value, str(e)) from e
        except ValueError as e:
            CommFinderLogger.warning(f"{url} is not valid JSON: {e}")
            raise DatasetUnavailableError(piece_type.value, f"invalid JSON: {e}") from e

    async def _read(self, piece_type: PieceType, path: str) -> Any:
        try:
            content = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
            return json.loads(content)
        except OSError as e:
            CommFinderLogger.warning(f"Reading {path} failed: {e}")
            raise DatasetUnavailableError(piece_type.value, str(e)) from e
        except ValueError as e:
            CommFinderLogger.warning(f"{path} is not valid JSON: {e}")
            raise DatasetUnavailableError(piece_type.value, f"invalid JSON: {e}") from e

    @staticmethod
    def lookup(dataset: Dataset, pattern: Pattern) -> Optional[AlgorithmGroup]:
        """Exact key lookup of a canonical pattern"""
        return dataset.get(pattern.key)
