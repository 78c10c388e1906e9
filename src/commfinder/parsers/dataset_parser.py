"""
Dataset parser for comm-finder

Turns decoded dataset JSON into the typed Dataset structure, checking shapes
on the way so malformed files fail at load time rather than during a lookup.
"""

from typing import Any, Dict, List

from ..core.exceptions import InvalidQueryError
from ..core.models import AlgorithmGroup, CustomSource, Dataset, GoogleSheetsSource, Source, Usage
from ..core.pieces import CANONICAL_LETTERS
from ..utils.logging import CommFinderLogger
from ..utils.patterns import Pattern


class DatasetFormatError(ValueError):
    """Raised when dataset JSON does not have the expected structure"""
    pass


class DatasetParser:
    """Parse piece type dataset JSON into Dataset dictionaries"""

    def __init__(self, strict_mode: bool = True):
        # Non-strict parsing skips malformed entries with a warning
        self.strict_mode = strict_mode
        self.skipped = 0

    def parse(self, data: Any) -> Dataset:
        """Parse a decoded JSON document

        Accepts either the bare pattern mapping or the published form that
        wraps it as {"cases": {...}}.
        """
        self.skipped = 0
        if isinstance(data, dict) and "cases" in data and isinstance(data["cases"], dict):
            data = data["cases"]
        self._expect_dict(data, "dataset")

        dataset: Dataset = {}
        for key, group in data.items():
            try:
                self._check_key(key)
            except InvalidQueryError as e:
                self._reject(f"pattern key {key!r} is not a valid 3-cycle ({e})")
                continue
            try:
                dataset[key] = self._parse_group(group, key)
            except DatasetFormatError as e:
                self._reject(str(e))

        if self.skipped:
            CommFinderLogger.warning(f"Skipped {self.skipped} malformed dataset entries")
        return dataset

    def _parse_group(self, group: Any, where: str) -> AlgorithmGroup:
        self._expect_dict(group, where)
        parsed: AlgorithmGroup = {}
        for alg, variants in group.items():
            alg_where = f"{where} / {alg}"
            # Published files nest variants under a "variants" key
            if isinstance(variants, dict) and set(variants) == {"variants"}:
                variants = variants["variants"]
            self._expect_dict(variants, alg_where)
            parsed[alg] = {
                variant: self._parse_usage(usage, f"{alg_where} / {variant}")
                for variant, usage in variants.items()
            }
        return parsed

    def _parse_usage(self, usage: Any, where: str) -> Usage:
        self._expect_dict(usage, where)
        users = usage.get("users")
        self._expect_dict(users, f"{where} users")
        notes = usage.get("notes")
        if notes is not None and not isinstance(notes, str):
            raise DatasetFormatError(f"{where}: notes must be a string")

        parsed_users: Dict[str, List[Source]] = {}
        for user, sources in users.items():
            if not isinstance(sources, list):
                raise DatasetFormatError(f"{where}: sources of {user!r} must be a list")
            parsed_users[user] = [self._parse_source(source, f"{where} / {user}") for source in sources]
        return Usage(users=parsed_users, notes=notes or None)

    @staticmethod
    def _parse_source(source: Any, where: str) -> Source:
        if not isinstance(source, dict) or len(source) != 1:
            raise DatasetFormatError(f"{where}: a source must have exactly one kind")

        if "google_sheets" in source:
            sheet = source["google_sheets"]
            try:
                return GoogleSheetsSource(
                    workbook_id=str(sheet["workbook_id"]),
                    sheet_name=str(sheet["sheet_name"]),
                    x=int(sheet["x"]),
                    y=int(sheet["y"]),
                )
            except (KeyError, TypeError, ValueError) as e:
                raise DatasetFormatError(f"{where}: bad google_sheets source ({e})") from e

        if "custom" in source:
            custom = source["custom"]
            try:
                return CustomSource(url=str(custom["url"]), name=str(custom["name"]))
            except (KeyError, TypeError) as e:
                raise DatasetFormatError(f"{where}: bad custom source ({e})") from e

        raise DatasetFormatError(f"{where}: unknown source kind {next(iter(source))!r}")

    @staticmethod
    def _check_key(key: Any) -> None:
        if not isinstance(key, str):
            raise InvalidQueryError()
        pattern = Pattern.from_string(key)
        outside = [letter for letter in pattern.letters if letter not in CANONICAL_LETTERS]
        if outside:
            raise InvalidQueryError(f"{''.join(outside)} is not a position letter")

    @staticmethod
    def _expect_dict(value: Any, where: str) -> None:
        if not isinstance(value, dict):
            raise DatasetFormatError(f"{where}: expected an object, got {type(value).__name__}")

    def _reject(self, message: str) -> None:
        if self.strict_mode:
            raise DatasetFormatError(message)
        self.skipped += 1
        CommFinderLogger.debug(f"Skipping dataset entry: {message}")
