"""Read-only repository over the static listing data set."""

from __future__ import annotations

import os
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from ..models.listing import PropertyRecord
from ..utils.io import load_csv
from ..utils.logging import get_logger
from .mappers import map_listing_row

LOGGER = get_logger("db.repo")

LISTINGS_CSV = os.getenv("LISTINGS_CSV", "listings.csv")


class ListingRepository:
    """Holds the listing data set as an immutable, ordered tuple."""

    def __init__(self, records: Optional[Iterable[PropertyRecord]] = None, source: str = LISTINGS_CSV) -> None:
        if records is None:
            records = self._load(source)
        self._records: Tuple[PropertyRecord, ...] = tuple(records)
        self._by_no: Dict[int, PropertyRecord] = {}
        for record in self._records:
            if record.no in self._by_no:
                LOGGER.warning("duplicate_listing no=%s kept=first", record.no)
                continue
            self._by_no[record.no] = record
        LOGGER.info("listings_loaded count=%d", len(self._records))

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, object]]) -> "ListingRepository":
        return cls(records=_map_rows(rows))

    def list_listings(self) -> Tuple[PropertyRecord, ...]:
        return self._records

    def get_listing(self, number: int) -> Optional[PropertyRecord]:
        return self._by_no.get(number)

    def __len__(self) -> int:
        return len(self._records)

    @staticmethod
    def _load(source: str) -> List[PropertyRecord]:
        df = load_csv(source)
        df = df.where(pd.notnull(df), None)
        return _map_rows(df.to_dict("records"))


def _map_rows(rows: Iterable[Mapping[str, object]]) -> List[PropertyRecord]:
    records: List[PropertyRecord] = []
    skipped = 0
    for row in rows:
        record = map_listing_row(row)
        if record is None:
            skipped += 1
            continue
        records.append(record)
    if skipped:
        LOGGER.warning("listing_rows_skipped count=%d reason=missing_no", skipped)
    return records


_repo_singleton: ListingRepository | None = None


def get_repository() -> ListingRepository:
    global _repo_singleton
    if _repo_singleton is None:
        _repo_singleton = ListingRepository()
    return _repo_singleton


def reset_repository() -> None:
    global _repo_singleton
    _repo_singleton = None
