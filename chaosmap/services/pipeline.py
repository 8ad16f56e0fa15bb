"""Assemble everything the view needs for one filter state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..db.repo import ListingRepository
from ..models.filters import FilterState
from ..models.listing import PropertyRecord
from ..utils.caching import clear_prefix, memoize
from ..utils.logging import get_logger
from .filtering import filter_listings
from .metrics import AveragePrices, average_prices
from .sizing import marker_sizes

LOGGER = get_logger("services.pipeline")

FILTER_CACHE = "pipeline.filtered"
SIZES_CACHE = "pipeline.sizes"


@dataclass(frozen=True)
class ViewSnapshot:
    listings: Tuple[PropertyRecord, ...]
    averages: AveragePrices
    sizes: Tuple[float, ...]

    @property
    def is_empty(self) -> bool:
        return not self.listings


class ChaosMapService:
    def __init__(self, repository: ListingRepository) -> None:
        self.repository = repository

    def snapshot(self, state: FilterState) -> ViewSnapshot:
        listings, averages = self._filtered(state.filter_basis())
        sizes = self._sizes(state)
        return ViewSnapshot(listings=listings, averages=averages, sizes=sizes)

    @memoize(FILTER_CACHE)
    def _filtered(self, basis: FilterState) -> Tuple[Tuple[PropertyRecord, ...], AveragePrices]:
        listings = tuple(filter_listings(self.repository.list_listings(), basis))
        LOGGER.debug("filtered_listings visible=%d total=%d", len(listings), len(self.repository))
        return listings, average_prices(listings)

    @memoize(SIZES_CACHE)
    def _sizes(self, state: FilterState) -> Tuple[float, ...]:
        listings, _ = self._filtered(state.filter_basis())
        return tuple(marker_sizes(listings, state.use_relative_size, state.relative_size_metric))

    def invalidate(self) -> None:
        clear_prefix(FILTER_CACHE)
        clear_prefix(SIZES_CACHE)


__all__ = ["ChaosMapService", "ViewSnapshot", "FILTER_CACHE", "SIZES_CACHE"]
