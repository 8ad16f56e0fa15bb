"""Filtering pipeline: listing data set + filter state -> visible subset."""

from __future__ import annotations

from typing import Iterable, List

from ..models.filters import FilterState
from ..models.listing import PropertyRecord, Status
from ..models.view import REGION_A, REGION_B


def passes_filters(record: PropertyRecord, state: FilterState) -> bool:
    """Return True when ``record`` satisfies every predicate of ``state``.

    Absent optional fields never match: a missing land area falls outside any
    range and a missing transaction mode is excluded whenever a mode
    selection is active.
    """

    if state.view.uses_building_age and record.is_land:
        return False
    address = record.address or ""
    if not state.show_region_a and REGION_A.marker in address:
        return False
    if not state.show_region_b and REGION_B.marker in address:
        return False
    if not state.show_contracted and record.status is Status.CONTRACTED:
        return False
    if not state.show_on_market and record.status is Status.ON_MARKET:
        return False
    if state.transaction_modes and record.transaction_mode not in state.transaction_modes:
        return False
    land_area = record.land_area
    if land_area is None or land_area < state.land_area_min or land_area > state.land_area_max:
        return False
    return True


def filter_listings(listings: Iterable[PropertyRecord], state: FilterState) -> List[PropertyRecord]:
    """Stable filter; output keeps the input order."""

    return [record for record in listings if passes_filters(record, state)]


__all__ = ["filter_listings", "passes_filters"]
