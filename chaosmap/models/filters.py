"""User-adjustable filter and display state."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field

from .view import DEFAULT_VIEW, ViewOption

LAND_AREA_MIN_DEFAULT = 0.0
LAND_AREA_MAX_DEFAULT = 400.0


class SizeMetric(str, Enum):
    PRICE = "price"
    LAND_AREA = "land_area"


SIZE_METRIC_LABELS = {
    SizeMetric.PRICE: "Price",
    SizeMetric.LAND_AREA: "Land area",
}


class FilterState(BaseModel):
    """Complete set of filter/view controls.

    Frozen so a state can key the pipeline memo cache; controls produce a new
    state via ``model_copy(update=...)`` instead of mutating.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    view: ViewOption = DEFAULT_VIEW
    show_region_a: bool = True
    show_region_b: bool = True
    show_contracted: bool = True
    show_on_market: bool = True
    transaction_modes: FrozenSet[str] = frozenset()
    land_area_min: float = Field(default=LAND_AREA_MIN_DEFAULT, ge=0)
    land_area_max: float = Field(default=LAND_AREA_MAX_DEFAULT, ge=0)
    use_relative_size: bool = False
    relative_size_metric: SizeMetric = SizeMetric.PRICE

    def filter_basis(self) -> "FilterState":
        """Copy with presentation-only sizing fields reset.

        Two states with the same basis always yield the same filtered subset,
        so the basis is what the pipeline memoizes on.
        """

        return self.model_copy(
            update={
                "use_relative_size": False,
                "relative_size_metric": SizeMetric.PRICE,
            }
        )


DEFAULT_FILTER_STATE = FilterState()

__all__ = [
    "DEFAULT_FILTER_STATE",
    "FilterState",
    "LAND_AREA_MAX_DEFAULT",
    "LAND_AREA_MIN_DEFAULT",
    "SIZE_METRIC_LABELS",
    "SizeMetric",
]
