"""Chart view catalog and region markers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

BUILDING_AGE_FIELD = "building_age"

_AXIS_UNITS = {
    "walk_minutes": "min",
    "building_age": "yrs",
    "built_year": "",
    "price": "10k JPY",
    "price_per_sqm": "10k JPY",
    "price_per_tsubo": "10k JPY",
}


class ViewOption(BaseModel):
    """Named pairing of two listing fields used as chart axes."""

    model_config = ConfigDict(frozen=True)

    label: str
    x_field: str
    y_field: str
    x_label: str
    y_label: str

    @property
    def uses_building_age(self) -> bool:
        return self.x_field == BUILDING_AGE_FIELD


VIEW_OPTIONS: List[ViewOption] = [
    ViewOption(label="Land area × Price", x_field="land_area", y_field="price", x_label="Land area", y_label="Price"),
    ViewOption(
        label="Land area × Unit price (m²)",
        x_field="land_area",
        y_field="price_per_sqm",
        x_label="Land area",
        y_label="Unit price per m²",
    ),
    ViewOption(
        label="Walk to station × Price",
        x_field="walk_minutes",
        y_field="price",
        x_label="Walk to station",
        y_label="Price",
    ),
    ViewOption(
        label="Walk to station × Unit price (tsubo)",
        x_field="walk_minutes",
        y_field="price_per_tsubo",
        x_label="Walk to station",
        y_label="Unit price per tsubo",
    ),
    ViewOption(
        label="Building age × Price",
        x_field="building_age",
        y_field="price",
        x_label="Building age",
        y_label="Price",
    ),
    ViewOption(
        label="Building age × Unit price (m²)",
        x_field="building_age",
        y_field="price_per_sqm",
        x_label="Building age",
        y_label="Unit price per m²",
    ),
]

DEFAULT_VIEW = VIEW_OPTIONS[0]


def view_by_label(label: Optional[str]) -> Optional[ViewOption]:
    for option in VIEW_OPTIONS:
        if option.label == label:
            return option
    return None


def axis_unit(field: str) -> str:
    """Unit suffix shown next to an axis title; area fields default to m²."""

    return _AXIS_UNITS.get(field, "m²")


def axis_title(label: str, field: str) -> str:
    unit = axis_unit(field)
    return f"{label} ({unit})" if unit else label


@dataclass(frozen=True)
class Region:
    key: str
    label: str
    marker: str


# Addresses are NFKC-normalised on load, so markers use half-width digits.
REGION_A = Region(key="region_a", label="Azamino 4-chome", marker="あざみ野4丁目")
REGION_B = Region(key="region_b", label="Azamino 3-chome", marker="あざみ野3丁目")

__all__ = [
    "BUILDING_AGE_FIELD",
    "DEFAULT_VIEW",
    "REGION_A",
    "REGION_B",
    "Region",
    "VIEW_OPTIONS",
    "ViewOption",
    "axis_title",
    "axis_unit",
    "view_by_label",
]
