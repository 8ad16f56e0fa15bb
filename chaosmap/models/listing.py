"""Pydantic models representing listing domain objects."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Status(str, Enum):
    ON_MARKET = "on-market"
    CONTRACTED = "contracted"


class PropertyType(str, Enum):
    LAND = "land"
    USED_HOUSE = "used house"
    NEW_HOUSE = "new house"


class TransactionMode(str, Enum):
    EXCLUSIVE = "exclusive"
    EXCLUSIVE_SPECIAL = "exclusive-special"
    OWNER_DIRECT = "owner-direct"


STATUS_LABELS = {
    Status.ON_MARKET: "On market",
    Status.CONTRACTED: "Contracted",
}

PROPERTY_TYPE_LABELS = {
    PropertyType.LAND: "Land",
    PropertyType.USED_HOUSE: "Used house",
    PropertyType.NEW_HOUSE: "New house",
}

TRANSACTION_MODE_LABELS = {
    TransactionMode.EXCLUSIVE.value: "Exclusive",
    TransactionMode.EXCLUSIVE_SPECIAL.value: "Exclusive (special)",
    TransactionMode.OWNER_DIRECT.value: "Owner direct",
}

NUMERIC_FIELDS = (
    "land_area",
    "building_area",
    "price",
    "price_per_sqm",
    "price_per_tsubo",
    "walk_minutes",
    "built_year",
    "building_age",
)


class PropertyRecord(BaseModel):
    """One listing; immutable once loaded."""

    model_config = ConfigDict(frozen=True)

    no: int
    property_code: str = ""
    link: Optional[str] = None
    status: Optional[Status] = None
    property_type: Optional[PropertyType] = None
    land_area: Optional[float] = Field(default=None, ge=0)
    building_area: Optional[float] = Field(default=None, ge=0)
    price: Optional[float] = Field(default=None, ge=0)
    price_per_sqm: Optional[float] = None
    price_per_tsubo: Optional[float] = None
    walk_minutes: Optional[int] = Field(default=None, ge=0)
    built_year: Optional[int] = None
    building_age: Optional[int] = Field(default=None, ge=0)
    address: str = ""
    transaction_mode: Optional[str] = None

    @property
    def has_link(self) -> bool:
        return bool(self.link)

    @property
    def is_land(self) -> bool:
        return self.property_type is PropertyType.LAND

    def value_of(self, field: str) -> Optional[float]:
        """Return a numeric field as float, or None when absent."""

        if field not in NUMERIC_FIELDS:
            raise KeyError(f"Not a numeric listing field: {field}")
        value = getattr(self, field)
        if value is None:
            return None
        value = float(value)
        if math.isnan(value):
            return None
        return value

    @property
    def type_label(self) -> str:
        if self.property_type is None:
            return "Property"
        return PROPERTY_TYPE_LABELS[self.property_type]

    @property
    def status_label(self) -> str:
        if self.status is None:
            return "-"
        return STATUS_LABELS[self.status]

    @property
    def transaction_mode_label(self) -> str:
        if not self.transaction_mode:
            return "-"
        return TRANSACTION_MODE_LABELS.get(self.transaction_mode, self.transaction_mode)


__all__ = [
    "NUMERIC_FIELDS",
    "PROPERTY_TYPE_LABELS",
    "PropertyRecord",
    "PropertyType",
    "STATUS_LABELS",
    "Status",
    "TRANSACTION_MODE_LABELS",
    "TransactionMode",
]
