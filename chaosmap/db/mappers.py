"""Map raw listing rows onto PropertyRecord."""

from __future__ import annotations

import unicodedata
from typing import Dict, Mapping, Optional

from ..models.listing import PropertyRecord, PropertyType, Status, TransactionMode
from ..utils.coerce import to_float, to_int, to_optional_str, to_str

# Source exports use Japanese headers; snake_case names are accepted as-is.
COLUMN_ALIASES: Dict[str, str] = {
    "No": "no",
    "物件番号": "property_code",
    "リンク": "link",
    "区分": "status",
    "物件種目": "property_type",
    "土地面積(㎡)": "land_area",
    "建物面積(㎡)": "building_area",
    "価格(万円)": "price",
    "㎡単価(万円)": "price_per_sqm",
    "坪単価(万円)": "price_per_tsubo",
    "交通(徒歩)": "walk_minutes",
    "築年": "built_year",
    "築年数": "building_age",
    "所在地": "address",
    "取引態様": "transaction_mode",
}

STATUS_ALIASES: Dict[str, Status] = {
    "売出中": Status.ON_MARKET,
    "成約": Status.CONTRACTED,
    Status.ON_MARKET.value: Status.ON_MARKET,
    Status.CONTRACTED.value: Status.CONTRACTED,
}

PROPERTY_TYPE_ALIASES: Dict[str, PropertyType] = {
    "売地": PropertyType.LAND,
    "中古戸建": PropertyType.USED_HOUSE,
    "新築戸建": PropertyType.NEW_HOUSE,
    PropertyType.LAND.value: PropertyType.LAND,
    PropertyType.USED_HOUSE.value: PropertyType.USED_HOUSE,
    PropertyType.NEW_HOUSE.value: PropertyType.NEW_HOUSE,
}

TRANSACTION_MODE_ALIASES: Dict[str, str] = {
    "専任": TransactionMode.EXCLUSIVE.value,
    "専属": TransactionMode.EXCLUSIVE_SPECIAL.value,
    "売主": TransactionMode.OWNER_DIRECT.value,
}


def normalise_columns(row: Mapping[str, object]) -> Dict[str, object]:
    normalised: Dict[str, object] = {}
    for key, value in row.items():
        name = unicodedata.normalize("NFKC", str(key)).strip()
        target = COLUMN_ALIASES.get(name) or COLUMN_ALIASES.get(str(key).strip()) or name
        normalised[target] = value
    return normalised


def normalise_address(value) -> str:
    return unicodedata.normalize("NFKC", to_str(value))


def map_status(value) -> Optional[Status]:
    return STATUS_ALIASES.get(to_str(value))


def map_property_type(value) -> Optional[PropertyType]:
    return PROPERTY_TYPE_ALIASES.get(to_str(value))


def map_transaction_mode(value) -> Optional[str]:
    text = to_optional_str(value)
    if text is None:
        return None
    return TRANSACTION_MODE_ALIASES.get(text, text)


def _non_negative(value: Optional[float]) -> Optional[float]:
    if value is None or value < 0:
        return None
    return value


def map_listing_row(row: Mapping[str, object]) -> Optional[PropertyRecord]:
    """Convert one raw row; rows without an identity number are skipped."""

    data = normalise_columns(row)
    number = to_int(data.get("no"))
    if number is None:
        return None

    property_type = map_property_type(data.get("property_type"))
    building_age = to_int(data.get("building_age"))
    built_year = to_int(data.get("built_year"))
    if property_type is PropertyType.LAND:
        building_age = None
        built_year = None
    walk_minutes = to_int(data.get("walk_minutes"))

    return PropertyRecord(
        no=number,
        property_code=to_str(data.get("property_code")),
        link=to_optional_str(data.get("link")),
        status=map_status(data.get("status")),
        property_type=property_type,
        land_area=_non_negative(to_float(data.get("land_area"))),
        building_area=_non_negative(to_float(data.get("building_area"))),
        price=_non_negative(to_float(data.get("price"))),
        price_per_sqm=to_float(data.get("price_per_sqm")),
        price_per_tsubo=to_float(data.get("price_per_tsubo")),
        walk_minutes=walk_minutes if walk_minutes is None or walk_minutes >= 0 else None,
        built_year=built_year,
        building_age=building_age if building_age is None or building_age >= 0 else None,
        address=normalise_address(data.get("address")),
        transaction_mode=map_transaction_mode(data.get("transaction_mode")),
    )
