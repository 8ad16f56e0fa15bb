import math
from typing import Optional

_NULL_TOKENS = {"", "null", "none", "nan", "-"}


def _is_null(v) -> bool:
    if v is None:
        return True
    if isinstance(v, float) and math.isnan(v):
        return True
    return str(v).strip().lower() in _NULL_TOKENS


def to_int(v) -> Optional[int]:
    try:
        if _is_null(v):
            return None
        return int(float(str(v).replace(",", "")))
    except (TypeError, ValueError):
        return None


def to_float(v) -> Optional[float]:
    try:
        if _is_null(v):
            return None
        result = float(str(v).replace(",", ""))
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def to_str(v) -> str:
    return "" if _is_null(v) else str(v).strip()


def to_optional_str(v) -> Optional[str]:
    text = to_str(v)
    return text or None
