"""Chart marker sizing."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np

from ..models.filters import SizeMetric
from ..models.listing import PropertyRecord

DEFAULT_MARKER_SIZE = 64.0
SIZE_SCALE = 180.0
SIZE_OFFSET = 20.0


def marker_size(value: Optional[float], max_value: Optional[float]) -> float:
    """Linear map of ``value / max_value`` onto [SIZE_OFFSET, SIZE_OFFSET + SIZE_SCALE].

    A missing or non-positive maximum cannot be normalised against and yields
    the constant size.
    """

    if max_value is None or not math.isfinite(max_value) or max_value <= 0:
        return DEFAULT_MARKER_SIZE
    if value is None or not math.isfinite(value):
        value = 0.0
    return (value / max_value) * SIZE_SCALE + SIZE_OFFSET


def marker_sizes(listings: Sequence[PropertyRecord], enabled: bool, metric: SizeMetric) -> List[float]:
    if not enabled or not listings:
        return [DEFAULT_MARKER_SIZE] * len(listings)
    field = SizeMetric(metric).value
    raw = [record.value_of(field) for record in listings]
    values = np.array([np.nan if v is None else v for v in raw], dtype=float)
    if np.all(np.isnan(values)):
        return [DEFAULT_MARKER_SIZE] * len(listings)
    max_value = float(np.nanmax(values))
    return [marker_size(None if np.isnan(v) else float(v), max_value) for v in values]


def marker_diameter(size: float) -> float:
    """Convert an area-like marker size into a Plotly marker diameter in px."""

    return 2 * math.sqrt(max(size, 0.0) / math.pi)


__all__ = [
    "DEFAULT_MARKER_SIZE",
    "SIZE_OFFSET",
    "SIZE_SCALE",
    "marker_diameter",
    "marker_size",
    "marker_sizes",
]
