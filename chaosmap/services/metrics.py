"""Average price per status bucket."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from ..models.listing import PropertyRecord, Status


@dataclass(frozen=True)
class AveragePrices:
    on_market: float
    contracted: float
    on_market_count: int
    contracted_count: int


def _mean(values: List[float]) -> float:
    if not values:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def average_prices(listings: Iterable[PropertyRecord]) -> AveragePrices:
    """Mean price of on-market and contracted listings; an empty bucket is 0.0."""

    on_market: List[float] = []
    contracted: List[float] = []
    for record in listings:
        price = record.value_of("price")
        if price is None:
            continue
        if record.status is Status.ON_MARKET:
            on_market.append(price)
        elif record.status is Status.CONTRACTED:
            contracted.append(price)
    return AveragePrices(
        on_market=_mean(on_market),
        contracted=_mean(contracted),
        on_market_count=len(on_market),
        contracted_count=len(contracted),
    )


def format_price(value: float) -> str:
    """Round to whole 10k-JPY units with thousands separators."""

    return f"{int(round(value)):,}"


__all__ = ["AveragePrices", "average_prices", "format_price"]
