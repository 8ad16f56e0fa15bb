"""Streamlit components for price summaries and the listing detail panel."""

from __future__ import annotations

from typing import Callable, Optional

import pandas as pd
import streamlit as st

from chaosmap.models.listing import PropertyRecord
from chaosmap.services.metrics import AveragePrices, format_price

NO_DATA_TITLE = "No listings to display."
NO_DATA_HINT = "Adjust the filters to show listings."


def fmt_price(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value:,g} (10k JPY)"


def fmt_area(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value:,g} m²"


def fmt_count(value: Optional[int], unit: str) -> str:
    if value is None:
        return "-"
    return f"{value} {unit}"


def render_average_prices(averages: AveragePrices) -> None:
    st.markdown("#### Average price")
    on_market_col, contracted_col = st.columns(2)
    on_market_col.metric("On market", f"{format_price(averages.on_market)} (10k JPY)")
    contracted_col.metric("Contracted", f"{format_price(averages.contracted)} (10k JPY)")


def render_no_data() -> None:
    st.info(f"{NO_DATA_TITLE} {NO_DATA_HINT}")


def detail_rows(record: PropertyRecord) -> pd.DataFrame:
    age = None if record.is_land else record.building_age
    data = [
        {"Field": "Price", "Value": fmt_price(record.price)},
        {"Field": "Land area", "Value": fmt_area(record.land_area)},
        {"Field": "Building area", "Value": fmt_area(record.building_area)},
        {"Field": "Unit price per m²", "Value": fmt_price(record.price_per_sqm)},
        {"Field": "Unit price per tsubo", "Value": fmt_price(record.price_per_tsubo)},
        {"Field": "Status", "Value": record.status_label},
        {"Field": "Transaction mode", "Value": record.transaction_mode_label},
        {"Field": "Building age", "Value": fmt_count(age, "yrs")},
        {"Field": "Walk to station", "Value": fmt_count(record.walk_minutes, "min")},
    ]
    return pd.DataFrame(data)


def render_detail_panel(record: PropertyRecord, on_close: Callable[[], None]) -> None:
    with st.container(border=True):
        header_col, close_col = st.columns([5, 1])
        with header_col:
            st.markdown(f"### {record.type_label} (No. {record.no})")
            st.caption(record.address or "-")
        with close_col:
            st.button("Close", key="close-detail", on_click=on_close)
        st.dataframe(detail_rows(record), hide_index=True, width="stretch")
        if record.has_link:
            st.link_button("View listing", record.link)
