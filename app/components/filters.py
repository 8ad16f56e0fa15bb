"""Streamlit controls bound to FilterState."""

from __future__ import annotations

from typing import List

import streamlit as st

from chaosmap.models.filters import (
    LAND_AREA_MAX_DEFAULT,
    SIZE_METRIC_LABELS,
    FilterState,
    SizeMetric,
)
from chaosmap.models.listing import TRANSACTION_MODE_LABELS, TransactionMode
from chaosmap.models.view import DEFAULT_VIEW, REGION_A, REGION_B, ViewOption, view_by_label

KEY_VIEW = "flt_view"
KEY_REGION_A = "flt_region_a"
KEY_REGION_B = "flt_region_b"
KEY_CONTRACTED = "flt_contracted"
KEY_ON_MARKET = "flt_on_market"
KEY_MODES = "flt_transaction_modes"
KEY_LAND_AREA = "flt_land_area"
KEY_RELATIVE = "flt_use_relative_size"
KEY_METRIC = "flt_relative_size_metric"
KEY_SLIDER_MAX = "flt_land_area_slider_max"

TRANSACTION_MODE_OPTIONS: List[str] = [mode.value for mode in TransactionMode]


def seed_widget_state(state: FilterState) -> None:
    """Initialise widget values from ``state`` once per session."""

    lo, hi = sorted((state.land_area_min, state.land_area_max))
    st.session_state.setdefault(KEY_VIEW, state.view.label)
    st.session_state.setdefault(KEY_REGION_A, state.show_region_a)
    st.session_state.setdefault(KEY_REGION_B, state.show_region_b)
    st.session_state.setdefault(KEY_CONTRACTED, state.show_contracted)
    st.session_state.setdefault(KEY_ON_MARKET, state.show_on_market)
    st.session_state.setdefault(
        KEY_MODES, [mode for mode in TRANSACTION_MODE_OPTIONS if mode in state.transaction_modes]
    )
    st.session_state.setdefault(KEY_LAND_AREA, (lo, hi))
    st.session_state.setdefault(KEY_SLIDER_MAX, max(LAND_AREA_MAX_DEFAULT, hi))
    st.session_state.setdefault(KEY_RELATIVE, state.use_relative_size)
    st.session_state.setdefault(KEY_METRIC, state.relative_size_metric.value)


def render_filters(view_options: List[ViewOption]) -> FilterState:
    """Render the controls and return the FilterState they describe."""

    labels = [option.label for option in view_options]
    st.selectbox("View", labels, key=KEY_VIEW)

    region_col, status_col, mode_col = st.columns(3)
    with region_col:
        st.markdown("**Region**")
        st.checkbox(REGION_A.label, key=KEY_REGION_A)
        st.checkbox(REGION_B.label, key=KEY_REGION_B)
    with status_col:
        st.markdown("**Status**")
        st.checkbox("Contracted", key=KEY_CONTRACTED)
        st.checkbox("On market", key=KEY_ON_MARKET)
    with mode_col:
        st.markdown("**Transaction mode**")
        st.multiselect(
            "Transaction mode",
            TRANSACTION_MODE_OPTIONS,
            key=KEY_MODES,
            format_func=lambda mode: TRANSACTION_MODE_LABELS.get(mode, mode),
            placeholder="All modes",
            label_visibility="collapsed",
        )

    area_col, size_col = st.columns([2, 1])
    with area_col:
        st.slider(
            "Land area range (m²)",
            min_value=0.0,
            max_value=float(st.session_state[KEY_SLIDER_MAX]),
            step=1.0,
            key=KEY_LAND_AREA,
        )
    with size_col:
        st.checkbox("Relative marker size", key=KEY_RELATIVE)
        # Always rendered so the widget keeps its value while sizing is off.
        st.selectbox(
            "Size by",
            [metric.value for metric in SizeMetric],
            key=KEY_METRIC,
            format_func=lambda value: SIZE_METRIC_LABELS[SizeMetric(value)],
            disabled=not st.session_state[KEY_RELATIVE],
        )

    return read_widget_state()


def read_widget_state() -> FilterState:
    state = st.session_state
    lo, hi = state[KEY_LAND_AREA]
    return FilterState(
        view=view_by_label(state[KEY_VIEW]) or DEFAULT_VIEW,
        show_region_a=bool(state[KEY_REGION_A]),
        show_region_b=bool(state[KEY_REGION_B]),
        show_contracted=bool(state[KEY_CONTRACTED]),
        show_on_market=bool(state[KEY_ON_MARKET]),
        transaction_modes=frozenset(state[KEY_MODES]),
        land_area_min=float(lo),
        land_area_max=float(hi),
        use_relative_size=bool(state[KEY_RELATIVE]),
        relative_size_metric=SizeMetric(state[KEY_METRIC]),
    )
