"""Streamlit UI for the real estate chaos map."""

from __future__ import annotations

from pathlib import Path
from typing import List

import sys

import streamlit as st

try:
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover - optional dependency
    load_dotenv = None

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

if load_dotenv is not None:
    load_dotenv(dotenv_path=ROOT_DIR / ".env", override=False)

from app.components.cards import render_average_prices, render_detail_panel, render_no_data
from app.components.charts import build_scatter_figure, selected_numbers
from app.components.filters import render_filters, seed_widget_state
from app.components.listing import render_property_list, scroll_list_to
from chaosmap.db.repo import get_repository
from chaosmap.models.filters import FilterState
from chaosmap.models.view import VIEW_OPTIONS
from chaosmap.services import interaction as ix
from chaosmap.services.pipeline import ChaosMapService
from chaosmap.services.preferences import PreferencesStore, load_filter_state, save_filter_state
from chaosmap.utils.logging import get_logger

LOGGER = get_logger("app")

st.set_page_config(page_title="Real Estate Chaos Map", layout="wide", page_icon="🏠")

KEY_FILTER_STATE = "filter_state"
KEY_INTERACTION = "interaction"
KEY_CHART_NONCE = "chart_nonce"
KEY_LAST_CHART_SELECTION = "last_chart_selection"


@st.cache_resource(show_spinner=False)
def get_service() -> ChaosMapService:
    return ChaosMapService(get_repository())


@st.cache_resource(show_spinner=False)
def get_preferences_store() -> PreferencesStore:
    return PreferencesStore()


def ensure_filter_state(store: PreferencesStore) -> FilterState:
    if KEY_FILTER_STATE not in st.session_state:
        state = load_filter_state(store)
        LOGGER.info("preferences_loaded view=%s", state.view.label)
        st.session_state[KEY_FILTER_STATE] = state
        seed_widget_state(state)
    return st.session_state[KEY_FILTER_STATE]


def current_interaction() -> ix.InteractionState:
    return st.session_state.setdefault(KEY_INTERACTION, ix.InteractionState())


def set_interaction(state: ix.InteractionState) -> None:
    st.session_state[KEY_INTERACTION] = state


def highlight_from_list(number: int) -> None:
    set_interaction(ix.hover(current_interaction(), number, ix.HoverSource.LIST))


def clear_highlight() -> None:
    set_interaction(ix.leave(current_interaction()))


def select_from_list(number: int) -> None:
    record = get_service().repository.get_listing(number)
    if record is not None:
        set_interaction(ix.select(current_interaction(), record, ix.HoverSource.LIST))


def close_detail() -> None:
    set_interaction(ix.close(current_interaction()))
    # A fresh chart key drops the plotly selection so the same point can be reopened.
    st.session_state[KEY_CHART_NONCE] = st.session_state.get(KEY_CHART_NONCE, 0) + 1
    st.session_state[KEY_LAST_CHART_SELECTION] = ()


def handle_chart_selection(event, trace_numbers: List[List[int]]) -> None:
    points = []
    if event is not None:
        selection = event.get("selection") or {}
        points = selection.get("points") or []
    numbers = tuple(selected_numbers(points, trace_numbers))
    if not numbers or numbers == st.session_state.get(KEY_LAST_CHART_SELECTION):
        return
    st.session_state[KEY_LAST_CHART_SELECTION] = numbers
    record = get_service().repository.get_listing(numbers[-1])
    if record is None:
        return
    set_interaction(ix.select(current_interaction(), record, ix.HoverSource.CHART))
    st.rerun()


def render_page() -> None:
    st.title("Real Estate Chaos Map")
    st.caption("Explore how listings spread across price, area, station distance and age.")

    store = get_preferences_store()
    service = get_service()
    previous = ensure_filter_state(store)

    state = render_filters(VIEW_OPTIONS)
    if state != previous:
        save_filter_state(store, state)
        st.session_state[KEY_FILTER_STATE] = state

    snapshot = service.snapshot(state)
    render_average_prices(snapshot.averages)

    if snapshot.is_empty:
        render_no_data()
        return

    interaction = current_interaction()
    if interaction.selected is not None:
        render_detail_panel(interaction.selected, on_close=close_detail)

    chart_col, list_col = st.columns([2, 1])
    with chart_col:
        highlighted = interaction.hover.no if interaction.hover else None
        fig, trace_numbers = build_scatter_figure(snapshot.listings, snapshot.sizes, state.view, highlighted)
        event = st.plotly_chart(
            fig,
            key=f"chaos_chart_{st.session_state.get(KEY_CHART_NONCE, 0)}",
            on_select="rerun",
            selection_mode="points",
            width="stretch",
        )
        handle_chart_selection(event, trace_numbers)
    with list_col:
        header_col, clear_col = st.columns([2, 1])
        header_col.markdown("#### Listings shown")
        clear_col.button("Clear highlight", on_click=clear_highlight, disabled=interaction.hover is None)
        render_property_list(
            snapshot.listings,
            interaction,
            on_highlight=highlight_from_list,
            on_select=select_from_list,
        )
        target, remaining = ix.consume_scroll(interaction)
        if target is not None:
            scroll_list_to(target)
            set_interaction(remaining)


render_page()
