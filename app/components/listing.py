"""Scrollable property list synchronised with the chart."""

from __future__ import annotations

import html
from typing import Callable, Sequence

import streamlit as st
import streamlit.components.v1 as components

from chaosmap.models.listing import PropertyRecord
from chaosmap.services.interaction import InteractionState

from .cards import fmt_area, fmt_price

LIST_HEIGHT = 400


def row_anchor(number: int) -> str:
    return f"property-{number}"


def row_html(record: PropertyRecord, highlighted: bool) -> str:
    css_class = "chaos-row chaos-row--active" if highlighted else "chaos-row"
    style = "background: rgba(59, 130, 246, 0.10);" if highlighted else ""
    return f"""
        <div id="{row_anchor(record.no)}" class="{css_class}" style="border-radius: 6px; padding: 4px 6px; {style}">
            <strong>{html.escape(record.type_label)} (No. {record.no})</strong><br>
            <small>
                {html.escape(record.address)}<br>
                Price: {fmt_price(record.price)}, Area: {fmt_area(record.land_area)}<br>
                Per m²: {fmt_price(record.price_per_sqm)}, Per tsubo: {fmt_price(record.price_per_tsubo)}<br>
                Status: {record.status_label}, Transaction: {html.escape(record.transaction_mode_label)}<br>
                Code: {html.escape(record.property_code or '-')}
            </small>
        </div>
    """


def scroll_script(number: int) -> str:
    """JS that scrolls the list so the row's top edge meets the list's top edge."""

    return f"""
        <script>
        const doc = window.parent.document;
        const row = doc.getElementById("{row_anchor(number)}");
        if (row) {{
            let box = row.parentElement;
            while (box && box.scrollHeight <= box.clientHeight) {{
                box = box.parentElement;
            }}
            if (box) {{
                box.scrollTop += row.getBoundingClientRect().top - box.getBoundingClientRect().top;
            }}
        }}
        </script>
    """


def render_property_list(
    listings: Sequence[PropertyRecord],
    interaction: InteractionState,
    on_highlight: Callable[[int], None],
    on_select: Callable[[int], None],
) -> None:
    with st.container(height=LIST_HEIGHT, border=True):
        for record in listings:
            st.markdown(row_html(record, interaction.is_highlighted(record.no)), unsafe_allow_html=True)
            cols = st.columns(3)
            cols[0].button("Highlight", key=f"hover-{record.no}", on_click=on_highlight, args=(record.no,))
            cols[1].button("Details", key=f"select-{record.no}", on_click=on_select, args=(record.no,))
            if record.has_link:
                cols[2].link_button("View listing", record.link)


def scroll_list_to(number: int) -> None:
    components.html(scroll_script(number), height=0)
