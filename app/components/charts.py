"""Plotly scatter chart for the chaos map."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import plotly.graph_objects as go

from chaosmap.models.listing import PROPERTY_TYPE_LABELS, PropertyRecord, PropertyType
from chaosmap.models.view import ViewOption, axis_title
from chaosmap.services.sizing import marker_diameter

TYPE_COLORS: Dict[Optional[PropertyType], str] = {
    PropertyType.LAND: "#8884d8",
    PropertyType.USED_HOUSE: "#82ca9d",
    PropertyType.NEW_HOUSE: "#ffc658",
    None: "#9ca3af",
}
TRACE_ORDER: List[Optional[PropertyType]] = [PropertyType.LAND, PropertyType.USED_HOUSE, PropertyType.NEW_HOUSE, None]
HIGHLIGHT_COLOR = "#1f2937"


def _fmt(value: Optional[float], unit: str) -> str:
    if value is None:
        return "-"
    return f"{value:,.1f}{unit}" if value != int(value) else f"{int(value):,}{unit}"


def tooltip_html(record: PropertyRecord) -> str:
    return "<br>".join(
        [
            f"<b>{record.type_label} (No. {record.no})</b>",
            f"Price: {_fmt(record.price, ' (10k JPY)')}",
            f"Land area: {_fmt(record.land_area, ' m²')}",
            f"Unit price per m²: {_fmt(record.price_per_sqm, ' (10k JPY)')}",
            f"Transaction: {record.transaction_mode_label}",
        ]
    )


def build_scatter_figure(
    listings: Sequence[PropertyRecord],
    sizes: Sequence[float],
    view: ViewOption,
    highlighted: Optional[int] = None,
) -> Tuple[go.Figure, List[List[int]]]:
    """Return the figure and, per trace, the listing numbers of its points.

    Points are grouped into one trace per property type. ``highlighted`` draws
    an outline around the matching point.
    """

    size_by_no = {record.no: size for record, size in zip(listings, sizes)}
    fig = go.Figure()
    trace_numbers: List[List[int]] = []
    for property_type in TRACE_ORDER:
        group = [record for record in listings if record.property_type is property_type]
        if not group:
            continue
        name = PROPERTY_TYPE_LABELS[property_type] if property_type is not None else "Other"
        fig.add_trace(
            go.Scatter(
                x=[record.value_of(view.x_field) for record in group],
                y=[record.value_of(view.y_field) for record in group],
                name=name,
                mode="markers",
                customdata=[[record.no] for record in group],
                hovertext=[tooltip_html(record) for record in group],
                hoverinfo="text",
                marker=dict(
                    color=TYPE_COLORS[property_type],
                    size=[marker_diameter(size_by_no[record.no]) for record in group],
                    sizemode="diameter",
                    line=dict(
                        color=HIGHLIGHT_COLOR,
                        width=[3 if record.no == highlighted else 0 for record in group],
                    ),
                ),
            )
        )
        trace_numbers.append([record.no for record in group])

    fig.update_layout(
        margin=dict(l=20, r=20, t=20, b=20),
        height=400,
        xaxis_title=axis_title(view.x_label, view.x_field),
        yaxis_title=axis_title(view.y_label, view.y_field),
        template="plotly_white",
        clickmode="event+select",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
    )
    return fig, trace_numbers


def selected_numbers(points: Iterable[Mapping], trace_numbers: Sequence[Sequence[int]]) -> List[int]:
    """Listing numbers of the points in a Streamlit chart selection event."""

    numbers: List[int] = []
    for point in points:
        custom = point.get("customdata")
        if isinstance(custom, (list, tuple)) and custom:
            numbers.append(int(custom[0]))
            continue
        curve = point.get("curve_number")
        index = point.get("point_index", point.get("point_number"))
        if curve is None or index is None:
            continue
        if 0 <= curve < len(trace_numbers) and 0 <= index < len(trace_numbers[curve]):
            numbers.append(trace_numbers[curve][index])
    return numbers
