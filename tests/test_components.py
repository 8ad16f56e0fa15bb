from app.components.cards import detail_rows, fmt_price
from app.components.charts import build_scatter_figure, selected_numbers, tooltip_html
from app.components.listing import row_anchor, row_html, scroll_script
from chaosmap.models.listing import PropertyRecord, PropertyType, Status
from chaosmap.models.view import VIEW_OPTIONS, axis_title, view_by_label


def _records() -> list:
    return [
        PropertyRecord(no=1, property_type=PropertyType.LAND, land_area=165.3, price=6980.0, status=Status.ON_MARKET),
        PropertyRecord(
            no=2,
            property_type=PropertyType.USED_HOUSE,
            land_area=132.2,
            price=7480.0,
            building_age=17,
            status=Status.CONTRACTED,
            transaction_mode="exclusive",
            link="https://example.com/listings/2",
        ),
        PropertyRecord(no=3, property_type=PropertyType.USED_HOUSE, land_area=150.0, price=8200.0),
    ]


def test_scatter_has_one_trace_per_type():
    fig, trace_numbers = build_scatter_figure(_records(), [64.0, 64.0, 64.0], VIEW_OPTIONS[0])
    assert [trace.name for trace in fig.data] == ["Land", "Used house"]
    assert trace_numbers == [[1], [2, 3]]
    assert list(fig.data[1].x) == [132.2, 150.0]
    assert list(fig.data[1].y) == [7480.0, 8200.0]
    assert fig.layout.xaxis.title.text == "Land area (m²)"
    assert fig.layout.yaxis.title.text == "Price (10k JPY)"


def test_highlighted_point_is_outlined():
    fig, _ = build_scatter_figure(_records(), [64.0, 64.0, 64.0], VIEW_OPTIONS[0], highlighted=3)
    assert list(fig.data[1].marker.line.width) == [0, 3]
    assert list(fig.data[0].marker.line.width) == [0]


def test_selected_numbers_prefers_customdata():
    trace_numbers = [[1], [2, 3]]
    points = [{"customdata": [2]}, {"curve_number": 1, "point_index": 1}, {"curve_number": 7, "point_index": 0}]
    assert selected_numbers(points, trace_numbers) == [2, 3]


def test_axis_units():
    assert axis_title("Walk to station", "walk_minutes") == "Walk to station (min)"
    assert axis_title("Building age", "building_age") == "Building age (yrs)"
    assert view_by_label("missing") is None
    assert len({option.label for option in VIEW_OPTIONS}) == len(VIEW_OPTIONS)


def test_tooltip_and_row_content():
    record = _records()[1]
    assert "Used house (No. 2)" in tooltip_html(record)
    html = row_html(record, highlighted=True)
    assert f'id="{row_anchor(2)}"' in html
    assert "chaos-row--active" in html
    assert "chaos-row--active" not in row_html(record, highlighted=False)


def test_scroll_script_targets_row():
    script = scroll_script(12)
    assert 'getElementById("property-12")' in script
    assert "scrollTop" in script


def test_detail_rows_hide_age_for_land():
    rows = detail_rows(_records()[0]).set_index("Field")["Value"]
    assert rows["Building age"] == "-"
    assert rows["Price"] == fmt_price(6980.0) == "6,980 (10k JPY)"
    house = detail_rows(_records()[1]).set_index("Field")["Value"]
    assert house["Building age"] == "17 yrs"
