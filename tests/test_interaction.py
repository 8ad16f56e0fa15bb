from chaosmap.models.listing import PropertyRecord
from chaosmap.services.interaction import (
    HoverSource,
    InteractionState,
    close,
    consume_scroll,
    hover,
    leave,
    select,
)


def _record(no: int) -> PropertyRecord:
    return PropertyRecord(no=no, land_area=100.0)


def test_hover_and_leave():
    state = hover(InteractionState(), 3, HoverSource.LIST)
    assert state.is_highlighted(3)
    assert not state.is_highlighted(4)
    assert state.hover.source is HoverSource.LIST
    assert leave(state).hover is None


def test_chart_selection_requests_scroll():
    state = select(InteractionState(), _record(5), HoverSource.CHART)
    assert state.selected.no == 5
    assert state.scroll_to == 5
    assert state.hover.source is HoverSource.CHART

    target, remaining = consume_scroll(state)
    assert target == 5
    assert remaining.scroll_to is None
    assert remaining.selected.no == 5


def test_list_selection_does_not_scroll():
    state = select(InteractionState(), _record(2), HoverSource.LIST)
    assert state.selected.no == 2
    assert state.scroll_to is None


def test_new_selection_replaces_open_one():
    state = select(InteractionState(), _record(1), HoverSource.LIST)
    state = select(state, _record(9), HoverSource.CHART)
    assert state.selected.no == 9
    assert close(state).selected is None
    assert close(state).hover == state.hover
