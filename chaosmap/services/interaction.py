"""Hover cross-highlighting and detail selection shared by chart and list."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..models.listing import PropertyRecord


class HoverSource(str, Enum):
    LIST = "list"
    CHART = "chart"


@dataclass(frozen=True)
class HoverState:
    no: int
    source: HoverSource


@dataclass(frozen=True)
class InteractionState:
    """Transient UI state; never persisted.

    ``selected`` is the record shown in the detail panel (at most one).
    ``scroll_to`` is a pending request to bring a list row into view.
    """

    hover: Optional[HoverState] = None
    selected: Optional[PropertyRecord] = None
    scroll_to: Optional[int] = None

    def is_highlighted(self, number: int) -> bool:
        return self.hover is not None and self.hover.no == number


def hover(state: InteractionState, number: int, source: HoverSource) -> InteractionState:
    return replace(state, hover=HoverState(no=number, source=HoverSource(source)))


def leave(state: InteractionState) -> InteractionState:
    return replace(state, hover=None)


def select(state: InteractionState, record: PropertyRecord, source: HoverSource) -> InteractionState:
    """Open ``record`` in the detail panel, replacing any open record.

    Selections coming from the chart also ask the list to scroll to the row.
    """

    source = HoverSource(source)
    scroll_to = record.no if source is HoverSource.CHART else state.scroll_to
    return InteractionState(
        hover=HoverState(no=record.no, source=source),
        selected=record,
        scroll_to=scroll_to,
    )


def close(state: InteractionState) -> InteractionState:
    return replace(state, selected=None)


def consume_scroll(state: InteractionState) -> tuple[Optional[int], InteractionState]:
    return state.scroll_to, replace(state, scroll_to=None)


__all__ = [
    "HoverSource",
    "HoverState",
    "InteractionState",
    "close",
    "consume_scroll",
    "hover",
    "leave",
    "select",
]
