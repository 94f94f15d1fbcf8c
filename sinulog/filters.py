"""
Event filtering.

Given the normalized schedule and the selection state, decide which rows
to show:

    browse mode -> every event of the selected day
    search mode -> every event on any day whose name or detail contains
                   the query (case-insensitive)
"""

from __future__ import annotations

from typing import List

from sinulog.model import EventRow, Schedule
from sinulog.state import SelectionState


def events_on(schedule: Schedule, date: str) -> List[EventRow]:
    """
    All events of one day, in dataset order.
    """
    if not date:
        return []
    return [EventRow(event, detail, date) for event, detail in schedule.get(date, {}).items()]


def search_events(schedule: Schedule, query: str) -> List[EventRow]:
    """
    Case-insensitive substring search over event names and details.

    Results follow schedule order (days, then events). No sorting.
    """
    needle = query.strip().lower()
    if not needle:
        return []

    rows: List[EventRow] = []
    for date, events in schedule.items():
        for event, detail in events.items():
            if needle in event.lower() or needle in (detail or "").lower():
                rows.append(EventRow(event, detail, date))
    return rows


def filter_events(state: SelectionState, schedule: Schedule) -> List[EventRow]:
    """
    Rows to display for the current state. Pure read, no side effects.
    """
    if state.mode == "search":
        return search_events(schedule, state.search_text)
    return events_on(schedule, state.current_date)
