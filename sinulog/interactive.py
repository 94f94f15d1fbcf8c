from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from sinulog.config import FESTIVAL_TAGLINE, FESTIVAL_TITLE
from sinulog.details import detail_fields, format_detail
from sinulog.export_ics import export_rows_to_ics
from sinulog.filters import filter_events
from sinulog.links import calendar_link, maps_link, open_link
from sinulog.locations import map_view, resolve_location
from sinulog.model import EventRow, Schedule
from sinulog.schedule import MONTHS, initial_date, parse_day, sorted_dates
from sinulog.state import SelectionState


logger = logging.getLogger(__name__)

console = Console()

STRIP_WIDTH = 7


def _println(msg: str = "") -> None:
    console.print(msg)


def _prompt(msg: str) -> str:
    return console.input(msg)


def _short_date(key: str) -> str:
    d = parse_day(key)
    if d is None:
        return key
    return f"{MONTHS[d.month - 1][:3].title()} {d.day}"


def date_strip(days: list[str], selected: str, width: int = STRIP_WIDTH) -> list[str]:
    """
    Window of `width` days with the selected one as close to the middle
    as the ends of the list allow.
    """
    if len(days) <= width:
        return list(days)

    try:
        idx = days.index(selected)
    except ValueError:
        idx = 0

    start = max(0, idx - width // 2)
    start = min(start, len(days) - width)
    return days[start : start + width]


class ScheduleView:
    """
    Terminal view of one session. Re-renders whenever the state changes.
    """

    def __init__(self, schedule: Schedule, state: SelectionState) -> None:
        self.schedule = schedule
        self.state = state
        self.days = sorted_dates(schedule)
        self._last_snapshot: Optional[tuple] = None
        self._unsubscribe: Optional[Callable[[], None]] = state.subscribe(self.render)

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def rows(self) -> list[EventRow]:
        return filter_events(self.state, self.schedule)

    def _snapshot(self, state: SelectionState) -> tuple:
        if state.mode == "search":
            return ("search", state.search_text.strip().lower(), state.selected_point)
        return ("browse", state.current_date, state.selected_point)

    def render(self, state: Optional[SelectionState] = None) -> None:
        state = state or self.state
        # typing without submitting changes nothing on screen
        snapshot = self._snapshot(state)
        if snapshot == self._last_snapshot:
            return
        self._last_snapshot = snapshot
        searching = state.mode == "search"

        _println(f"\n[bold]=== {FESTIVAL_TITLE} ===[/]  [italic]{FESTIVAL_TAGLINE}[/]")

        if not searching:
            strip = []
            for d in date_strip(self.days, state.current_date):
                label = escape(_short_date(d))
                strip.append(f"[reverse bold]{label}[/]" if d == state.current_date else label)
            if strip:
                _println("  ".join(strip))

        rows = self.rows()
        if searching:
            title = f"Search Results for '{escape(state.search_text.strip())}'"
        elif state.current_date:
            title = f"Events for {escape(_short_date(state.current_date))}"
        else:
            title = "Events"

        table = Table(title=title, box=box.SIMPLE)
        table.add_column("#", justify="right")
        if searching:
            table.add_column("Date")
        table.add_column("Event")
        table.add_column("Details")
        table.add_column("")

        for i, row in enumerate(rows, start=1):
            mapped = resolve_location(detail_fields(row.detail).locations) is not None
            flag = "" if mapped else "[yellow]Not Found[/]"
            cells = [str(i)]
            if searching:
                cells.append(f"[orange3]{escape(_short_date(row.date))}[/]")
            cells += [f"[bold]{escape(row.event)}[/]", escape(format_detail(row.detail)), flag]
            table.add_row(*cells)

        if rows:
            console.print(table)
        else:
            _println(title)
            _println("No events.")

        view = map_view(state)
        marker = f"marker @ {view.marker.lat:.4f}, {view.marker.lng:.4f}" if view.marker else "no marker"
        console.print(
            Panel(f"center {view.center.lat:.4f}, {view.center.lng:.4f} | zoom {view.zoom} | {marker}", title="Map")
        )


def run_interactive(schedule: Schedule, today: Optional[date] = None) -> None:
    """
    Interactive menu loop: browse by day, search, map, calendar, export.
    """
    state = SelectionState(current_date=initial_date(schedule, today=today))
    view = ScheduleView(schedule, state)
    view.render()

    try:
        while True:
            choice = _prompt(
                "\n[1] Pick date  [2] Next date  [3] Previous date\n"
                "[4] Search  [5] Clear search\n"
                "[6] Show on map  [7] Add to calendar  [8] Open in maps\n"
                "[9] Export .ics  [0] Exit\n"
                "Select: "
            ).strip()

            if choice == "0":
                _println("Bye.")
                return

            if choice == "1":
                _flow_pick_date(view)
            elif choice == "2":
                _flow_step_date(view, +1)
            elif choice == "3":
                _flow_step_date(view, -1)
            elif choice == "4":
                _flow_search(view)
            elif choice == "5":
                state.clear_search()
            elif choice == "6":
                _flow_show_on_map(view)
            elif choice == "7":
                _flow_calendar(view)
            elif choice == "8":
                _flow_open_maps(view)
            elif choice == "9":
                _flow_export(view)
            else:
                _println("Invalid choice.")
    finally:
        view.close()


def _flow_pick_date(view: ScheduleView) -> None:
    if not view.days:
        _println("No dates in dataset.")
        return

    table = Table(title="Festival days", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Date")
    table.add_column("Events", justify="right")
    for i, d in enumerate(view.days, start=1):
        table.add_row(str(i), escape(d), f"[yellow]{len(view.schedule.get(d, {}))}[/]")
    console.print(table)

    pick = _prompt("Enter number [blank = back]: ").strip()
    if not pick:
        return
    if not pick.isdigit():
        _println("Not a number.")
        return

    i = int(pick)
    if not (1 <= i <= len(view.days)):
        _println("Out of range.")
        return

    view.state.select_date(view.days[i - 1])


def _flow_step_date(view: ScheduleView, step: int) -> None:
    if not view.days:
        _println("No dates in dataset.")
        return

    try:
        idx = view.days.index(view.state.current_date)
    except ValueError:
        idx = 0 if step > 0 else len(view.days) - 1
        view.state.select_date(view.days[idx])
        return

    new_idx = idx + step
    if not (0 <= new_idx < len(view.days)):
        _println("No more dates in that direction.")
        return
    view.state.select_date(view.days[new_idx])


def _flow_search(view: ScheduleView) -> None:
    text = _prompt("Search events [blank = back]: ")
    if not text.strip():
        return
    view.state.set_search_text(text)
    view.state.submit_search()


def _pick_row(view: ScheduleView) -> Optional[EventRow]:
    rows = view.rows()
    if not rows:
        _println("No events.")
        return None

    pick = _prompt("Enter event number [blank = back]: ").strip()
    if not pick:
        return None
    if not pick.isdigit():
        _println("Not a number.")
        return None

    i = int(pick)
    if not (1 <= i <= len(rows)):
        _println("Out of range.")
        return None
    return rows[i - 1]


def _flow_show_on_map(view: ScheduleView) -> None:
    row = _pick_row(view)
    if row is None:
        return

    match = resolve_location(detail_fields(row.detail).locations)
    if match is None:
        _println(f"[yellow]Location not mapped:[/] {escape(format_detail(row.detail))}")
        return

    _println(f"Showing {escape(match.place)} on the map.")
    view.state.select_point(match.coordinate)


def _flow_calendar(view: ScheduleView) -> None:
    row = _pick_row(view)
    if row is None:
        return

    link = calendar_link(row.event, row.detail, row.date)
    if not link.ok:
        logger.error("Error adding to calendar: %s", link.error)
        return

    _println(escape(link.url))
    open_link(link.url)


def _flow_open_maps(view: ScheduleView) -> None:
    row = _pick_row(view)
    if row is None:
        return

    fields = detail_fields(row.detail)
    if resolve_location(fields.locations) is None:
        _println(f"[yellow]Location not mapped:[/] {escape(format_detail(row.detail))}")
        return

    open_link(maps_link(fields.locations[0]))


def _flow_export(view: ScheduleView) -> None:
    rows = view.rows()
    if not rows:
        _println("No events to export.")
        return

    # Default to user's Downloads folder (works on Windows/macOS/Linux)
    downloads = Path.home() / "Downloads"
    default_name = "sinulog.ics"

    out_in = _prompt(f"Please enter desired file name, default is [{default_name}]: ").strip()
    out_path = downloads / out_in if out_in else downloads / default_name

    # enforce .ics extension
    if out_path.suffix.lower() != ".ics":
        out_path = out_path.with_suffix(".ics")

    n = export_rows_to_ics(rows, out_path)
    _println(f"\nExported {n} events.")
    _println(f"Saved to: {escape(str(out_path.resolve()))}")
