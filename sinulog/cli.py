"""
CLI (Command Line Interface).

This module provides quick terminal commands for browsing the festival
schedule, e.g.:

    sinulog dates
    sinulog show "january 19, 2025"
    sinulog search mass
    sinulog locate "january 19, 2025" "Sinulog Grand Parade" --open
    sinulog calendar "january 19, 2025" "Sinulog Grand Parade" --open
    sinulog export <file.ics> [--date D | --search TEXT]
    sinulog interactive

Note:
- The interactive UI lives in sinulog/interactive.py
- This CLI is intentionally simple and prints plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from sinulog.details import detail_fields, format_detail
from sinulog.export_ics import export_rows_to_ics
from sinulog.filters import events_on, filter_events, search_events
from sinulog.links import calendar_link, maps_link, open_link
from sinulog.locations import resolve_location
from sinulog.model import EventRow, Schedule
from sinulog.schedule import DatasetError, build_schedule, canonical_date, initial_date, parse_day, sorted_dates
from sinulog.state import SelectionState


logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """
    Send log records to stderr through rich. Called once per process.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _resolve_date(text: str, schedule: Schedule) -> str:
    """
    Turn user input ("2025-01-19", "Jan 19 2025", ...) into a schedule key.
    """
    raw = (text or "").strip()
    if raw in schedule:
        return raw
    day = parse_day(raw)
    if day is not None:
        return canonical_date(day)
    return raw.lower()


def _find_row(schedule: Schedule, date: str, event: str) -> Optional[EventRow]:
    """
    Look up one event on one day. Event names match case-insensitively.
    """
    wanted = (event or "").strip().lower()
    for row in events_on(schedule, date):
        if row.event.lower() == wanted:
            return row
    return None


def _row_line(row: EventRow, with_date: bool = False) -> str:
    bits = []
    if with_date:
        bits.append(row.date)
    bits.append(row.event)
    detail = format_detail(row.detail)
    if detail:
        bits.append(detail)
    line = " | ".join(bits)
    if resolve_location(detail_fields(row.detail).locations) is None:
        line += "  (location not mapped)"
    return line


def _cmd_dates(args: argparse.Namespace, schedule: Schedule) -> int:
    """
    List all festival days in chronological order with their event counts.
    """
    days = sorted_dates(schedule)
    if not days:
        print("No dates in dataset.")
        return 0

    for d in days:
        n = len(schedule.get(d, {}))
        print(f"{d} | {n} events")
    return 0


def _cmd_show(args: argparse.Namespace, schedule: Schedule) -> int:
    """
    Browse mode: all events of one day (default: today or the next festival day).
    """
    date = _resolve_date(args.date, schedule) if args.date else initial_date(schedule)
    if not date:
        print("No dates in dataset.")
        return 0

    if date not in schedule:
        print(f"No events on: {date}")
        return 1

    state = SelectionState(current_date=date)
    rows = filter_events(state, schedule)

    print(f"Events for {date}:")
    for row in rows:
        print(f"- {_row_line(row)}")
    return 0


def _cmd_search(args: argparse.Namespace, schedule: Schedule) -> int:
    """
    Search mode: events on any day whose name or detail contains the text.
    """
    state = SelectionState()
    state.set_search_text(args.text or "")
    if not state.submit_search():
        print("Please provide a search text.")
        return 1

    rows = filter_events(state, schedule)
    if not rows:
        print("No results.")
        return 0

    print(f"Search results: {len(rows)}")
    for row in rows:
        print(f"- {_row_line(row, with_date=True)}")
    return 0


def _lookup(args: argparse.Namespace, schedule: Schedule) -> Optional[EventRow]:
    date = _resolve_date(args.date, schedule)
    row = _find_row(schedule, date, args.event)
    if row is None:
        print(f"Event not found: {args.event!r} on {date}")
    return row


def _cmd_locate(args: argparse.Namespace, schedule: Schedule) -> int:
    """
    Show where an event takes place, and optionally open it in Google Maps.
    """
    row = _lookup(args, schedule)
    if row is None:
        return 1

    fields = detail_fields(row.detail)
    match = resolve_location(fields.locations)

    places = ", ".join(fields.locations) if fields.locations else "(none)"
    print(f"{row.event} | {row.date} | places: {places}")
    if match is None:
        print("Location not mapped.")
        return 0

    lat, lng = match.coordinate
    print(f"Map marker: {match.place} @ {lat:.4f}, {lng:.4f}")
    if args.open:
        open_link(maps_link(fields.locations[0]))
    return 0


def _cmd_calendar(args: argparse.Namespace, schedule: Schedule) -> int:
    """
    Print (and optionally open) a Google Calendar link for one event.
    """
    row = _lookup(args, schedule)
    if row is None:
        return 1

    link = calendar_link(row.event, row.detail, row.date)
    if not link.ok:
        logger.error("Error adding to calendar: %s", link.error)
        print("Could not build a calendar link for this event.")
        return 1

    print(link.url)
    if args.open:
        open_link(link.url)
    return 0


def _cmd_export(args: argparse.Namespace, schedule: Schedule) -> int:
    """
    Export one day (default) or a search result into an iCalendar (.ics) file.
    """
    out_path = (args.out or "").strip()
    if not out_path:
        print("Please provide output .ics path.")
        return 1

    if args.search is not None:
        if not args.search.strip():
            print("Please provide a search text.")
            return 1
        rows = search_events(schedule, args.search)
    else:
        date = _resolve_date(args.date, schedule) if args.date else initial_date(schedule)
        rows = events_on(schedule, date)

    if not rows:
        print("No events to export.")
        return 0

    n = export_rows_to_ics(rows, Path(out_path))
    print(f"Exported {n} events to: {out_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="sinulog", description="Sinulog festival schedule browser")
    parser.add_argument("--data", type=Path, default=None, help="Events JSON file (default: bundled dataset)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("dates", help="List festival days")

    p_show = sub.add_parser("show", help="Show events of one day")
    p_show.add_argument("date", nargs="?", default=None, help="Day (e.g. 'january 19, 2025' or 2025-01-19)")

    p_search = sub.add_parser("search", help="Search events on all days")
    p_search.add_argument("text", type=str, help="Search text")

    p_locate = sub.add_parser("locate", help="Show where an event takes place")
    p_locate.add_argument("date", type=str, help="Day of the event")
    p_locate.add_argument("event", type=str, help="Event name")
    p_locate.add_argument("--open", action="store_true", help="Open in Google Maps")

    p_cal = sub.add_parser("calendar", help="Google Calendar link for an event")
    p_cal.add_argument("date", type=str, help="Day of the event")
    p_cal.add_argument("event", type=str, help="Event name")
    p_cal.add_argument("--open", action="store_true", help="Open the link in a browser")

    p_export = sub.add_parser("export", help="Export events to .ics")
    p_export.add_argument("out", type=str, help="Output file path (e.g. sinulog.ics)")
    which = p_export.add_mutually_exclusive_group()
    which.add_argument("--date", type=str, default=None, help="Day to export (default: today or next)")
    which.add_argument("--search", type=str, default=None, help="Export search results instead")

    sub.add_parser("interactive", help="Interactive menu mode")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        schedule = build_schedule(args.data)
    except DatasetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1)

    if args.command == "dates":
        raise SystemExit(_cmd_dates(args, schedule))
    if args.command == "show":
        raise SystemExit(_cmd_show(args, schedule))
    if args.command == "search":
        raise SystemExit(_cmd_search(args, schedule))
    if args.command == "locate":
        raise SystemExit(_cmd_locate(args, schedule))
    if args.command == "calendar":
        raise SystemExit(_cmd_calendar(args, schedule))
    if args.command == "export":
        raise SystemExit(_cmd_export(args, schedule))

    if args.command == "interactive":
        from sinulog.interactive import run_interactive

        run_interactive(schedule)
        raise SystemExit(0)

    raise SystemExit(2)
