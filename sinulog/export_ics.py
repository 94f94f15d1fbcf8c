"""
iCalendar (.ics) export.

We convert displayed rows into a calendar file that can be imported into:
- Google Calendar
- Outlook
- Apple Calendar

Start times follow the same rules as the "Add to Calendar" link.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from sinulog.config import EVENT_DURATION, FESTIVAL_TITLE
from sinulog.details import detail_fields, format_detail
from sinulog.links import event_start
from sinulog.model import EventRow


logger = logging.getLogger(__name__)


def _ics_escape(text: str) -> str:
    """
    Escape text for ICS fields (very small subset, sufficient for our use).
    """
    return (
        text.replace("\\", "\\\\").replace("\r\n", "\\n").replace("\n", "\\n").replace(";", "\\;").replace(",", "\\,")
    )


def _dt_utc(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _uid(row: EventRow, dtstart: str) -> str:
    slug = "-".join(row.event.lower().split())
    return f"{dtstart}-{slug}@sinulog"


def export_rows_to_ics(rows: Iterable[EventRow], out_path: str | Path) -> int:
    """
    Export rows to an .ics file. Returns number of exported events.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    lines: list[str] = []
    lines.append("BEGIN:VCALENDAR")
    lines.append("VERSION:2.0")
    lines.append("PRODID:-//Sinulog Schedule//EN")
    lines.append("CALSCALE:GREGORIAN")

    dtstamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")

    count = 0
    for row in rows:
        fields = detail_fields(row.detail)
        try:
            start = event_start(row.date, fields.time)
        except ValueError as exc:
            logger.warning("Skipping %r on %s: %s", row.event, row.date, exc)
            continue

        dtstart = _dt_utc(start)
        dtend = _dt_utc(start + EVENT_DURATION)

        lines.append("BEGIN:VEVENT")
        lines.append(f"UID:{_ics_escape(_uid(row, dtstart))}")
        lines.append(f"DTSTAMP:{dtstamp}")
        lines.append(f"DTSTART:{dtstart}")
        lines.append(f"DTEND:{dtend}")
        lines.append(f"SUMMARY:{_ics_escape(row.event)}")
        if fields.locations:
            lines.append(f"LOCATION:{_ics_escape(', '.join(fields.locations))}")
        description = format_detail(row.detail)
        lines.append(f"DESCRIPTION:{_ics_escape(f'{FESTIVAL_TITLE} Event: {description}')}")
        lines.append("END:VEVENT")
        count += 1

    lines.append("END:VCALENDAR")

    # ICS standard uses CRLF
    out.write_text("\r\n".join(lines) + "\r\n", encoding="utf-8")
    return count
