"""
Outbound links: "Add to Calendar" and "Open in Maps".

Both are plain URL templates opened in a new browser tab. Nothing comes
back from either service.
"""

from __future__ import annotations

import logging
import re
import webbrowser
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote, urlencode

from sinulog.config import CALENDAR_URL, EVENT_DURATION, FESTIVAL_TITLE, FESTIVAL_TZ, MAPS_SEARCH_URL
from sinulog.details import parse_detail
from sinulog.model import LinkResult
from sinulog.schedule import parse_day


logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(?:([AaPp])\.?\s*[Mm]\.?)?")


def event_start(date_key: str, time_text: str) -> datetime:
    """
    Combine a day key and a time like "7:00 AM" into an aware datetime.

    Minutes and the AM/PM suffix are optional ("7 PM", "19:30").
    Raises ValueError if either part cannot be read.
    """
    day = parse_day(date_key)
    if day is None:
        raise ValueError(f"Invalid date: {date_key!r}")

    m = _TIME_RE.match(time_text.strip())
    if not m:
        raise ValueError(f"Invalid time: {time_text!r}")

    hour = int(m.group(1))
    minute = int(m.group(2) or 0)
    suffix = (m.group(3) or "").upper()

    if suffix:
        if not 1 <= hour <= 12:
            raise ValueError(f"Invalid 12-hour time: {time_text!r}")
        # 12 AM is midnight, 12 PM is noon
        hour = hour % 12 + (12 if suffix == "P" else 0)

    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"Invalid time value: {time_text!r}")

    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=FESTIVAL_TZ)


def _utc_compact(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def calendar_link(event: str, detail: Any, date_key: str) -> LinkResult:
    """
    Build a Google Calendar "create event" link for one row.

    Events last EVENT_DURATION. A row whose time cannot be read gives a
    failed result and no link.
    """
    parsed = parse_detail(detail)
    if not parsed.ok:
        return LinkResult(error=parsed.error)

    try:
        start = event_start(date_key, parsed.time)
    except ValueError as exc:
        return LinkResult(error=str(exc))
    end = start + EVENT_DURATION

    params = {
        "action": "TEMPLATE",
        "text": event,
        "dates": f"{_utc_compact(start)}/{_utc_compact(end)}",
        "location": ", ".join(parsed.locations),
        "details": f"{FESTIVAL_TITLE} Event: {event}",
    }
    return LinkResult(url=f"{CALENDAR_URL}?{urlencode(params, quote_via=quote, safe='/')}")


def maps_link(query: str) -> str:
    """
    Google Maps search link for a free text place name.
    """
    return f"{MAPS_SEARCH_URL}?{urlencode({'api': 1, 'query': query}, quote_via=quote)}"


def open_link(url: str) -> None:
    """
    Open a URL in a new browser tab. Fire and forget.
    """
    logger.debug("Opening %s", url)
    webbrowser.open_new_tab(url)
