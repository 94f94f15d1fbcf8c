"""
Dataset normalization (raw JSON -> per-day schedule).

- Reads the bundled festival dataset from data/events.json
- Expands "Month Day Year - Month Day Year" keys into one entry per day
- Writes every day under its canonical key, e.g. "january 19, 2025"

Important rules:
- 1 key in the output = 1 calendar day
- range days carry the same events as the range entry
- same day from several keys is merged, later keys win on the same event name
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional

from sinulog.config import EVENTS_PATH
from sinulog.model import Schedule


logger = logging.getLogger(__name__)

# Fixed English names so output does not depend on the process locale
MONTHS = [
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]

RANGE_SEPARATOR = "-"


class DatasetError(RuntimeError):
    """Raised when the events dataset cannot be read."""


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_dataset(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the raw dataset (date-or-range key -> event name -> detail).
    """
    data_path = Path(path) if path is not None else EVENTS_PATH

    try:
        data = json.loads(data_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise DatasetError(f"Dataset not found: {data_path}") from exc
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DatasetError(f"Dataset is not readable JSON: {data_path} ({exc})") from exc

    if not isinstance(data, dict):
        raise DatasetError(f"Dataset must be a JSON object keyed by date: {data_path}")

    logger.debug("Loaded %d dataset keys from %s", len(data), data_path)
    return data


# ---------------------------------------------------------------------------
# Date helpers
# ---------------------------------------------------------------------------


def canonical_date(d: date) -> str:
    """
    Format a date as the lookup key used everywhere: "january 19, 2025".
    """
    return f"{MONTHS[d.month - 1]} {d.day}, {d.year}"


def _month_number(token: str) -> Optional[int]:
    t = token.strip().lower().rstrip(".")
    if len(t) < 3:
        return None
    for i, name in enumerate(MONTHS, start=1):
        if name.startswith(t):
            return i
    return None


def _split_tokens(text: str) -> List[str]:
    return text.replace(",", " ").split()


def parse_day(text: str, default: Optional[date] = None) -> Optional[date]:
    """
    Parse "January 19 2025", "january 19, 2025", "Jan 19 2025" or "2025-01-19".

    Missing parts are taken from `default` (used for the end of a range,
    e.g. "January 9 - 17 2025"). Returns None when the text is not a date.
    """
    raw = text.strip()
    if not raw:
        return None

    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        pass

    tokens = _split_tokens(raw)
    month: Optional[int] = default.month if default else None
    day: Optional[int] = default.day if default else None
    year: Optional[int] = default.year if default else None

    numbers: List[int] = []
    for tok in tokens:
        if tok.isdigit():
            numbers.append(int(tok))
            continue
        m = _month_number(tok)
        if m is None:
            return None
        month = m

    # "19 2025" -> day + year, "19" -> day, "2025" -> year
    if len(numbers) == 1:
        if numbers[0] > 31:
            year = numbers[0]
        else:
            day = numbers[0]
    elif len(numbers) == 2:
        day, year = numbers
    elif len(numbers) > 2:
        return None

    if month is None or day is None or year is None:
        return None

    try:
        return date(year, month, day)
    except ValueError:
        return None


def expand_date_range(key: str) -> List[str]:
    """
    Expand "Month Day Year - Month Day Year" into canonical day keys.

    Both bounds are included. Returns [] when either end does not parse
    or the end comes before the start.
    """
    start_text, _, end_text = key.partition(RANGE_SEPARATOR)

    start = parse_day(start_text)
    if start is None:
        # "January 9 - 17 2025": borrow the year from the end
        years = [tok for tok in _split_tokens(end_text) if tok.isdigit() and int(tok) > 31]
        if years:
            start = parse_day(f"{start_text} {years[-1]}")
    if start is None:
        return []

    end = parse_day(end_text, default=start) if end_text.strip() else start
    if end is None or end < start:
        return []

    days: List[str] = []
    current = start
    while current <= end:
        days.append(canonical_date(current))
        current += timedelta(days=1)
    return days


def _date_sort_key(key: str) -> Optional[date]:
    return parse_day(key)


# ---------------------------------------------------------------------------
# Normalization (CORE LOGIC)
# ---------------------------------------------------------------------------


def normalize_detail(detail: Any) -> str:
    """
    Reduce the dataset's detail field to one string.

    The source mixes "..." and ["...", "..."] for the same value. Only the
    first entry of a list is ever shown, so we keep just that.
    """
    if isinstance(detail, list):
        detail = detail[0] if detail else ""
    if detail is None:
        return ""
    return detail if isinstance(detail, str) else str(detail)


def normalize_schedule(raw: Dict[str, Any]) -> Schedule:
    """
    Build the per-day schedule from the raw dataset.

    Pure function: the input is not modified and the same input always
    gives an equal result.
    """
    schedule: Schedule = {}

    for key, events in raw.items():
        if not isinstance(events, dict):
            logger.warning("Skipping %r: expected an object of events", key)
            continue

        if RANGE_SEPARATOR in key and parse_day(key) is None:
            days = expand_date_range(key)
            if not days:
                logger.warning("Could not expand date range %r", key)
                continue
        else:
            day = parse_day(key)
            if day is None:
                logger.warning("Unrecognized date key %r, keeping it as-is", key)
                days = [key.strip().lower()]
            else:
                days = [canonical_date(day)]

        for day_key in days:
            bucket = schedule.setdefault(day_key, {})
            for name, detail in events.items():
                bucket[name] = normalize_detail(detail)

    return schedule


def sorted_dates(schedule: Schedule) -> List[str]:
    """
    Return the schedule's days in chronological order.

    Keys that are not dates go last, in their original order.
    """
    dated = []
    undated = []
    for key in schedule:
        d = _date_sort_key(key)
        if d is None:
            undated.append(key)
        else:
            dated.append((d, key))
    dated.sort()
    return [key for _, key in dated] + undated


def initial_date(schedule: Schedule, today: Optional[date] = None) -> str:
    """
    Pick the day shown on start: today or the next festival day,
    otherwise the first day. "" for an empty schedule.
    """
    days = sorted_dates(schedule)
    if not days:
        return ""

    ref = today or date.today()
    for key in days:
        d = _date_sort_key(key)
        if d is not None and d >= ref:
            return key
    return days[0]


def build_schedule(path: str | Path | None = None) -> Schedule:
    """
    Convenience: load + normalize in one step.
    """
    return normalize_schedule(load_dataset(path))
