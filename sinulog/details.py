"""
Detail string parsing.

A detail string looks like:

    "[7:00 AM, Fuente Osmeña & Plaza Independencia]"

- brackets are decoration and are removed
- the first comma separated token is the time of day
- the rest is a " & " separated list of place names
"""

from __future__ import annotations

import logging
from typing import Any, List

from sinulog.model import DetailResult


logger = logging.getLogger(__name__)

PLACE_SEPARATOR = " & "


def _strip_brackets(text: str) -> str:
    return text.replace("[", "").replace("]", "")


def parse_detail(detail: Any) -> DetailResult:
    """
    Split a detail string into time and places.

    Never raises: a value that is not a string comes back as a failed
    result with empty fields, the caller decides what to do with it.
    """
    if isinstance(detail, list):
        detail = detail[0] if detail else ""

    if not isinstance(detail, str):
        return DetailResult(error=f"detail is {type(detail).__name__}, expected str")

    parts = _strip_brackets(detail).split(",")
    time = parts[0].strip()

    tail = ",".join(parts[1:])
    locations: List[str] = [loc.strip() for loc in tail.split(PLACE_SEPARATOR)]
    locations = [loc for loc in locations if loc]

    return DetailResult(time=time, locations=locations)


def detail_fields(detail: Any) -> DetailResult:
    """
    parse_detail for display code: failures are logged and degrade to
    blank fields.
    """
    result = parse_detail(detail)
    if not result.ok:
        logger.error("Error parsing location details %r: %s", detail, result.error)
    return result


def format_detail(detail: Any) -> str:
    """
    Human readable detail line: brackets removed, nothing else changed.
    """
    if isinstance(detail, list):
        detail = detail[0] if detail else ""
    if detail is None:
        return ""
    return _strip_brackets(str(detail)).strip()
