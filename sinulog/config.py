"""
Configuration for the Sinulog schedule browser.

Everything here is a plain module-level constant. The CLI can override the
dataset path per run (--data), nothing is read from the environment.
"""

from __future__ import annotations

from datetime import timedelta, timezone
from pathlib import Path


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "data"
EVENTS_PATH = DATA_DIR / "events.json"


# ---------------------------------------------------------------------------
# Festival
# ---------------------------------------------------------------------------

FESTIVAL_TITLE = "Sinulog 2025"
FESTIVAL_TAGLINE = "One Beat, One Dance, One Vision"

# Cebu has no DST, a fixed offset is enough
FESTIVAL_TZ = timezone(timedelta(hours=8), "PHT")

# Calendar entries have no end time in the dataset
EVENT_DURATION = timedelta(hours=2)


# ---------------------------------------------------------------------------
# Map
# ---------------------------------------------------------------------------

DEFAULT_CENTER = (10.3157, 123.8854)  # Cebu City
DEFAULT_ZOOM = 13


# ---------------------------------------------------------------------------
# Outbound links
# ---------------------------------------------------------------------------

CALENDAR_URL = "https://calendar.google.com/calendar/render"
MAPS_SEARCH_URL = "https://www.google.com/maps/search/"
