"""
Central data model definitions used across the project.

This module defines the shapes that flow between the normalizer, the filter
engine, the detail parser and the two UI surfaces so that:
- all modules share the same field names
- parse failures travel as values (ok/error) instead of exceptions
- the normalized schedule has one well-known type
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional


# date ("january 19, 2025") -> event name -> detail string
Schedule = Dict[str, Dict[str, str]]


class EventRow(NamedTuple):
    """
    One displayed line: an event, its detail string and the day it is on.
    """

    event: str
    detail: str
    date: str


class Coordinate(NamedTuple):
    lat: float
    lng: float


@dataclass(frozen=True)
class DetailResult:
    """
    Outcome of parsing a detail string like "[7:00 AM, SRP & Pier 1]".

    On failure, time is "" and locations is empty; error says why.
    """

    time: str = ""
    locations: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class LocationMatch:
    place: str
    coordinate: Coordinate


@dataclass(frozen=True)
class LinkResult:
    """
    Outcome of building an outbound link (calendar invite).
    """

    url: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class MapView:
    """
    What the map surface shows: a center point and at most one marker.
    """

    center: Coordinate
    zoom: int
    marker: Optional[Coordinate] = None
