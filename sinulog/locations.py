"""
Location registry and map view.

Only a handful of venues have known coordinates. An event is "mapped" when
at least one of its places is in the registry; the first registered place
(in the order the detail string lists them) is the one shown on the map.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from sinulog.config import DEFAULT_CENTER, DEFAULT_ZOOM
from sinulog.details import detail_fields
from sinulog.model import Coordinate, LocationMatch, MapView
from sinulog.state import SelectionState


LOCATION_REGISTRY: Dict[str, Coordinate] = {
    "SM Seaside Cebu": Coordinate(10.2791, 123.8584),
    "Fuente Osmeña": Coordinate(10.3107, 123.8925),
    "Plaza Independencia": Coordinate(10.2925, 123.9054),
    "Basilica del Sto. Nino": Coordinate(10.2947, 123.9021),
    "SRP": Coordinate(10.2673, 123.8827),
}


def resolve_location(
    places: Iterable[str], registry: Optional[Dict[str, Coordinate]] = None
) -> Optional[LocationMatch]:
    """
    Return the first place found in the registry, or None.
    """
    reg = LOCATION_REGISTRY if registry is None else registry
    for place in places:
        coord = reg.get(place)
        if coord is not None:
            return LocationMatch(place=place, coordinate=coord)
    return None


def locate_detail(detail: Any) -> Optional[LocationMatch]:
    return resolve_location(detail_fields(detail).locations)


def is_mapped(detail: Any) -> bool:
    return locate_detail(detail) is not None


def map_view(state: SelectionState) -> MapView:
    """
    Center on the selected point (with a marker), else the city default.
    """
    if state.selected_point is not None:
        return MapView(center=state.selected_point, zoom=DEFAULT_ZOOM, marker=state.selected_point)
    return MapView(center=Coordinate(*DEFAULT_CENTER), zoom=DEFAULT_ZOOM)
