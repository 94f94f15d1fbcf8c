import unittest

from sinulog.config import DEFAULT_CENTER, DEFAULT_ZOOM
from sinulog.locations import LOCATION_REGISTRY, is_mapped, locate_detail, map_view, resolve_location
from sinulog.model import Coordinate
from sinulog.state import SelectionState


class TestResolveLocation(unittest.TestCase):
    def test_registered_place(self) -> None:
        match = resolve_location(["SRP"])
        self.assertIsNotNone(match)
        assert match is not None
        self.assertEqual(match.place, "SRP")
        self.assertEqual(match.coordinate, Coordinate(lat=10.2673, lng=123.8827))

    def test_unregistered_place(self) -> None:
        self.assertIsNone(resolve_location(["Ouano Wharf"]))
        self.assertIsNone(resolve_location([]))

    def test_first_registered_place_wins(self) -> None:
        match = resolve_location(["Pier 1", "Fuente Osmeña", "SRP"])
        assert match is not None
        self.assertEqual(match.place, "Fuente Osmeña")

    def test_custom_registry(self) -> None:
        registry = {"Pier 1": Coordinate(10.29, 123.90)}
        match = resolve_location(["SRP", "Pier 1"], registry=registry)
        assert match is not None
        self.assertEqual(match.place, "Pier 1")

    def test_registry_has_five_venues(self) -> None:
        self.assertEqual(len(LOCATION_REGISTRY), 5)


class TestDetailLocation(unittest.TestCase):
    def test_mapped_detail(self) -> None:
        self.assertTrue(is_mapped("[9:00 AM, SRP]"))
        match = locate_detail("[8:00 PM, Mango Avenue & Fuente Osmeña]")
        assert match is not None
        self.assertEqual(match.place, "Fuente Osmeña")

    def test_unmapped_detail(self) -> None:
        self.assertFalse(is_mapped("[6:00 AM, Ouano Wharf & Pier 1]"))
        self.assertFalse(is_mapped(""))


class TestMapView(unittest.TestCase):
    def test_default_center_without_marker(self) -> None:
        view = map_view(SelectionState())
        self.assertEqual(view.center, Coordinate(*DEFAULT_CENTER))
        self.assertEqual(view.zoom, DEFAULT_ZOOM)
        self.assertIsNone(view.marker)

    def test_selected_point_centers_and_marks(self) -> None:
        state = SelectionState()
        state.select_point(LOCATION_REGISTRY["SRP"])
        view = map_view(state)
        self.assertEqual(view.center, LOCATION_REGISTRY["SRP"])
        self.assertEqual(view.marker, LOCATION_REGISTRY["SRP"])


if __name__ == "__main__":
    unittest.main()
