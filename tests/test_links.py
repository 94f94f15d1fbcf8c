import unittest
from datetime import datetime
from unittest import mock

from sinulog.config import CALENDAR_URL, FESTIVAL_TZ
from sinulog.links import calendar_link, event_start, maps_link, open_link


class TestEventStart(unittest.TestCase):
    def test_morning(self) -> None:
        self.assertEqual(
            event_start("january 19, 2025", "7:00 AM"),
            datetime(2025, 1, 19, 7, 0, tzinfo=FESTIVAL_TZ),
        )

    def test_pm_adds_twelve(self) -> None:
        self.assertEqual(event_start("january 19, 2025", "7:30 PM").hour, 19)
        self.assertEqual(event_start("january 19, 2025", "7:30 PM").minute, 30)

    def test_noon_and_midnight(self) -> None:
        self.assertEqual(event_start("january 19, 2025", "12:00 PM").hour, 12)
        self.assertEqual(event_start("january 19, 2025", "12:00 AM").hour, 0)

    def test_hour_only_and_24h(self) -> None:
        self.assertEqual(event_start("january 19, 2025", "9 AM").hour, 9)
        self.assertEqual(event_start("2025-01-19", "19:45").hour, 19)

    def test_invalid_time_or_date(self) -> None:
        with self.assertRaises(ValueError):
            event_start("january 19, 2025", "TBA")
        with self.assertRaises(ValueError):
            event_start("january 19, 2025", "13:00 PM")
        with self.assertRaises(ValueError):
            event_start("not a date", "7:00 AM")


class TestCalendarLink(unittest.TestCase):
    def test_link_fields(self) -> None:
        link = calendar_link("Opening Mass", "[7:00 AM, Basilica del Sto. Nino]", "january 19, 2025")

        self.assertTrue(link.ok)
        self.assertTrue(link.url.startswith(CALENDAR_URL + "?action=TEMPLATE"))
        self.assertIn("text=Opening%20Mass", link.url)
        # 07:00 in Cebu (UTC+8) is 23:00 UTC the day before, two hours long
        self.assertIn("dates=20250118T230000Z/20250119T010000Z", link.url)
        self.assertIn("location=Basilica%20del%20Sto.%20Nino", link.url)
        self.assertIn("details=Sinulog%202025%20Event%3A%20Opening%20Mass", link.url)

    def test_several_places_are_joined(self) -> None:
        link = calendar_link("Walk", "[4:00 AM, SRP & Pier 1]", "january 9, 2025")
        self.assertIn("location=SRP%2C%20Pier%201", link.url)

    def test_unparseable_time_gives_failed_result(self) -> None:
        link = calendar_link("Mystery", "[TBA, SRP]", "january 19, 2025")
        self.assertFalse(link.ok)
        self.assertEqual(link.url, "")

    def test_bad_detail_type_gives_failed_result(self) -> None:
        link = calendar_link("Mystery", None, "january 19, 2025")
        self.assertFalse(link.ok)


class TestMapsLink(unittest.TestCase):
    def test_query_is_encoded(self) -> None:
        self.assertEqual(maps_link("SRP"), "https://www.google.com/maps/search/?api=1&query=SRP")
        self.assertEqual(
            maps_link("Fuente Osmeña"),
            "https://www.google.com/maps/search/?api=1&query=Fuente%20Osme%C3%B1a",
        )

    def test_open_link_uses_new_tab(self) -> None:
        with mock.patch("sinulog.links.webbrowser.open_new_tab") as opener:
            open_link("https://example.org")
        opener.assert_called_once_with("https://example.org")


if __name__ == "__main__":
    unittest.main()
