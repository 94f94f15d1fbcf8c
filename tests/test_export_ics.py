import tempfile
import unittest
from pathlib import Path

from sinulog.export_ics import export_rows_to_ics
from sinulog.model import EventRow


class TestExportICS(unittest.TestCase):
    def test_export_creates_file_and_contains_calendar(self) -> None:
        rows = [
            EventRow("Sinulog Grand Parade", "[9:00 AM, SRP]", "january 19, 2025"),
            EventRow("Street Party", "[8:00 PM, Fuente Osmeña & Mango Avenue]", "january 18, 2025"),
        ]

        with tempfile.TemporaryDirectory() as d:
            out = Path(d) / "out.ics"
            n = export_rows_to_ics(rows, out)
            self.assertEqual(n, 2)
            text = out.read_text(encoding="utf-8")
            self.assertIn("BEGIN:VCALENDAR", text)
            self.assertEqual(text.count("BEGIN:VEVENT"), 2)
            self.assertIn("SUMMARY:Sinulog Grand Parade", text)
            # 09:00 UTC+8 -> 01:00 UTC, two hours
            self.assertIn("DTSTART:20250119T010000Z", text)
            self.assertIn("DTEND:20250119T030000Z", text)
            self.assertIn("LOCATION:Fuente Osmeña\\, Mango Avenue", text)
            # ICS lines end in CRLF; read_text would fold them into \n
            raw = out.read_bytes()
            self.assertIn(b"\r\n", raw)
            self.assertEqual(raw.count(b"\n"), raw.count(b"\r\n"))

    def test_rows_without_time_are_skipped(self) -> None:
        rows = [
            EventRow("Mystery", "[TBA, SRP]", "january 19, 2025"),
            EventRow("Parade", "[9:00 AM, SRP]", "january 19, 2025"),
        ]

        with tempfile.TemporaryDirectory() as d:
            out = Path(d) / "nested" / "out.ics"
            with self.assertLogs("sinulog.export_ics", level="WARNING"):
                n = export_rows_to_ics(rows, out)
            self.assertEqual(n, 1)
            self.assertNotIn("SUMMARY:Mystery", out.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
