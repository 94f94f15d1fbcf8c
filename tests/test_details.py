import unittest

from sinulog.details import detail_fields, format_detail, parse_detail


class TestParseDetail(unittest.TestCase):
    def test_time_and_two_places(self) -> None:
        result = parse_detail("[7:00 AM, Fuente Osmeña & Plaza Independencia]")

        self.assertTrue(result.ok)
        self.assertEqual(result.time, "7:00 AM")
        self.assertEqual(result.locations, ["Fuente Osmeña", "Plaza Independencia"])

    def test_single_place(self) -> None:
        result = parse_detail("[7:00 AM, Basilica del Sto. Nino]")
        self.assertEqual(result.time, "7:00 AM")
        self.assertEqual(result.locations, ["Basilica del Sto. Nino"])

    def test_list_uses_first_entry(self) -> None:
        result = parse_detail(["[4:00 AM, Basilica del Sto. Nino]", "[6:00 AM, SRP]"])
        self.assertEqual(result.time, "4:00 AM")
        self.assertEqual(result.locations, ["Basilica del Sto. Nino"])

    def test_time_only(self) -> None:
        result = parse_detail("[TBA]")
        self.assertTrue(result.ok)
        self.assertEqual(result.time, "TBA")
        self.assertEqual(result.locations, [])

    def test_empty_string(self) -> None:
        result = parse_detail("")
        self.assertTrue(result.ok)
        self.assertEqual(result.time, "")
        self.assertEqual(result.locations, [])

    def test_non_string_is_a_failed_result(self) -> None:
        result = parse_detail(42)
        self.assertFalse(result.ok)
        self.assertEqual(result.time, "")
        self.assertEqual(result.locations, [])
        self.assertIn("int", result.error or "")

    def test_detail_fields_logs_failures(self) -> None:
        with self.assertLogs("sinulog.details", level="ERROR"):
            result = detail_fields(None)
        self.assertEqual(result.time, "")
        self.assertEqual(result.locations, [])


class TestFormatDetail(unittest.TestCase):
    def test_strips_brackets_only(self) -> None:
        self.assertEqual(
            format_detail("[7:00 AM, Fuente Osmeña & Plaza Independencia]"),
            "7:00 AM, Fuente Osmeña & Plaza Independencia",
        )

    def test_list_and_none(self) -> None:
        self.assertEqual(format_detail(["[9:00 AM, SRP]", "[1:00 PM, SRP]"]), "9:00 AM, SRP")
        self.assertEqual(format_detail(None), "")


if __name__ == "__main__":
    unittest.main()
