import unittest
from datetime import date, timedelta

from liftlog.domain import DayOfWeek
from liftlog.isoweek import day_of_week, iso_week, iso_week_key, thursday_of


class TestIsoWeek(unittest.TestCase):
    def test_boundary_2025_2026(self):
        """Mon 2025-12-29 and Thu 2026-01-01 share week 1 of 2026."""
        self.assertEqual(iso_week_key(date(2025, 12, 29)), "2026-W01")
        self.assertEqual(iso_week_key(date(2026, 1, 1)), "2026-W01")
        self.assertEqual(iso_week_key(date(2025, 12, 28)), "2025-W52")

    def test_early_january_in_previous_year(self):
        """Jan 1-3 2021 belong to week 53 of 2020."""
        for d in (1, 2, 3):
            self.assertEqual(iso_week_key(date(2021, 1, d)), "2020-W53")
        self.assertEqual(iso_week_key(date(2021, 1, 4)), "2021-W01")

    def test_matches_isocalendar(self):
        d = date(2014, 12, 1)
        end = date(2028, 2, 1)
        while d < end:
            cal = d.isocalendar()
            self.assertEqual(iso_week(d), (cal[0], cal[1]), d.isoformat())
            d += timedelta(days=1)

    def test_thursday_of(self):
        self.assertEqual(thursday_of(date(2025, 12, 29)), date(2026, 1, 1))
        self.assertEqual(thursday_of(date(2026, 1, 4)), date(2026, 1, 1))

    def test_day_of_week(self):
        self.assertEqual(day_of_week(date(2025, 1, 1)), DayOfWeek.Wednesday)
        self.assertEqual(day_of_week(date(2025, 1, 6)), DayOfWeek.Monday)


if __name__ == "__main__":
    unittest.main()
