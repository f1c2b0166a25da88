"""
Unit tests for the set-cell codec.
Run: python -m pytest backend/tests/test_codec.py -v
"""
import unittest

from liftlog.ingest.codec import build_sets, format_set_value, parse_set_value


class TestParseSetValue(unittest.TestCase):
    def test_weight_and_reps_variants(self):
        """kg suffix optional, comma or space separated, any case."""
        for text in ("70kg, 5", "70kg,5", "70kg 5", "70KG, 5", "70 kg , 5", "70, 5", "70,5", "  70kg, 5  "):
            with self.subTest(text=text):
                self.assertEqual(parse_set_value(text), (70.0, 5))

    def test_fractional_weight(self):
        self.assertEqual(parse_set_value("72.5kg, 3"), (72.5, 3))

    def test_bare_integer_is_bodyweight(self):
        """A lone number is reps against body weight."""
        parsed = parse_set_value("10")
        self.assertEqual(parsed.weight, 0)
        self.assertEqual(parsed.reps, 10)

    def test_unparseable_is_none(self):
        """Stray text means no set, never an error."""
        for text in ("", "   ", None, "abc", "-5, 3", "70kg", "70.5", "5 reps", "70kg, 5.5", "kg, 5"):
            with self.subTest(text=text):
                self.assertIsNone(parse_set_value(text))


class TestFormatSetValue(unittest.TestCase):
    def test_weighted(self):
        self.assertEqual(format_set_value(70, 5), "70kg, 5")
        self.assertEqual(format_set_value(70.0, 5), "70kg, 5")
        self.assertEqual(format_set_value(72.5, 3), "72.5kg, 3")

    def test_bodyweight(self):
        self.assertEqual(format_set_value(0, 10), "10")

    def test_round_trip(self):
        """parse(format(w, r)) gives back (w, r)."""
        for w in (0, 2.5, 20, 70, 72.5, 100.25, 142.5):
            for r in (0, 1, 5, 12):
                with self.subTest(w=w, r=r):
                    self.assertEqual(parse_set_value(format_set_value(w, r)), (w, r))

    def test_tiny_and_huge_weights_stay_positional(self):
        self.assertEqual(format_set_value(0.00001, 5), "0.00001kg, 5")
        self.assertEqual(format_set_value(1e16, 1), "10000000000000000kg, 1")
        for w in (0.00001, 0.005, 1e16):
            with self.subTest(w=w):
                self.assertEqual(parse_set_value(format_set_value(w, 5)), (w, 5))

    def test_decimal_from_numeric_column(self):
        from decimal import Decimal

        self.assertEqual(format_set_value(Decimal("80.00"), 5), "80kg, 5")
        self.assertEqual(format_set_value(Decimal("72.50"), 3), "72.5kg, 3")

    def test_accepted_variant_is_canonicalised(self):
        p = parse_set_value("70,3")
        self.assertEqual(format_set_value(p.weight, p.reps), "70kg, 3")


class TestBuildSets(unittest.TestCase):
    def test_warmup_and_positions(self):
        """Warmup is set 0; working sets keep their column number even with gaps."""
        sets = build_sets("40kg, 10", ["80kg, 5", "", "75kg, 6", "junk"])
        self.assertEqual([(s.set_number, s.is_warmup) for s in sets], [(0, True), (1, False), (3, False)])
        self.assertEqual((sets[2].weight, sets[2].reps), (75.0, 6))

    def test_nothing_logged(self):
        self.assertEqual(build_sets(None, [None, "", "-", "x"]), [])


if __name__ == "__main__":
    unittest.main()
