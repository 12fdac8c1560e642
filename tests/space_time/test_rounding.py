"""Tests for rounding helpers."""

import unittest
from datetime import datetime, timezone

from erfacore.space_time.rounding import c_div, create_and_round_to_microsecond, dint, dnint


class TestRounding(unittest.TestCase):
    """Test cases for rounding functions."""

    def test_dnint_rounds_half_away_from_zero(self):
        self.assertEqual(dnint(2.5), 3.0)
        self.assertEqual(dnint(-2.5), -3.0)
        self.assertEqual(dnint(0.4999), 0.0)
        self.assertEqual(dnint(-0.4999), 0.0)
        self.assertEqual(dnint(3.0), 3.0)

    def test_dint_truncates(self):
        self.assertEqual(dint(2.9), 2.0)
        self.assertEqual(dint(-2.9), -2.0)
        self.assertEqual(dint(0.0), 0.0)

    def test_c_div_truncates_toward_zero(self):
        self.assertEqual(c_div(7, 2), 3)
        self.assertEqual(c_div(-7, 2), -3)
        self.assertEqual(c_div(-13, 12), -1)
        self.assertEqual(c_div(-1, 12), 0)

    def test_create_and_round_to_microsecond(self):
        """Test rounding fractional seconds to the nearest microsecond."""
        dt = create_and_round_to_microsecond(1.2345674, 0, 0, 1, 1, 2025)
        self.assertEqual(dt, datetime(2025, 1, 1, 0, 0, 1, 234567, tzinfo=timezone.utc))

        # Overflow into the next second
        dt = create_and_round_to_microsecond(0.9999996, 0, 0, 1, 1, 2025)
        self.assertEqual(dt, datetime(2025, 1, 1, 0, 0, 1, 0, tzinfo=timezone.utc))


if __name__ == "__main__":
    unittest.main()
