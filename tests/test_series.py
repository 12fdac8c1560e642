"""Tests for polynomial and periodic series evaluation."""

import math
import unittest

from erfacore.series import horner, series_argument, sine_cosine_series


class TestSeries(unittest.TestCase):
    """Test cases for the series helpers."""

    def test_horner(self):
        # 1 + 2t + 3t^2 at t = 2
        self.assertEqual(horner((1.0, 2.0, 3.0), 2.0), 17.0)
        self.assertEqual(horner((5.0,), 123.0), 5.0)

    def test_horner_grouping(self):
        coeffs = (0.1, 0.2, 0.3, 0.4)
        t = 0.7
        self.assertEqual(horner(coeffs, t), 0.1 + (0.2 + (0.3 + 0.4 * t) * t) * t)

    def test_series_argument(self):
        self.assertEqual(series_argument((1, -2, 0), (0.5, 0.25, 9.0)), 0.0)
        self.assertEqual(series_argument((2, 1), (0.5, 0.25)), 1.25)

    def test_sine_cosine_series(self):
        terms = (
            ((1, 0), 2.0, 0.0),
            ((0, 1), 0.0, 3.0),
        )
        args = (0.3, 0.4)
        expected = 0.5 + (0.0 * math.sin(0.4) + 3.0 * math.cos(0.4))
        expected += 2.0 * math.sin(0.3) + 0.0 * math.cos(0.3)
        self.assertEqual(sine_cosine_series(terms, args, 0.5), expected)


if __name__ == "__main__":
    unittest.main()
