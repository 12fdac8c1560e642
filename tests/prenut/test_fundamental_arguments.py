"""Tests for the fundamental arguments of nutation theory."""

import unittest

from erfacore.prenut.fundamental_arguments import (
    fad03,
    fae03,
    faf03,
    faju03,
    fal03,
    falp03,
    fama03,
    fame03,
    fane03,
    faom03,
    fapa03,
    fasa03,
    faur03,
    fave03,
)


class TestFundamentalArguments(unittest.TestCase):
    """Published values at T = 0.8 Julian centuries."""

    def test_delaunay_arguments(self):
        self.assertAlmostEqual(fal03(0.80), 5.132369751108684150, delta=1e-12)
        self.assertAlmostEqual(falp03(0.80), 6.226797973505507345, delta=1e-12)
        self.assertAlmostEqual(faf03(0.80), 0.2597711366745499518, delta=1e-11)
        self.assertAlmostEqual(fad03(0.80), 1.946709205396925672, delta=1e-12)
        self.assertAlmostEqual(faom03(0.80), -5.973618440951302183, delta=1e-12)

    def test_planetary_longitudes(self):
        self.assertAlmostEqual(fame03(0.80), 5.417338184297289661, delta=1e-12)
        self.assertAlmostEqual(fave03(0.80), 3.424900460533758000, delta=1e-12)
        self.assertAlmostEqual(fae03(0.80), 1.744713738913081846, delta=1e-12)
        self.assertAlmostEqual(fama03(0.80), 3.275506840277781492, delta=1e-12)
        self.assertAlmostEqual(faju03(0.80), 5.275711665202481138, delta=1e-12)
        self.assertAlmostEqual(fasa03(0.80), 5.371574539440827046, delta=1e-12)
        self.assertAlmostEqual(faur03(0.80), 5.180636450180413523, delta=1e-12)
        self.assertAlmostEqual(fane03(0.80), 2.079343830860413523, delta=1e-12)
        self.assertAlmostEqual(fapa03(0.80), 0.1950884762240000000e-1, delta=1e-12)


if __name__ == "__main__":
    unittest.main()
