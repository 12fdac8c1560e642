"""Tests for the IAU 2000A and 2000B nutation series."""

import unittest

from erfacore.prenut import iau2000a_terms
from erfacore.prenut.nutation import LUNI_SOLAR_TERMS, nut00a, nut00b, nut06a


class TestNutation(unittest.TestCase):
    """Test cases for nut00b."""

    def test_nut00b(self):
        dpsi, deps = nut00b((2400000.5, 53736.0))
        self.assertAlmostEqual(dpsi, -0.9632552291148362783e-5, delta=1e-13)
        self.assertAlmostEqual(deps, 0.4063197106621159367e-4, delta=1e-13)

    def test_series_size(self):
        self.assertEqual(len(LUNI_SOLAR_TERMS), 77)

    def test_split_independent(self):
        a = nut00b((2400000.5, 53736.0))
        b = nut00b((53736.0, 2400000.5))
        self.assertAlmostEqual(a[0], b[0], delta=1e-18)
        self.assertAlmostEqual(a[1], b[1], delta=1e-18)

    def test_amplitude_bounds(self):
        # About 20 arcsec in longitude and 10 in obliquity
        for mjd in range(40000, 70000, 997):
            dpsi, deps = nut00b((2400000.5, float(mjd)))
            self.assertLess(abs(dpsi), 1.2e-4)
            self.assertLess(abs(deps), 0.6e-4)


class TestNutation2000A(unittest.TestCase):
    """Test cases for the full IAU 2000A series and its 2006 adjustment."""

    def test_nut00a(self):
        dpsi, deps = nut00a((2400000.5, 53736.0))
        self.assertAlmostEqual(dpsi, -0.9630909107115518431e-5, delta=1e-13)
        self.assertAlmostEqual(deps, 0.4063239174001678710e-4, delta=1e-13)

    def test_nut06a(self):
        dpsi, deps = nut06a((2400000.5, 53736.0))
        self.assertAlmostEqual(dpsi, -0.9630912025820308797e-5, delta=1e-13)
        self.assertAlmostEqual(deps, 0.4063238496887249798e-4, delta=1e-13)

    def test_series_sizes(self):
        self.assertEqual(len(iau2000a_terms.LUNI_SOLAR_TERMS), 678)
        self.assertEqual(len(iau2000a_terms.PLANETARY_TERMS), 687)

    def test_2000b_leading_terms_shared(self):
        # 2000B keeps the 77 largest luni-solar terms of 2000A unchanged
        self.assertEqual(tuple(iau2000a_terms.LUNI_SOLAR_TERMS[:77]), tuple(LUNI_SOLAR_TERMS))

    def test_2000b_close_to_2000a(self):
        mas = 4.848136811095359935899141e-9
        for mjd in (50000.0, 51544.5, 55000.0, 58000.0):
            with self.subTest(mjd=mjd):
                a = nut00a((2400000.5, mjd))
                b = nut00b((2400000.5, mjd))
                self.assertLess(abs(a[0] - b[0]), 2 * mas)
                self.assertLess(abs(a[1] - b[1]), 2 * mas)

    def test_nut06a_scales_nut00a(self):
        tt = (2400000.5, 53736.0)
        dp, de = nut00a(tt)
        dpsi, deps = nut06a(tt)
        t = (2400000.5 + 53736.0 - 2451545.0) / 36525.0
        fj2 = -2.7774e-6 * t
        self.assertAlmostEqual(dpsi / dp, 1.0 + 0.4697e-6 + fj2, delta=1e-12)
        self.assertAlmostEqual(deps / de, 1.0 + fj2, delta=1e-12)


if __name__ == "__main__":
    unittest.main()
