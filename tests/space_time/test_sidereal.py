"""Tests for Earth rotation angle and sidereal time calculations."""

import math
import unittest
from datetime import datetime, timezone

from erfacore.constants import D2PI, DPI
from erfacore.space_time.sidereal import (
    equation_of_equinoxes,
    era00,
    gast,
    gmst00,
    gmst06,
    gmst82,
    gst06,
    gst06a,
    gst_from_equation_of_equinoxes,
    local_sidereal_time,
    sidereal_time_from_datetime,
    sidereal_time_from_julian,
)

RNPB = (
    (0.9999989440476103608, -0.1332881761240011518e-2, -0.5790767434730085097e-3),
    (0.1332858254308954453e-2, 0.9999991109044505944, -0.4097782710401555759e-4),
    (0.5791308472168153320e-3, 0.4020595661593994396e-4, 0.9999998314954572365),
)


class TestEarthRotation(unittest.TestCase):
    """Published reference values."""

    def test_era00(self):
        self.assertAlmostEqual(era00((2400000.5, 54388.0)), 0.4022837240028158102, delta=1e-12)

    def test_era00_split_independent(self):
        self.assertAlmostEqual(
            era00((2400000.5, 54388.0)), era00((54388.0, 2400000.5)), delta=1e-15
        )
        self.assertAlmostEqual(era00((2400000.5, 54388.0)), era00((2454388.5, 0.0)), delta=1e-12)

    def test_gmst82(self):
        self.assertAlmostEqual(gmst82((2400000.5, 53736.0)), 1.754174981860675096, delta=1e-12)

    def test_gmst00(self):
        ut1 = tt = (2400000.5, 53736.0)
        self.assertAlmostEqual(gmst00(ut1, tt), 1.754174972210740592, delta=1e-12)

    def test_gmst06(self):
        ut1 = tt = (2400000.5, 53736.0)
        self.assertAlmostEqual(gmst06(ut1, tt), 1.754174971870091203, delta=1e-12)

    def test_gst06(self):
        ut1 = tt = (2400000.5, 53736.0)
        self.assertAlmostEqual(gst06(ut1, tt, RNPB), 1.754166138018167568, delta=1e-12)

    def test_gmst_monotone_through_day(self):
        previous = gmst06((2451545.0, 0.0), (2451545.0, 0.0))
        advance = 0.0
        for i in range(1, 97):
            date = (2451545.0, i / 96.0)
            value = gmst06(date, date)
            step = (value - previous) % D2PI
            self.assertGreater(step, 0.0)
            self.assertLess(step, 0.1)
            advance += step
            previous = value
        # One solar day is a little more than one sidereal turn
        self.assertAlmostEqual(advance, D2PI * 1.00273781191135448, delta=1e-5)


class TestApparentSiderealTime(unittest.TestCase):
    """Test cases for apparent sidereal time and the equation of the equinoxes."""

    def test_gast_close_to_gmst(self):
        ut1 = tt = (2400000.5, 53736.0)
        ee = equation_of_equinoxes(ut1, tt)
        # Nutation in RA is at most about 1.2 seconds of time
        self.assertLess(abs(ee), 1.5 * DPI / 43200.0)
        self.assertAlmostEqual(
            gst_from_equation_of_equinoxes(gmst06(ut1, tt), ee), gast(ut1, tt), delta=1e-14
        )

    def test_gst06a(self):
        ut1 = tt = (2400000.5, 53736.0)
        self.assertAlmostEqual(gst06a(ut1, tt), 1.754166137675019159, delta=1e-12)

    def test_gast_default_is_2006_2000a(self):
        ut1 = tt = (2400000.5, 53736.0)
        self.assertEqual(gast(ut1, tt), gst06a(ut1, tt))

    def test_gast_models_agree(self):
        ut1 = tt = (2400000.5, 53736.0)
        self.assertAlmostEqual(gast(ut1, tt, "IAU2000A"), gast(ut1, tt), delta=1e-7)
        self.assertAlmostEqual(gast(ut1, tt, "IAU2000B"), gast(ut1, tt, "IAU2006/2000B"), delta=1e-7)

    def test_local_sidereal_time_wraps(self):
        self.assertAlmostEqual(local_sidereal_time(6.0, 1.0), 7.0 - D2PI, delta=1e-15)
        self.assertAlmostEqual(local_sidereal_time(0.5, -1.0), D2PI - 0.5, delta=1e-15)


class TestSiderealTime(unittest.TestCase):
    """Test cases for sidereal time calculations."""

    def test_sidereal_time_from_julian(self):
        """Test calculating sidereal time from Julian date."""
        # Astronomical Algorithms by Jean Meeus (Example 12.a), 1987 April 10, 0h UT
        jd = (2446895.5, 0.0)
        longitude = 0  # Greenwich
        lst = sidereal_time_from_julian(jd, longitude)
        # 13h 10m 46.3668s
        self.assertAlmostEqual(lst, 13.1795463, places=5)

        # At 15 degrees east, LMST should be 1 hour ahead
        lst_east = sidereal_time_from_julian(jd, 15)
        self.assertAlmostEqual(lst_east, (lst + 1) % 24, places=9)

        # At 15 degrees west, LMST should be 1 hour behind
        lst_west = sidereal_time_from_julian(jd, -15)
        self.assertAlmostEqual(lst_west, (lst - 1) % 24, places=9)

    def test_sidereal_time_from_datetime(self):
        """Test calculating sidereal time from datetime."""
        # Test case for J2000.0 epoch
        dt = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
        longitude = 0  # Greenwich
        lst = sidereal_time_from_datetime(dt, longitude)
        self.assertAlmostEqual(lst, 18.697374558, places=4)

        # At 30 degrees east, LMST should be 2 hours ahead
        lst_east = sidereal_time_from_datetime(dt, 30)
        self.assertAlmostEqual(lst_east, (lst + 2) % 24, places=9)

        # Using a longitude that would push the time beyond 24 hours
        lst_wrap = sidereal_time_from_datetime(dt, 90)  # +6 hours
        self.assertLess(lst_wrap, 24.0)
        self.assertGreaterEqual(lst_wrap, 0.0)
        self.assertAlmostEqual(lst_wrap, (lst + 6) % 24, places=9)

    def test_dut1_shifts_sidereal_time(self):
        dt = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
        lst = sidereal_time_from_datetime(dt, 0)
        shifted = sidereal_time_from_datetime(dt, 0, dut1=0.5)
        # Half a UT1 second is slightly more than half a sidereal second
        self.assertAlmostEqual((shifted - lst) * 3600.0, 0.5 * 1.00273781191135448, delta=1e-5)
        self.assertFalse(math.isnan(shifted))


if __name__ == "__main__":
    unittest.main()
