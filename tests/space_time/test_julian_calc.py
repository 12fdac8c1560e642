"""Tests for calendar and two-part Julian Date calculations."""

import math
import unittest

from erfacore.errors import DomainError, ErrorKind
from erfacore.space_time.julian_calc import (
    CalendarDate,
    TwoPartDate,
    cal2jd,
    centuries_since_j2000,
    days_in_month,
    is_leap_year,
    jd2cal,
)


class TestTwoPartDate(unittest.TestCase):
    """Test cases for the TwoPartDate value type."""

    def test_unpacks_as_pair(self):
        jd1, jd2 = TwoPartDate(2451545.0, 0.25)
        self.assertEqual(jd1, 2451545.0)
        self.assertEqual(jd2, 0.25)

    def test_rejects_non_finite_parts(self):
        with self.assertRaises(DomainError) as ctx:
            TwoPartDate(float("nan"), 0.0)
        self.assertEqual(ctx.exception.kind, ErrorKind.NOT_FINITE)

        with self.assertRaises(DomainError):
            TwoPartDate(2451545.0, math.inf)

    def test_difference_keeps_precision(self):
        a = TwoPartDate(2451545.0, 1e-9)
        b = TwoPartDate(2451545.0, 0.0)
        self.assertEqual(a.difference(b), 1e-9)

    def test_add_days_goes_to_smaller_part(self):
        self.assertEqual(TwoPartDate(2451545.0, 0.5).add_days(0.25), TwoPartDate(2451545.0, 0.75))
        self.assertEqual(TwoPartDate(0.5, 2451545.0).add_days(0.25), TwoPartDate(0.75, 2451545.0))

    def test_normalized(self):
        date = TwoPartDate(2451544.7, 0.55).normalized()
        self.assertEqual(date.jd1, 2451545.0)
        self.assertAlmostEqual(date.jd2, 0.25, places=9)
        self.assertAlmostEqual(date.jd, 2451545.25, places=9)

    def test_jd(self):
        self.assertEqual(TwoPartDate(2400000.5, 51544.0).jd, 2451544.5)


class TestCalendar(unittest.TestCase):
    """Test cases for Gregorian calendar conversions."""

    def test_cal2jd(self):
        date = cal2jd(2003, 6, 1)
        self.assertEqual(date.jd1, 2400000.5)
        self.assertEqual(date.jd2, 52791.0)

    def test_cal2jd_j2000(self):
        self.assertEqual(cal2jd(2000, 1, 1).jd, 2451544.5)

    def test_cal2jd_rejects_bad_fields(self):
        cases = [
            ((-4800, 1, 1), ErrorKind.BAD_YEAR),
            ((2003, 13, 1), ErrorKind.BAD_MONTH),
            ((2003, 0, 1), ErrorKind.BAD_MONTH),
            ((2003, 2, 29), ErrorKind.BAD_DAY),
            ((2003, 6, 0), ErrorKind.BAD_DAY),
        ]
        for args, kind in cases:
            with self.subTest(args=args):
                with self.assertRaises(DomainError) as ctx:
                    cal2jd(*args)
                self.assertEqual(ctx.exception.kind, kind)

    def test_leap_years(self):
        self.assertTrue(is_leap_year(2000))
        self.assertTrue(is_leap_year(2024))
        self.assertFalse(is_leap_year(1900))
        self.assertFalse(is_leap_year(2023))
        self.assertEqual(days_in_month(2024, 2), 29)
        self.assertEqual(days_in_month(1900, 2), 28)
        self.assertEqual(cal2jd(2000, 2, 29).jd2 + 1.0, cal2jd(2000, 3, 1).jd2)

    def test_jd2cal(self):
        year, month, day, fraction = jd2cal((2400000.5, 50123.9999))
        self.assertEqual((year, month, day), (1996, 2, 10))
        self.assertAlmostEqual(fraction, 0.9999, delta=1e-7)

    def test_jd2cal_returns_calendar_date(self):
        result = jd2cal(TwoPartDate(2451545.0, 0.0))
        self.assertIsInstance(result, CalendarDate)
        self.assertEqual(result, CalendarDate(2000, 1, 1, 0.5))

    def test_jd2cal_split_independent(self):
        whole = jd2cal((2451545.25, 0.0))
        split = jd2cal((2451545.0, 0.25))
        reversed_split = jd2cal((0.25, 2451545.0))
        self.assertEqual(whole[:3], split[:3])
        self.assertEqual(split, reversed_split)
        self.assertAlmostEqual(whole.fraction, 0.75, places=9)

    def test_jd2cal_round_trip(self):
        for year, month, day in [(1858, 11, 17), (1972, 1, 1), (2016, 12, 31), (-4712, 1, 1)]:
            with self.subTest(date=(year, month, day)):
                result = jd2cal(cal2jd(year, month, day))
                self.assertEqual(result, CalendarDate(year, month, day, 0.0))

    def test_jd2cal_rejects_out_of_range(self):
        with self.assertRaises(DomainError) as ctx:
            jd2cal((-70000.0, 0.0))
        self.assertEqual(ctx.exception.kind, ErrorKind.JULIAN_DATE_OUT_OF_RANGE)

    def test_centuries_since_j2000(self):
        self.assertEqual(centuries_since_j2000((2451545.0, 0.0)), 0.0)
        self.assertAlmostEqual(centuries_since_j2000((2451545.0, 36525.0)), 1.0, places=15)


if __name__ == "__main__":
    unittest.main()
