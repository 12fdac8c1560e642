"""Tests for Julian date conversion functions."""

import unittest
from datetime import datetime, timedelta, timezone

import pytz

from erfacore.errors import DomainError, ErrorKind, WarningKind
from erfacore.space_time.julian import (
    DateTimeFields,
    TwoPartDate,
    besselian_epoch,
    besselian_epoch_to_date,
    d2dtf,
    datetime_to_two_part,
    dtf2d,
    julian_epoch,
    julian_epoch_to_date,
    two_part_to_datetime,
)
from erfacore.space_time.pythonic_datetimes import NaiveDateTimeError


class TestDateTimeFields(unittest.TestCase):
    """Test case for calendar date and time of day conversions."""

    def test_dtf2d_leap_second(self):
        result = dtf2d("UTC", 1994, 6, 30, 23, 59, 60.13599)
        self.assertTrue(result.ok)
        self.assertAlmostEqual(result.value.jd, 2449534.49999, delta=1e-6)

    def test_dtf2d_splits_day_and_fraction(self):
        result = dtf2d("TT", 2000, 1, 1, 12, 0, 0.0)
        self.assertEqual(result.value, TwoPartDate(2451544.5, 0.5))

    def test_dtf2d_past_end_of_day(self):
        # 60 seconds is past the end of a minute with no leap second
        result = dtf2d("UTC", 2003, 6, 1, 23, 59, 60.5)
        self.assertEqual(result.warning, WarningKind.TIME_PAST_END_OF_DAY)

    def test_dtf2d_bad_fields(self):
        cases = [
            ((24, 0, 0.0), ErrorKind.BAD_HOUR),
            ((12, 60, 0.0), ErrorKind.BAD_MINUTE),
            ((12, 0, -1.0), ErrorKind.BAD_SECOND),
        ]
        for (hour, minute, second), kind in cases:
            with self.subTest(kind=kind):
                with self.assertRaises(DomainError) as ctx:
                    dtf2d("UTC", 2003, 6, 1, hour, minute, second)
                self.assertEqual(ctx.exception.kind, kind)

    def test_dtf2d_unknown_scale(self):
        with self.assertRaises(DomainError) as ctx:
            dtf2d("GMT", 2003, 6, 1, 0, 0, 0.0)
        self.assertEqual(ctx.exception.kind, ErrorKind.UNKNOWN_TIME_SCALE)

    def test_d2dtf_leap_second(self):
        result = d2dtf("UTC", 5, (2400000.5, 49533.99999))
        self.assertEqual(result.value, DateTimeFields(1994, 6, 30, 23, 59, 60, 13599))

    def test_d2dtf_rolls_over_to_next_day(self):
        result = d2dtf("TT", 0, (2451544.5, 0.9999999))
        self.assertEqual(result.value, DateTimeFields(2000, 1, 2, 0, 0, 0, 0))

    def test_round_trip(self):
        date = dtf2d("UTC", 2006, 1, 15, 21, 24, 37.5).value
        fields = d2dtf("UTC", 3, date).value
        self.assertEqual(fields, DateTimeFields(2006, 1, 15, 21, 24, 37, 500))


class TestEpochs(unittest.TestCase):
    """Test case for Julian and Besselian epochs."""

    def test_julian_epoch(self):
        self.assertAlmostEqual(julian_epoch((2451545, -7392.5)), 1979.760438056125941, delta=1e-12)

    def test_julian_epoch_to_date(self):
        date = julian_epoch_to_date(1996.8)
        self.assertEqual(date.jd1, 2400000.5)
        self.assertAlmostEqual(date.jd2, 50375.7, delta=1e-9)

    def test_besselian_epoch(self):
        self.assertAlmostEqual(
            besselian_epoch((2415019.8135, 30103.18648)), 1982.418424159278580, delta=1e-12
        )

    def test_besselian_epoch_to_date(self):
        date = besselian_epoch_to_date(1957.3)
        self.assertEqual(date.jd1, 2400000.5)
        self.assertAlmostEqual(date.jd2, 35948.1915101513, delta=1e-9)


class TestDatetimeConversion(unittest.TestCase):
    """Test case for datetime conversions."""

    def test_datetime_to_two_part(self):
        dt = datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc)
        date = datetime_to_two_part(dt)
        self.assertEqual(date.jd1, 2460753.5)
        self.assertAlmostEqual(date.jd2, 17.0 / 24.0, places=15)

    def test_datetime_to_two_part_converts_timezone(self):
        eastern = pytz.timezone("US/Eastern")
        local = eastern.localize(datetime(2025, 3, 19, 13, 0))
        utc = datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc)
        self.assertEqual(datetime_to_two_part(local), datetime_to_two_part(utc))

    def test_naive_datetime_rejected(self):
        with self.assertRaises(NaiveDateTimeError):
            datetime_to_two_part(datetime(2025, 3, 19, 17, 0))

    def test_two_part_to_datetime(self):
        dt = two_part_to_datetime((2460753.5, 17.0 / 24.0))
        self.assertEqual(dt, datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc))

    def test_datetime_round_trip_with_microseconds(self):
        dt = datetime(2025, 3, 19, 17, 0, 0, 123456, tzinfo=timezone.utc)
        back = two_part_to_datetime(datetime_to_two_part(dt))
        self.assertLessEqual(abs(back - dt), timedelta(microseconds=1))


if __name__ == "__main__":
    unittest.main()
