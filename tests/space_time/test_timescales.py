"""Tests for time-scale conversions."""

import unittest

from erfacore.errors import ConfigurationError, ConfigurationKind, DomainError, ErrorKind, WarningKind
from erfacore.space_time.julian_calc import TwoPartDate
from erfacore.space_time.timescales import (
    TimeScale,
    conversion_path,
    convert,
    tai_to_tt,
    tai_to_ut1,
    tai_to_utc,
    tcb_to_tdb,
    tcg_to_tt,
    tdb_to_tcb,
    tdb_to_tt,
    tt_to_tai,
    tt_to_tcg,
    tt_to_tdb,
    ut1_to_tai,
    ut1_to_utc,
    utc_to_tai,
    utc_to_ut1,
)


class TestTimeScaleConversions(unittest.TestCase):
    """Published reference values for each conversion."""

    def assertDate(self, date, jd1, jd2, delta=1e-12):
        self.assertEqual(date.jd1, jd1)
        self.assertAlmostEqual(date.jd2, jd2, delta=delta)

    def test_utc_to_tai(self):
        result = utc_to_tai((2453750.5, 0.892100694))
        self.assertDate(result.value, 2453750.5, 0.8924826384444444444)
        self.assertTrue(result.ok)

    def test_tai_to_utc(self):
        result = tai_to_utc((2453750.5, 0.892482639))
        self.assertDate(result.value, 2453750.5, 0.8921006945555555556)

    def test_tai_tt(self):
        self.assertDate(tai_to_tt((2453750.5, 0.892482639)), 2453750.5, 0.892855139)
        self.assertDate(tt_to_tai((2453750.5, 0.892482639)), 2453750.5, 0.892110139)

    def test_tai_ut1(self):
        self.assertDate(
            tai_to_ut1((2453750.5, 0.892482639), -32.6659), 2453750.5, 0.8921045614537037037
        )
        self.assertDate(
            ut1_to_tai((2453750.5, 0.892104561), -32.6659), 2453750.5, 0.8924826385462962963
        )

    def test_utc_ut1(self):
        result = utc_to_ut1((2453750.5, 0.892100694), 0.3341)
        self.assertDate(result.value, 2453750.5, 0.8921045608981481481)
        result = ut1_to_utc((2453750.5, 0.892104561), 0.3341)
        self.assertDate(result.value, 2453750.5, 0.8921006941018518519)

    def test_tt_tdb(self):
        self.assertDate(
            tt_to_tdb((2453750.5, 0.892855139), -0.000201), 2453750.5, 0.8928551366736111111
        )
        self.assertDate(
            tdb_to_tt((2453750.5, 0.892855137), -0.000201), 2453750.5, 0.8928551393263888889
        )

    def test_tdb_tcb(self):
        self.assertDate(tdb_to_tcb((2453750.5, 0.892855137)), 2453750.5, 0.8930195997253656716)
        self.assertDate(tcb_to_tdb((2453750.5, 0.893019599)), 2453750.5, 0.8928551362746343397)

    def test_tt_tcg(self):
        self.assertDate(tt_to_tcg((2453750.5, 0.892482639)), 2453750.5, 0.8924900312508587113)
        self.assertDate(tcg_to_tt((2453750.5, 0.892862531)), 2453750.5, 0.8928551387488816828)

    def test_larger_part_is_preserved(self):
        date = tai_to_tt((0.892482639, 2453750.5))
        self.assertEqual(date.jd2, 2453750.5)
        self.assertAlmostEqual(date.jd1, 0.892855139, delta=1e-12)


class TestRoundTrips(unittest.TestCase):
    """UTC/TAI round trips across the leap-second era."""

    def test_utc_tai_round_trip(self):
        for year in range(1972, 2024, 3):
            for fraction in (0.0, 0.25, 0.999):
                with self.subTest(year=year, fraction=fraction):
                    utc = TwoPartDate(2441317.5 + 365.25 * (year - 1972), fraction)
                    tai = utc_to_tai(utc).value
                    back = tai_to_utc(tai).value
                    self.assertAlmostEqual(back.difference(utc), 0.0, delta=1e-9)

    def test_leap_second_day_is_longer(self):
        # 2016-12-31 ended with a leap second.
        before = utc_to_tai((2457753.5, 0.0)).value
        after = utc_to_tai((2457754.5, 0.0)).value
        self.assertAlmostEqual(after.difference(before) * 86400.0, 86401.0, delta=1e-6)

    def test_pre_1972_warns(self):
        result = utc_to_tai((2437300.5, 0.5))
        self.assertIn(WarningKind.PREDATES_LEAP_SECOND_TABLE, result.warnings)


class TestConvert(unittest.TestCase):
    """Test cases for the routed conversion."""

    def test_from_name(self):
        self.assertIs(TimeScale.from_name("tt"), TimeScale.TT)
        self.assertIs(TimeScale.from_name(TimeScale.TCB), TimeScale.TCB)
        with self.assertRaises(DomainError) as ctx:
            TimeScale.from_name("GPS")
        self.assertEqual(ctx.exception.kind, ErrorKind.UNKNOWN_TIME_SCALE)

    def test_conversion_path(self):
        self.assertEqual(
            conversion_path(TimeScale.UTC, TimeScale.TT),
            [TimeScale.UTC, TimeScale.TAI, TimeScale.TT],
        )
        self.assertEqual(
            conversion_path(TimeScale.UT1, TimeScale.TCB),
            [TimeScale.UT1, TimeScale.UTC, TimeScale.TAI, TimeScale.TT, TimeScale.TDB, TimeScale.TCB],
        )
        self.assertEqual(conversion_path(TimeScale.TT, TimeScale.TT), [TimeScale.TT])

    def test_convert_matches_chained_calls(self):
        utc = (2453750.5, 0.892100694)
        expected = tai_to_tt(utc_to_tai(utc).value)
        result = convert(utc, "UTC", "TT")
        self.assertEqual(result.value, expected)

    def test_convert_identity(self):
        result = convert((2453750.5, 0.5), TimeScale.TDB, TimeScale.TDB)
        self.assertEqual(result.value, TwoPartDate(2453750.5, 0.5))

    def test_convert_requires_dut1(self):
        with self.assertRaises(ConfigurationError) as ctx:
            convert((2453750.5, 0.5), "UTC", "UT1")
        self.assertEqual(ctx.exception.kind, ConfigurationKind.MISSING_DUT1)

    def test_convert_requires_dtr(self):
        with self.assertRaises(ConfigurationError) as ctx:
            convert((2453750.5, 0.5), "TT", "TCB")
        self.assertEqual(ctx.exception.kind, ConfigurationKind.MISSING_DTR)

    def test_tai_to_ut1_needs_only_dut1(self):
        with self.assertRaises(ConfigurationError) as ctx:
            convert((2453750.5, 0.5), "TAI", "UT1")
        self.assertEqual(ctx.exception.kind, ConfigurationKind.MISSING_DUT1)

    def test_every_configuration_kind_is_reachable(self):
        self.assertEqual(
            set(ConfigurationKind), {ConfigurationKind.MISSING_DUT1, ConfigurationKind.MISSING_DTR}
        )

    def test_convert_with_offsets(self):
        result = convert((2453750.5, 0.892100694), "UTC", "UT1", dut1=0.3341)
        self.assertAlmostEqual(result.value.jd2, 0.8921045608981481481, delta=1e-12)

        tcb = convert((2453750.5, 0.892855139), "TT", "TCB", dtr=-0.000201).value
        back = convert(tcb, "TCB", "TT", dtr=-0.000201).value
        self.assertAlmostEqual(back.jd2, 0.892855139, delta=1e-12)


if __name__ == "__main__":
    unittest.main()
