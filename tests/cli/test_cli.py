"""Tests for the erfacore CLI commands."""

import json
import unittest

import click
from click.testing import CliRunner

from erfacore.cli import cli
from erfacore.cli.common import parse_date_input
from erfacore.cli.sidereal import format_hours
from erfacore.errors import WarningKind
from erfacore.space_time.julian_calc import TwoPartDate
from erfacore.space_time.timescales import TimeScale


class TestParseDateInput(unittest.TestCase):
    """Test cases for date argument parsing."""

    def test_julian_date(self):
        date = parse_date_input("2453750.892100694")
        self.assertIsInstance(date, TwoPartDate)
        self.assertEqual(date, TwoPartDate(2453750.892100694, 0.0))

    def test_two_part_pair(self):
        date = parse_date_input("2453750.5+0.892100694")
        self.assertEqual(date, TwoPartDate(2453750.5, 0.892100694))

    def test_iso_calendar(self):
        date = parse_date_input("2006-01-15T21:24:37.5")
        self.assertEqual(date.jd1, 2453750.5)
        self.assertAlmostEqual(date.jd2, 0.8921006944444444444, delta=1e-12)

    def test_timezone_offset_applied(self):
        local = parse_date_input("2006-01-15T16:24:37.5-05:00")
        utc = parse_date_input("2006-01-15T21:24:37.5")
        self.assertEqual(local, utc)

    def test_date_only(self):
        date = parse_date_input("2006-01-15", TimeScale.TT)
        self.assertEqual(date, TwoPartDate(2453750.5, 0.0))

    def test_now(self):
        date = parse_date_input("now")
        self.assertGreater(date.jd1 + date.jd2, 2460000.0)

    def test_invalid(self):
        with self.assertRaises(click.BadParameter):
            parse_date_input("not a date")


class TestCliGroup(unittest.TestCase):
    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("erfacore", result.output)

    def test_quiet_flag(self):
        result = CliRunner().invoke(cli, ["--quiet", "leap-seconds", "1972-01-01"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("TAI-UTC: 10.0000000 s", result.output)


class TestConvertCommand(unittest.TestCase):
    """Test cases for the convert command."""

    def setUp(self):
        self.runner = CliRunner()

    def test_utc_to_tt_text(self):
        result = self.runner.invoke(cli, ["convert", "2006-01-15T21:24:37.5"])
        self.assertEqual(result.exit_code, 0, result.output)
        lines = result.output.splitlines()
        self.assertTrue(lines[0].startswith("TT: "))
        # 33 s of TAI-UTC plus 32.184 s of TT-TAI.
        self.assertEqual(lines[1], "2006-01-15 21:25:42.684000")

    def test_utc_to_tt_json(self):
        result = self.runner.invoke(
            cli, ["convert", "2006-01-15T21:24:37.5", "--format", "json"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertEqual(data["scale"], "TT")
        self.assertEqual(data["warnings"], [])
        expected = 2453750.5 + 0.8921006944444444444 + 65.184 / 86400.0
        self.assertAlmostEqual(data["jd1"] + data["jd2"], expected, delta=1e-9)

    def test_ut1_requires_dut1(self):
        result = self.runner.invoke(
            cli, ["convert", "2453750.5+0.892100694", "--to", "UT1"]
        )
        self.assertEqual(result.exit_code, 2)

    def test_ut1_with_dut1(self):
        result = self.runner.invoke(
            cli,
            ["convert", "2006-01-15T21:24:37.5", "--to", "ut1", "--dut1", "0.3341"],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("2006-01-15 21:24:37.834100", result.output)


class TestLeapSecondsCommand(unittest.TestCase):
    def test_current_value(self):
        result = CliRunner().invoke(cli, ["leap-seconds", "2017-01-01"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("TAI-UTC: 37.0000000 s", result.output)

    def test_invalid_date(self):
        result = CliRunner().invoke(cli, ["leap-seconds", "someday"])
        self.assertNotEqual(result.exit_code, 0)


class TestCalendarCommand(unittest.TestCase):
    def test_leap_second(self):
        result = CliRunner().invoke(
            cli, ["calendar", "2400000.5", "49533.99999", "--ndp", "5"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("1994-06-30 23:59:60.13599", result.output)
        self.assertIn("Fraction of day:", result.output)

    def test_whole_seconds(self):
        result = CliRunner().invoke(cli, ["calendar", "2451545.0", "--ndp", "0"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("2000-01-01 12:00:00", result.output)


class TestSiderealCommand(unittest.TestCase):
    def test_greenwich(self):
        result = CliRunner().invoke(cli, ["sidereal", "2006-01-15T21:24:37.5"])
        self.assertEqual(result.exit_code, 0, result.output)
        values = dict(line.split(":", 1) for line in result.output.splitlines())
        self.assertEqual(set(values), {"ERA", "GMST", "GAST", "LMST", "LAST"})
        self.assertEqual(values["LMST"], values["GMST"])
        self.assertEqual(values["LAST"], values["GAST"])

    def test_longitude(self):
        result = CliRunner().invoke(
            cli, ["sidereal", "2006-01-15T21:24:37.5", "--longitude", "90"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        values = dict(line.split(":", 1) for line in result.output.splitlines())
        self.assertNotEqual(values["LMST"], values["GMST"])

    def test_pre_leap_second_date_warns_once(self):
        # 1965-01-01 as a Julian Date pair, so only the sidereal step can warn
        result = CliRunner().invoke(cli, ["sidereal", "2438761.5+0.25"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            result.output.count(WarningKind.PREDATES_LEAP_SECOND_TABLE.value), 1, result.output
        )
        values = dict(
            line.split(":", 1)
            for line in result.output.splitlines()
            if not line.startswith("Warning")
        )
        self.assertEqual(set(values), {"ERA", "GMST", "GAST", "LMST", "LAST"})

    def test_format_hours(self):
        self.assertEqual(format_hours(0.0), "00h00m00.000s")
        self.assertEqual(format_hours(3.14159265358979323846), "12h00m00.000s")


if __name__ == "__main__":
    unittest.main()
