"""Tests for angle normalization and sexagesimal conversion."""

import math
import unittest

from erfacore.angles import (
    AngleRange,
    Sexagesimal,
    a2af,
    a2tf,
    af2a,
    anp,
    anpm,
    d2tf,
    normalize_angle,
    tf2a,
    tf2d,
)
from erfacore.errors import DomainError, ErrorKind


class TestNormalization(unittest.TestCase):
    """Test cases for angle normalization."""

    def test_anp(self):
        self.assertAlmostEqual(anp(-0.1), 6.183185307179586477, delta=1e-12)
        self.assertEqual(anp(0.0), 0.0)
        self.assertLess(anp(2 * math.pi), 2 * math.pi)

    def test_anpm(self):
        self.assertAlmostEqual(anpm(-4.0), 2.283185307179586477, delta=1e-12)
        self.assertAlmostEqual(anpm(4.0), 4.0 - 2 * math.pi, delta=1e-15)
        self.assertEqual(anpm(1.0), 1.0)

    def test_anpm_range(self):
        for a in (-10.0, -3.0, 0.0, 3.0, 10.0, 100.0):
            with self.subTest(a=a):
                w = anpm(a)
                self.assertGreaterEqual(w, -math.pi)
                self.assertLess(w, math.pi)

    def test_anpm_at_pi(self):
        self.assertEqual(anpm(math.pi), -math.pi)
        self.assertEqual(anpm(-math.pi), math.pi)

    def test_normalize_angle(self):
        self.assertEqual(normalize_angle(-0.1), anp(-0.1))
        self.assertEqual(normalize_angle(-4.0, AngleRange.MINUS_PI_TO_PI), anpm(-4.0))

    def test_normalize_angle_half_turn(self):
        # The signed range is half-open at -pi, whatever the sign of the input
        self.assertEqual(normalize_angle(math.pi, AngleRange.MINUS_PI_TO_PI), math.pi)
        self.assertEqual(normalize_angle(-math.pi, AngleRange.MINUS_PI_TO_PI), math.pi)
        self.assertEqual(normalize_angle(3 * math.pi, AngleRange.MINUS_PI_TO_PI), math.pi)
        self.assertEqual(anpm(math.pi), -math.pi)

    def test_normalize_angle_unknown_range(self):
        with self.assertRaises(DomainError) as ctx:
            normalize_angle(1.0, "-180..180")
        self.assertEqual(ctx.exception.kind, ErrorKind.UNKNOWN_ANGLE_RANGE)


class TestSexagesimal(unittest.TestCase):
    """Test cases for sexagesimal decomposition and composition."""

    def test_d2tf(self):
        self.assertEqual(d2tf(4, -0.987654321), Sexagesimal("-", 23, 42, 13, 3333))

    def test_a2tf(self):
        self.assertEqual(a2tf(4, -3.01234), Sexagesimal("-", 11, 30, 22, 6484))

    def test_a2af(self):
        self.assertEqual(a2af(4, 2.345), Sexagesimal("+", 134, 21, 30, 9706))

    def test_d2tf_coarse_resolution(self):
        # Rounded to the nearest 10 minutes
        self.assertEqual(d2tf(-3, 0.5 + 6.0 / 1440.0), Sexagesimal("+", 12, 10, 0, 0))

    def test_d2tf_rounds_up_to_24h(self):
        self.assertEqual(d2tf(0, 0.9999999), Sexagesimal("+", 24, 0, 0, 0))

    def test_tf2a(self):
        self.assertAlmostEqual(tf2a("+", 4, 58, 20.2), 1.301739278189537429, delta=1e-12)

    def test_tf2d(self):
        self.assertAlmostEqual(tf2d(" ", 23, 55, 10.9), 0.9966539351851851852, delta=1e-12)

    def test_af2a(self):
        self.assertAlmostEqual(af2a("-", 45, 13, 27.2), -0.7893115794313644842, delta=1e-12)

    def test_round_trip(self):
        sign, h, m, s, frac = a2tf(6, 1.301739278189537429)
        self.assertAlmostEqual(tf2a(sign, h, m, s + frac / 1e6), 1.301739278189537429, delta=1e-11)

    def test_field_errors(self):
        cases = [
            (lambda: tf2a("+", 24, 0, 0.0), ErrorKind.BAD_HOUR),
            (lambda: tf2a("+", 1, 60, 0.0), ErrorKind.BAD_MINUTE),
            (lambda: tf2d("+", 1, 0, 60.0), ErrorKind.BAD_SECOND),
            (lambda: af2a("+", 360, 0, 0.0), ErrorKind.BAD_DEGREES),
            (lambda: af2a("+", 1, 60, 0.0), ErrorKind.BAD_ARCMINUTES),
            (lambda: af2a("+", 1, 0, -0.5), ErrorKind.BAD_ARCSECONDS),
        ]
        for call, kind in cases:
            with self.subTest(kind=kind):
                with self.assertRaises(DomainError) as ctx:
                    call()
                self.assertEqual(ctx.exception.kind, kind)


if __name__ == "__main__":
    unittest.main()
