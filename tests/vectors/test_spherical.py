"""Tests for spherical and Cartesian conversions."""

import math
import random
import unittest

from erfacore.vectors.pvec import pm
from erfacore.vectors.spherical import c2s, p2s, pv2s, s2c, s2p, s2pv


class TestSpherical(unittest.TestCase):
    """Test cases for spherical coordinate conversions."""

    def test_c2s(self):
        theta, phi = c2s((100.0, -50.0, 25.0))
        self.assertAlmostEqual(theta, -0.4636476090008061162, delta=1e-14)
        self.assertAlmostEqual(phi, 0.2199879773954594463, delta=1e-14)

    def test_s2c(self):
        c = s2c(3.0123, -0.999)
        self.assertAlmostEqual(c[0], -0.5366267667260523906, delta=1e-12)
        self.assertAlmostEqual(c[1], 0.6977111097651451121e-1, delta=1e-12)
        self.assertAlmostEqual(c[2], -0.8409302618566214041, delta=1e-12)

    def test_p2s(self):
        theta, phi, r = p2s((100.0, -50.0, 25.0))
        self.assertAlmostEqual(theta, -0.4636476090008061162, delta=1e-12)
        self.assertAlmostEqual(phi, 0.2199879773954594463, delta=1e-12)
        self.assertAlmostEqual(r, 114.5643923738960002, delta=1e-9)

    def test_s2p(self):
        p = s2p(-3.21, 0.123, 0.456)
        self.assertAlmostEqual(pm(p), 0.456, delta=1e-15)
        theta, phi = c2s(p)
        self.assertAlmostEqual(theta, -3.21 + 2 * math.pi, delta=1e-12)
        self.assertAlmostEqual(phi, 0.123, delta=1e-12)

    def test_null_and_polar_vectors(self):
        self.assertEqual(c2s((0.0, 0.0, 0.0)), (0.0, 0.0))
        theta, phi = c2s((0.0, 0.0, 2.0))
        self.assertEqual(theta, 0.0)
        self.assertAlmostEqual(phi, math.pi / 2, delta=1e-15)

    def test_round_trip_off_the_poles(self):
        rng = random.Random(1234)
        for _ in range(200):
            theta = rng.uniform(-math.pi + 1e-6, math.pi - 1e-6)
            phi = rng.uniform(-1.5, 1.5)
            back_theta, back_phi = c2s(s2c(theta, phi))
            self.assertAlmostEqual(back_theta, theta, delta=1e-12)
            self.assertAlmostEqual(back_phi, phi, delta=1e-12)

    def test_pv2s(self):
        pv = (
            (-0.4514964673880165, 0.03093394277342585, 0.05594668105108779),
            (1.292270850663260e-5, 2.652814182060692e-6, 2.568431853930293e-6),
        )
        theta, phi, r, td, pd, rd = pv2s(pv)
        self.assertAlmostEqual(theta, 3.073185307179586515, delta=1e-12)
        self.assertAlmostEqual(phi, 0.1229999999999999992, delta=1e-12)
        self.assertAlmostEqual(r, 0.4559999999999999757, delta=1e-12)
        self.assertAlmostEqual(td, -0.7800000000000000364e-5, delta=1e-16)
        self.assertAlmostEqual(pd, 0.9010000000000001639e-5, delta=1e-16)
        self.assertAlmostEqual(rd, -0.1229999999999999832e-4, delta=1e-16)

    def test_s2pv_round_trip(self):
        pv = s2pv(-3.21, 0.123, 0.456, -7.8e-6, 9.01e-6, -1.23e-5)
        theta, phi, r, td, pd, rd = pv2s(pv)
        self.assertAlmostEqual(theta, -3.21 + 2 * math.pi, delta=1e-12)
        self.assertAlmostEqual(phi, 0.123, delta=1e-12)
        self.assertAlmostEqual(r, 0.456, delta=1e-12)
        self.assertAlmostEqual(td, -7.8e-6, delta=1e-16)
        self.assertAlmostEqual(pd, 9.01e-6, delta=1e-16)
        self.assertAlmostEqual(rd, -1.23e-5, delta=1e-16)


if __name__ == "__main__":
    unittest.main()
