import math
import unittest

from erfacore.observer import ae2hd, hd2ae, hd2pa


class TestHorizon(unittest.TestCase):
    def test_hd2ae(self):
        az, el = hd2ae(1.1, 1.2, 0.3)
        self.assertAlmostEqual(az, 5.916889243730066194, delta=1e-13)
        self.assertAlmostEqual(el, 0.4472186304990486228, delta=1e-14)

    def test_ae2hd(self):
        ha, dec = ae2hd(5.5, 1.1, 0.7)
        self.assertAlmostEqual(ha, 0.5933291115507309663, delta=1e-14)
        self.assertAlmostEqual(dec, 0.9613934761647817620, delta=1e-14)

    def test_azimuth_range(self):
        for ha in (-3.0, -1.0, 0.5, 2.5):
            az, _ = hd2ae(ha, 0.2, 0.6)
            self.assertGreaterEqual(az, 0.0)
            self.assertLess(az, 2 * math.pi)

    def test_round_trip(self):
        ha, dec = ae2hd(*hd2ae(-0.8, 0.3, 0.9), 0.9)
        self.assertAlmostEqual(ha, -0.8, delta=1e-12)
        self.assertAlmostEqual(dec, 0.3, delta=1e-12)

    def test_meridian(self):
        # Object transiting south of the zenith.
        az, el = hd2ae(0.0, 0.1, 0.5)
        self.assertAlmostEqual(az, math.pi, delta=1e-15)
        self.assertAlmostEqual(el, math.pi / 2 - 0.4, delta=1e-15)

    def test_hd2pa(self):
        self.assertAlmostEqual(hd2pa(1.1, 1.2, 0.3), 1.906227428001995580, delta=1e-13)

    def test_hd2pa_zenith(self):
        self.assertEqual(hd2pa(0.0, 0.5, 0.5), 0.0)

    def test_hd2pa_meridian(self):
        self.assertEqual(hd2pa(0.0, 0.3, 0.5), 0.0)


if __name__ == "__main__":
    unittest.main()
