"""Tests for angular separations."""

import math
import unittest

from erfacore.vectors.separation import sepp, seps


class TestSeparation(unittest.TestCase):
    """Test cases for sepp and seps."""

    def test_sepp(self):
        self.assertAlmostEqual(
            sepp((1.0, 0.1, 0.2), (-3.0, 1e-3, 0.2)), 2.860391919024660768, delta=1e-12
        )

    def test_seps(self):
        self.assertAlmostEqual(seps(1.0, 0.1, 0.2, -3.0), 2.346722016996998842, delta=1e-14)

    def test_tiny_and_antipodal_separations(self):
        self.assertAlmostEqual(seps(0.0, 0.0, 1e-10, 0.0), 1e-10, delta=1e-20)
        self.assertAlmostEqual(seps(0.0, 0.0, math.pi, 0.0), math.pi, delta=1e-15)

    def test_null_vectors(self):
        self.assertEqual(sepp((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)), 0.0)

    def test_magnitude_independent(self):
        self.assertAlmostEqual(
            sepp((1.0, 0.1, 0.2), (-3.0, 1e-3, 0.2)),
            sepp((10.0, 1.0, 2.0), (-0.3, 1e-4, 0.02)),
            delta=1e-14,
        )


if __name__ == "__main__":
    unittest.main()
