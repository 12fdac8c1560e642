"""Tests for star catalog space motion."""

import math
import unittest

from erfacore.errors import DomainError, ErrorKind, WarningKind
from erfacore.catalog.space_motion import (
    CatalogEntry,
    pmpx,
    pmsafe,
    propagate_to_true_of_date,
    pvstar,
    starpm,
    starpv,
)
from erfacore.prenut.bias_precession_nutation import bias_precession_nutation_matrix
from erfacore.vectors.matrices import rxp
from erfacore.vectors.spherical import c2s, s2c

# Barnard's star style test case
STAR = CatalogEntry(0.01686756, -1.093989828, -1.78323516e-5, 2.336024047e-6, 0.74723, -21.6)


class TestStarpv(unittest.TestCase):
    """Test cases for catalog to pv-vector conversion."""

    def test_starpv(self):
        result = starpv(*STAR)
        self.assertTrue(result.ok)
        (x, y, z), (xd, yd, zd) = result.value
        self.assertAlmostEqual(x, 126668.5912743160601, delta=1e-8)
        self.assertAlmostEqual(y, 2136.792716839935195, delta=1e-10)
        self.assertAlmostEqual(z, -245251.2339876830091, delta=1e-8)
        self.assertAlmostEqual(xd, -0.4051854008955659551e-2, delta=1e-13)
        self.assertAlmostEqual(yd, -0.6253919754414777970e-2, delta=1e-15)
        self.assertAlmostEqual(zd, 0.1189353714588109341e-1, delta=1e-13)

    def test_radial_velocity_preserved(self):
        (x, y, z), (xd, yd, zd) = starpv(*STAR).value
        r = math.sqrt(x * x + y * y + z * z)
        radial_au_per_day = (x * xd + y * yd + z * zd) / r
        radial_km_per_s = radial_au_per_day * 149597870.7 / 86400.0
        # The relativistic correction is tens of metres per second at most
        self.assertAlmostEqual(radial_km_per_s, STAR.rv, delta=0.05)
        self.assertLess(abs(xd), 0.1)

    def test_pure_radial_motion(self):
        result = starpv(0.0, 0.0, 0.0, 0.0, 0.5, 30.0)
        (x, y, z), (xd, yd, zd) = result.value
        self.assertGreater(x, 0.0)
        self.assertAlmostEqual(xd * 149597870.7 / 86400.0, 30.0, delta=0.01)
        self.assertAlmostEqual(yd, 0.0, delta=1e-18)
        self.assertAlmostEqual(zd, 0.0, delta=1e-18)

    def test_tiny_parallax_overridden(self):
        result = starpv(0.1, 0.2, 0.0, 0.0, 0.0, 0.0)
        self.assertEqual(result.warning, WarningKind.DISTANCE_OVERRIDDEN)
        r = math.sqrt(sum(c * c for c in result.value[0]))
        self.assertAlmostEqual(r, 206264.80624709636 / 1e-7, delta=1.0)

    def test_excessive_speed_zeroed(self):
        result = starpv(0.1, 0.2, 0.0, 0.0, 1.0, 200000.0)
        self.assertIn(WarningKind.EXCESSIVE_SPEED, result.warnings)
        self.assertEqual(result.value[1], (0.0, 0.0, 0.0))


class TestPvstar(unittest.TestCase):
    """Test cases for pv-vector to catalog conversion."""

    def test_pvstar(self):
        pv = (
            (126668.5912743160601, 2136.792716839935195, -245251.2339876830091),
            (-0.4051854035740712739e-2, -0.6253919754866173866e-2, 0.1189353719774107189e-1),
        )
        ra, dec, pmr, pmd, px, rv = pvstar(pv)
        self.assertAlmostEqual(ra, 0.1686756e-1, delta=1e-12)
        self.assertAlmostEqual(dec, -1.093989828, delta=1e-12)
        self.assertAlmostEqual(pmr, -0.1783235160000472788e-4, delta=1e-16)
        self.assertAlmostEqual(pmd, 0.2336024047000619347e-5, delta=1e-16)
        self.assertAlmostEqual(px, 0.74723, delta=1e-12)
        self.assertAlmostEqual(rv, -21.60000010107306010, delta=1e-11)

    def test_round_trip(self):
        entry = pvstar(starpv(*STAR).value)
        for actual, expected in zip(entry, STAR):
            self.assertAlmostEqual(actual, expected, delta=abs(expected) * 1e-6 + 1e-12)

    def test_superluminal(self):
        pv = ((1.0, 0.0, 0.0), (-200.0, 0.0, 0.0))
        with self.assertRaises(DomainError) as ctx:
            pvstar(pv)
        self.assertEqual(ctx.exception.kind, ErrorKind.SUPERLUMINAL)

    def test_null_position(self):
        with self.assertRaises(DomainError) as ctx:
            pvstar(((0.0, 0.0, 0.0), (0.0, 0.0, 0.0)))
        self.assertEqual(ctx.exception.kind, ErrorKind.NULL_POSITION)


class TestPropagation(unittest.TestCase):
    """Test cases for starpm and pmsafe."""

    def test_starpm(self):
        result = starpm(STAR, (2400000.5, 50083.0), (2400000.5, 53736.0))
        self.assertTrue(result.ok)
        ra, dec, pmr, pmd, px, rv = result.value
        self.assertAlmostEqual(ra, 0.01668919069414256149, delta=1e-13)
        self.assertAlmostEqual(dec, -1.093966454217127897, delta=1e-13)
        self.assertAlmostEqual(pmr, -0.1783662682153176524e-4, delta=1e-17)
        self.assertAlmostEqual(pmd, 0.2338092915983989595e-5, delta=1e-17)
        self.assertAlmostEqual(px, 0.7473533835317719243, delta=1e-13)
        self.assertAlmostEqual(rv, -21.59905170476417175, delta=1e-11)

    def test_starpm_zero_interval(self):
        result = starpm(STAR, (2400000.5, 50083.0), (2400000.5, 50083.0))
        for actual, expected in zip(result.value, STAR):
            self.assertAlmostEqual(actual, expected, delta=abs(expected) * 1e-6 + 1e-12)

    def test_pmsafe(self):
        entry = CatalogEntry(1.234, 0.789, 1e-5, -2e-5, 1e-2, 10.0)
        result = pmsafe(entry, (2400000.5, 48348.5625), (2400000.5, 51544.5))
        self.assertTrue(result.ok)
        ra, dec, pmr, pmd, px, rv = result.value
        self.assertAlmostEqual(ra, 1.234087484501017061, delta=1e-12)
        self.assertAlmostEqual(dec, 0.7888249982450468567, delta=1e-12)
        self.assertAlmostEqual(pmr, 0.9996457663586073988e-5, delta=1e-12)
        self.assertAlmostEqual(pmd, -0.2000040085106754565e-4, delta=1e-16)
        self.assertAlmostEqual(px, 0.9999997295356830666e-2, delta=1e-12)
        self.assertAlmostEqual(rv, 10.38468380293920069, delta=1e-10)

    def test_pmsafe_overrides_zero_parallax(self):
        entry = CatalogEntry(1.234, 0.789, 1e-5, -2e-5, 0.0, 0.0)
        result = pmsafe(entry, (2400000.5, 48348.5625), (2400000.5, 51544.5))
        self.assertEqual(result.warnings, (WarningKind.PARALLAX_OVERRIDDEN,))
        self.assertGreater(result.value.px, 0.0)

    def test_pmpx(self):
        pco = pmpx(1.234, 0.789, 1e-5, -2e-5, 1e-2, 10.0, 8.75, (0.9, 0.4, 0.1))
        self.assertAlmostEqual(pco[0], 0.2328137623960308438, delta=1e-12)
        self.assertAlmostEqual(pco[1], 0.6651097085397855328, delta=1e-12)
        self.assertAlmostEqual(pco[2], 0.7095257765896359837, delta=1e-12)

    def test_propagate_to_true_of_date(self):
        entry = CatalogEntry(1.234, 0.789, 1e-5, -2e-5, 1e-2, 10.0)
        ep1 = (2400000.5, 51544.5)
        tt = (2400000.5, 60000.0)
        result = propagate_to_true_of_date(entry, ep1, tt)
        self.assertTrue(result.ok)

        moved = pmsafe(entry, ep1, tt).value
        expected = c2s(rxp(bias_precession_nutation_matrix(tt), s2c(moved.ra, moved.dec)))
        ra, dec = result.value
        self.assertAlmostEqual(ra, expected[0] % (2 * math.pi), delta=1e-14)
        self.assertAlmostEqual(dec, expected[1], delta=1e-14)

        # Precession over ~23 years moves the place by roughly 20 arcmin
        self.assertGreater(abs(ra - moved.ra), 1e-3)


if __name__ == "__main__":
    unittest.main()
