"""Tests for frame bias, precession and obliquity."""

import unittest

import numpy as np

from erfacore.prenut.precession import (
    BiasPrecession,
    bi00,
    bp00,
    bp06,
    fw2m,
    numat,
    obl06,
    obl80,
    p06e,
    pfw06,
    pmat06,
    pmat76,
    pr00,
    prec76,
)


class MatrixAssertions:
    def assertMatrixAlmostEqual(self, actual, expected, delta):
        for i in range(3):
            for j in range(3):
                self.assertAlmostEqual(actual[i][j], expected[i][j], delta=delta, msg=f"[{i}][{j}]")

    def assertRotation(self, r, tolerance=1e-10):
        m = np.array(r)
        self.assertLess(np.abs(m @ m.T - np.eye(3)).max(), tolerance)
        self.assertAlmostEqual(np.linalg.det(m), 1.0, delta=tolerance)


class TestObliquity(unittest.TestCase):
    """Test cases for the mean obliquity models."""

    def test_obl80(self):
        self.assertAlmostEqual(obl80((2400000.5, 54388.0)), 0.4090751347643816218, delta=1e-14)

    def test_obl06(self):
        self.assertAlmostEqual(obl06((2400000.5, 54388.0)), 0.4090749229387258204, delta=1e-14)


class TestPrecession(MatrixAssertions, unittest.TestCase):
    """Test cases for the precession models."""

    def test_pr00(self):
        dpsipr, depspr = pr00((2400000.5, 53736))
        self.assertAlmostEqual(dpsipr, -0.8716465172668347629e-7, delta=1e-22)
        self.assertAlmostEqual(depspr, -0.7342018386722813087e-8, delta=1e-22)

    def test_bi00(self):
        dpsibi, depsbi, dra = bi00()
        self.assertAlmostEqual(dpsibi, -0.2025309152835086613e-6, delta=1e-12)
        self.assertAlmostEqual(depsbi, -0.3306041454222147847e-7, delta=1e-12)
        self.assertAlmostEqual(dra, -0.7078279744199225506e-7, delta=1e-12)

    def test_bp00(self):
        result = bp00((2400000.5, 50123.9999))
        self.assertIsInstance(result, BiasPrecession)
        rb, rp, rbp = result

        self.assertAlmostEqual(rb[0][0], 0.9999999999999942498, delta=1e-12)
        self.assertAlmostEqual(rb[0][1], -0.7078279744199196626e-7, delta=1e-16)
        self.assertAlmostEqual(rb[0][2], 0.8056217146976134152e-7, delta=1e-16)
        self.assertAlmostEqual(rb[1][2], 0.3306041454222136517e-7, delta=1e-16)

        self.assertAlmostEqual(rp[0][0], 0.9999995504864048241, delta=1e-12)
        self.assertAlmostEqual(rp[0][1], 0.8696113836207084411e-3, delta=1e-14)
        self.assertAlmostEqual(rp[0][2], 0.3778928813389333402e-3, delta=1e-14)

        self.assertRotation(rb)
        self.assertRotation(rp)
        self.assertTrue(np.allclose(np.array(rp) @ np.array(rb), np.array(rbp), atol=1e-15))

    def test_prec76(self):
        zeta, z, theta = prec76((2400000.5, 33282.0), (2400000.5, 51544.0))
        self.assertAlmostEqual(zeta, 0.5588961642000161243e-2, delta=1e-12)
        self.assertAlmostEqual(z, 0.5589922365870680624e-2, delta=1e-12)
        self.assertAlmostEqual(theta, 0.4858945471687296760e-2, delta=1e-12)

    def test_pmat76(self):
        r = pmat76((2400000.5, 50123.9999))
        self.assertAlmostEqual(r[0][0], 0.9999995504328350733, delta=1e-12)
        self.assertAlmostEqual(r[0][1], 0.8696632209480960785e-3, delta=1e-14)
        self.assertAlmostEqual(r[0][2], 0.3779153474959888345e-3, delta=1e-14)
        self.assertRotation(r)

    def test_pfw06(self):
        gamb, phib, psib, epsa = pfw06((2400000.5, 50123.9999))
        self.assertAlmostEqual(gamb, -0.2243387670997995690e-5, delta=1e-16)
        self.assertAlmostEqual(phib, 0.4091014602391312808, delta=1e-12)
        self.assertAlmostEqual(psib, -0.9501954178013031895e-3, delta=1e-14)
        self.assertAlmostEqual(epsa, 0.4091014316587367491, delta=1e-12)

    def test_pmat06(self):
        expected = (
            (0.9999995505176007047, 0.8695404617348208406e-3, 0.3779735201865589104e-3),
            (-0.8695404723772031414e-3, 0.9999996219496027161, -0.1361752497080270143e-6),
            (-0.3779734957034089490e-3, -0.1924880847894457113e-6, 0.9999999285679971958),
        )
        self.assertMatrixAlmostEqual(pmat06((2400000.5, 50123.9999)), expected, 1e-12)

    def test_fw2m_matches_pmat06(self):
        tt = (2400000.5, 50123.9999)
        self.assertEqual(fw2m(*pfw06(tt)), pmat06(tt))

    def test_bp06_products(self):
        rb, rp, rbp = bp06((2400000.5, 50123.9999))
        self.assertRotation(rb)
        self.assertRotation(rp)
        self.assertTrue(np.allclose(np.array(rp) @ np.array(rb), np.array(rbp), atol=1e-14))

    def test_numat(self):
        r = numat(0.4090789763356509900, -0.9630909107115582393e-5, 0.4063239174001678826e-4)
        expected = (
            (0.9999999999536227949, 0.8836239320236250577e-5, 0.3830833447458251908e-5),
            (-0.8836083657016688588e-5, 0.9999999991354654959, -0.4063240865361857698e-4),
            (-0.3831192481833385226e-5, 0.4063237480216934159e-4, 0.9999999991671660407),
        )
        self.assertMatrixAlmostEqual(r, expected, 1e-12)


class TestPrecessionAngles06(unittest.TestCase):
    """Test cases for the IAU 2006 equinox-based precession angles."""

    def test_p06e(self):
        angles = p06e((2400000.5, 52541.0))
        expected = {
            "eps0": 0.4090926006005828715,
            "psia": 0.6664369630191613431e-3,
            "oma": 0.4090925973783255982,
            "bpa": 0.5561149371265209445e-6,
            "bqa": -0.6191517193290621270e-5,
            "pia": 0.6216441751884382923e-5,
            "bpia": 3.052014180023779882,
            "epsa": 0.4090864054922431688,
            "chia": 0.1387703379530915364e-5,
            "za": 0.2921789846651790546e-3,
            "zetaa": 0.3178773290332009310e-3,
            "thetaa": 0.2650932701657497181e-3,
            "pa": 0.6651637681381016288e-3,
            "gam": 0.1398077115963754987e-5,
            "phi": 0.4090864090837462602,
            "psi": 0.6664464807480920325e-3,
        }
        for name, value in expected.items():
            with self.subTest(name=name):
                self.assertAlmostEqual(getattr(angles, name), value, delta=1e-12)

    def test_p06e_consistent_with_obl06(self):
        tt = (2400000.5, 60000.0)
        self.assertEqual(p06e(tt).epsa, obl06(tt))

    def test_p06e_at_j2000(self):
        angles = p06e((2451545.0, 0.0))
        self.assertEqual(angles.psia, 0.0)
        self.assertEqual(angles.oma, angles.eps0)
        self.assertEqual(angles.phi, angles.eps0)


if __name__ == "__main__":
    unittest.main()
