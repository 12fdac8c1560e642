"""Tests for geodetic and geocentric conversions."""

import unittest

from erfacore.errors import DomainError, ErrorKind
from erfacore.observer.ellipsoid import Ellipsoid, eform
from erfacore.observer.geodetic import gc2gd, gc2gde, gd2gc, gd2gce


class TestEllipsoid(unittest.TestCase):
    """Test cases for reference ellipsoids."""

    def test_eform(self):
        a, f = eform(Ellipsoid.WGS84)
        self.assertEqual(a, 6378137.0)
        self.assertAlmostEqual(f, 0.3352810664747480720e-2, delta=1e-18)

        a, f = eform("grs80")
        self.assertEqual(a, 6378137.0)
        self.assertAlmostEqual(f, 0.3352810681182318935e-2, delta=1e-18)

        a, f = eform("WGS72")
        self.assertEqual(a, 6378135.0)
        self.assertAlmostEqual(f, 0.3352779454167504862e-2, delta=1e-18)

    def test_unknown_ellipsoid(self):
        with self.assertRaises(DomainError) as ctx:
            eform("airy")
        self.assertEqual(ctx.exception.kind, ErrorKind.INVALID_ELLIPSOID)


class TestGeocentricToGeodetic(unittest.TestCase):
    """Test cases for gc2gd and gc2gde."""

    XYZ = (2e6, 3e6, 5.244e6)

    def test_gc2gd_wgs84(self):
        elong, phi, height = gc2gd(Ellipsoid.WGS84, self.XYZ)
        self.assertAlmostEqual(elong, 0.9827937232473290680, delta=1e-14)
        self.assertAlmostEqual(phi, 0.97160184819075459, delta=1e-14)
        self.assertAlmostEqual(height, 331.4172461426059892, delta=1e-8)

    def test_gc2gd_grs80(self):
        elong, phi, height = gc2gd(Ellipsoid.GRS80, self.XYZ)
        self.assertAlmostEqual(elong, 0.9827937232473290680, delta=1e-14)
        self.assertAlmostEqual(phi, 0.97160184820607853, delta=1e-14)
        self.assertAlmostEqual(height, 331.41731754844348, delta=1e-8)

    def test_gc2gd_wgs72(self):
        elong, phi, height = gc2gd(Ellipsoid.WGS72, self.XYZ)
        self.assertAlmostEqual(elong, 0.9827937232473290680, delta=1e-14)
        self.assertAlmostEqual(phi, 0.9716018181101511937, delta=1e-14)
        self.assertAlmostEqual(height, 333.2770726130318123, delta=1e-8)

    def test_gc2gde(self):
        elong, phi, height = gc2gde(6378136.0, 0.0033528, self.XYZ)
        self.assertAlmostEqual(elong, 0.9827937232473290680, delta=1e-14)
        self.assertAlmostEqual(phi, 0.9716018377570411532, delta=1e-14)
        self.assertAlmostEqual(height, 332.36862495764397, delta=1e-8)

    def test_poles(self):
        a, f = eform(Ellipsoid.WGS84)
        b = a * (1.0 - f)
        elong, phi, height = gc2gd(Ellipsoid.WGS84, (0.0, 0.0, -(b + 100.0)))
        self.assertEqual(elong, 0.0)
        self.assertAlmostEqual(phi, -1.5707963267948966, delta=1e-15)
        self.assertAlmostEqual(height, 100.0, delta=1e-6)

    def test_invalid_parameters(self):
        for a, f in ((6378136.0, 1.0), (6378136.0, -0.1), (0.0, 0.0033528)):
            with self.subTest(a=a, f=f):
                with self.assertRaises(DomainError) as ctx:
                    gc2gde(a, f, self.XYZ)
                self.assertEqual(ctx.exception.kind, ErrorKind.INVALID_ELLIPSOID)


class TestGeodeticToGeocentric(unittest.TestCase):
    """Test cases for gd2gc and gd2gce."""

    def test_gd2gc_wgs84(self):
        x, y, z = gd2gc(Ellipsoid.WGS84, 3.1, -0.5, 2500.0)
        self.assertAlmostEqual(x, -5599000.5577049947, delta=1e-7)
        self.assertAlmostEqual(y, 233011.67223479203, delta=1e-7)
        self.assertAlmostEqual(z, -3040909.4706983363, delta=1e-7)

    def test_gd2gc_grs80(self):
        x, y, z = gd2gc(Ellipsoid.GRS80, 3.1, -0.5, 2500.0)
        self.assertAlmostEqual(x, -5599000.5577260984, delta=1e-7)
        self.assertAlmostEqual(y, 233011.6722356702949, delta=1e-7)
        self.assertAlmostEqual(z, -3040909.4706095476, delta=1e-7)

    def test_gd2gce(self):
        x, y, z = gd2gce(6378136.0, 0.0033528, 3.1, -0.5, 2500.0)
        self.assertAlmostEqual(x, -5598999.6665116328, delta=1e-7)
        self.assertAlmostEqual(y, 233011.6351463057189, delta=1e-7)
        self.assertAlmostEqual(z, -3040909.0517314132, delta=1e-7)

    def test_round_trip(self):
        for ellipsoid in Ellipsoid:
            for elong, phi, height in ((0.3, 0.8, 120.0), (-2.0, -1.2, -50.0), (3.0, 0.0, 8848.0)):
                with self.subTest(ellipsoid=ellipsoid, phi=phi):
                    back = gc2gd(ellipsoid, gd2gc(ellipsoid, elong, phi, height))
                    self.assertAlmostEqual(back[0], elong, delta=1e-12)
                    self.assertAlmostEqual(back[1], phi, delta=1e-12)
                    self.assertAlmostEqual(back[2], height, delta=1e-6)


if __name__ == "__main__":
    unittest.main()
