"""Tests for p-vector and pv-vector operations."""

import unittest

import numpy as np

from erfacore.errors import DomainError, ErrorKind
from erfacore.vectors.pvec import (
    pdp,
    pm,
    pmp,
    pn,
    ppp,
    ppsp,
    pvppv,
    pvu,
    pxp,
    sxp,
    unit_vector,
    zp,
)
from erfacore.vectors.types import as_matrix, as_pv, as_vector


class TestPVectors(unittest.TestCase):
    """Test cases for p-vector arithmetic."""

    def test_basic_arithmetic(self):
        a = (2.0, 2.0, 3.0)
        b = (1.0, 3.0, 4.0)
        self.assertEqual(zp(), (0.0, 0.0, 0.0))
        self.assertEqual(ppp(a, b), (3.0, 5.0, 7.0))
        self.assertEqual(pmp(a, b), (1.0, -1.0, -1.0))
        self.assertEqual(sxp(2.0, a), (4.0, 4.0, 6.0))
        self.assertEqual(ppsp(a, 5.0, b), (7.0, 17.0, 23.0))
        self.assertEqual(pdp(a, b), 20.0)

    def test_cross_product(self):
        a = (2.0, 2.0, 3.0)
        b = (1.0, 3.0, 4.0)
        self.assertEqual(pxp(a, b), (-1.0, -5.0, 4.0))
        self.assertEqual(pxp(a, b), tuple(np.cross(a, b)))

    def test_modulus_and_unit_vector(self):
        self.assertAlmostEqual(pm((0.3, 1.2, -2.5)), 2.789265136196270604, delta=1e-12)

        r, u = pn((0.3, 1.2, -2.5))
        self.assertAlmostEqual(r, 2.789265136196270604, delta=1e-12)
        self.assertAlmostEqual(u[0], 0.1075552109073112058, delta=1e-12)
        self.assertAlmostEqual(u[1], 0.4302208436292448232, delta=1e-12)
        self.assertAlmostEqual(u[2], -0.8962934242275933816, delta=1e-12)

    def test_null_vector(self):
        self.assertEqual(pn(zp()), (0.0, (0.0, 0.0, 0.0)))
        with self.assertRaises(DomainError) as ctx:
            unit_vector(zp())
        self.assertEqual(ctx.exception.kind, ErrorKind.ZERO_VECTOR)

    def test_inputs_are_not_modified(self):
        a = [1.0, 2.0, 3.0]
        sxp(10.0, a)
        ppp(a, a)
        self.assertEqual(a, [1.0, 2.0, 3.0])

    def test_dimension_checks(self):
        with self.assertRaises(DomainError) as ctx:
            as_vector((1.0, 2.0))
        self.assertEqual(ctx.exception.kind, ErrorKind.DIMENSION_MISMATCH)
        with self.assertRaises(DomainError):
            as_matrix(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)))
        with self.assertRaises(DomainError):
            as_pv(((1.0, 0.0, 0.0),))
        with self.assertRaises(DomainError):
            pdp((1.0, 2.0, 3.0, 4.0), (1.0, 2.0, 3.0))


class TestPVVectors(unittest.TestCase):
    """Test cases for pv-vector operations."""

    def test_pvu(self):
        pv = (
            (126668.5912743160734, 2136.792716839935565, -245251.2339876830229),
            (-0.4051854035740713039e-2, -0.6253919754866175788e-2, 0.1189353719774107615e-1),
        )
        position, velocity = pvu(2920.0, pv)
        self.assertAlmostEqual(position[0], 126656.7598605317105, delta=1e-6)
        self.assertAlmostEqual(position[1], 2118.531271155726332, delta=1e-8)
        self.assertAlmostEqual(position[2], -245216.5048590656190, delta=1e-6)
        self.assertEqual(velocity, pv[1])

    def test_pvppv(self):
        a = ((2.0, 2.0, 3.0), (5.0, 6.0, 3.0))
        b = ((1.0, 3.0, 4.0), (3.0, 2.0, 1.0))
        self.assertEqual(pvppv(a, b), ((3.0, 5.0, 7.0), (8.0, 8.0, 4.0)))


if __name__ == "__main__":
    unittest.main()
