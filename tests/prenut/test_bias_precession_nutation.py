"""Tests for the combined bias-precession-nutation matrices."""

import unittest

import numpy as np

from erfacore.errors import DomainError, ErrorKind
from erfacore.prenut.bias_precession_nutation import (
    PrecessionNutation,
    PrecessionNutationModel,
    bias_precession_nutation_matrix,
    pn00,
    pn00a,
    pn00b,
    pn06,
    pn06a,
    pn06b,
    pnm00a,
    pnm00b,
    pnm06a,
    precession_nutation,
    rotate_bias_precession_nutation,
)
from erfacore.prenut.nutation import nut00a, nut00b, nut06a
from erfacore.prenut.precession import fw2m, obl06, pfw06


def max_orthonormality_error(r):
    m = np.array(r)
    return np.abs(m @ m.T - np.eye(3)).max()


class TestBiasPrecessionNutation(unittest.TestCase):
    """Test cases for the NPB matrix builders."""

    def assertMatrixAlmostEqual(self, r, expected, delta=1e-12):
        for i in range(3):
            for j in range(3):
                self.assertAlmostEqual(r[i][j], expected[i][j], delta=delta)

    def test_pnm00a(self):
        expected = (
            (0.9999995832793134257, 0.8372384254137809439e-3, 0.3639684306407150645e-3),
            (-0.8372535226570394543e-3, 0.9999996486491582471, 0.4132915262664072381e-4),
            (-0.3639337004054317729e-3, -0.4163386925461775873e-4, 0.9999999329094390695),
        )
        self.assertMatrixAlmostEqual(pnm00a((2400000.5, 50123.9999)), expected)

    def test_pnm00b(self):
        expected = (
            (0.9999995832776208280, 0.8372401264429654837e-3, 0.3639691681450271771e-3),
            (-0.8372552234147137424e-3, 0.9999996486477686123, 0.4132832190946052890e-4),
            (-0.3639344385341866407e-3, -0.4163303977421522785e-4, 0.9999999329092049734),
        )
        self.assertMatrixAlmostEqual(pnm00b((2400000.5, 50123.9999)), expected)

    def test_pnm06a(self):
        expected = (
            (0.9999995832794205484, 0.8372382772630962111e-3, 0.3639684771140623099e-3),
            (-0.8372533744743683605e-3, 0.9999996486492861646, 0.4132905944611019498e-4),
            (-0.3639337469629464969e-3, -0.4163377605910663999e-4, 0.9999999329094260057),
        )
        self.assertMatrixAlmostEqual(pnm06a((2400000.5, 50123.9999)), expected)

    def test_pnm06a_from_fukushima_williams_angles(self):
        tt = (2400000.5, 53736.0)
        gamb, phib, psib, epsa = pfw06(tt)
        dp, de = nut06a(tt)
        self.assertEqual(pnm06a(tt), fw2m(gamb, phib, psib + dp, epsa + de))

    def test_pn06a(self):
        result = pn06a((2400000.5, 53736.0))
        self.assertAlmostEqual(result.epsa, 0.4090789763356509926, delta=1e-12)
        self.assertMatrixAlmostEqual(result.rbpn, pnm06a((2400000.5, 53736.0)), delta=1e-14)

    def test_pn00a_uses_2000a_nutation(self):
        tt = (2400000.5, 53736.0)
        dpsi, deps = nut00a(tt)
        self.assertEqual(pn00a(tt), pn00(tt, dpsi, deps))

    def test_pn00_obliquity(self):
        result = pn00((2400000.5, 53736.0), -0.9632552291149335877e-5, 0.4063197106621141414e-4)
        self.assertAlmostEqual(result.epsa, 0.4090791789404229916, delta=1e-12)

    def test_pn00b_uses_2000b_nutation(self):
        tt = (2400000.5, 53736.0)
        dpsi, deps = nut00b(tt)
        self.assertEqual(pn00b(tt), pn00(tt, dpsi, deps))

    def test_pn06_components(self):
        tt = (2400000.5, 53736.0)
        result = pn06(tt, -0.9632552291149335877e-5, 0.4063197106621141414e-4)
        self.assertIsInstance(result, PrecessionNutation)
        self.assertEqual(result.epsa, obl06(tt))

        rb, rp, rbp, rn, rbpn = (np.array(m) for m in result[1:])
        self.assertTrue(np.allclose(rp @ rb, rbp, atol=1e-14))
        self.assertTrue(np.allclose(rn @ rbp, rbpn, atol=1e-14))

    def test_matrices_are_rotations(self):
        for model in PrecessionNutationModel:
            for mjd in (30000.0, 51544.5, 53736.0, 60000.0, 70000.0):
                with self.subTest(model=model, mjd=mjd):
                    result = precession_nutation((2400000.5, mjd), model)
                    for matrix in result[1:]:
                        self.assertLess(max_orthonormality_error(matrix), 1e-10)

    def test_models_agree_closely(self):
        tt = (2400000.5, 53736.0)
        a = np.array(pn00b(tt).rbpn)
        b = np.array(pn06b(tt).rbpn)
        # IAU 2000 and 2006 precession differ by milliarcseconds here
        self.assertLess(np.abs(a - b).max(), 1e-7)

    def test_default_model(self):
        tt = (2400000.5, 53736.0)
        self.assertEqual(bias_precession_nutation_matrix(tt), pn06a(tt).rbpn)
        self.assertEqual(bias_precession_nutation_matrix(tt, "IAU2006/2000B"), pn06b(tt).rbpn)
        self.assertEqual(bias_precession_nutation_matrix(tt, "IAU2000A"), pnm00a(tt))
        self.assertEqual(bias_precession_nutation_matrix(tt, "IAU2000B"), pnm00b(tt))

    def test_unsupported_model(self):
        with self.assertRaises(DomainError) as ctx:
            bias_precession_nutation_matrix((2400000.5, 53736.0), "IAU1980")
        self.assertEqual(ctx.exception.kind, ErrorKind.UNSUPPORTED_MODEL)

    def test_rotate_preserves_length(self):
        v = (0.3, -0.4, 1.2)
        rotated = rotate_bias_precession_nutation(v, (2400000.5, 53736.0))
        self.assertAlmostEqual(np.linalg.norm(rotated), np.linalg.norm(v), delta=1e-14)

    def test_from_name(self):
        self.assertIs(
            PrecessionNutationModel.from_name("iau2006/2000a"), PrecessionNutationModel.IAU2006_2000A
        )
        self.assertIs(
            PrecessionNutationModel.from_name("iau2006/2000b"), PrecessionNutationModel.IAU2006_2000B
        )
        self.assertIs(
            PrecessionNutationModel.from_name("IAU2006_2000B"), PrecessionNutationModel.IAU2006_2000B
        )


if __name__ == "__main__":
    unittest.main()
