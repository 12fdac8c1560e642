"""Tests for the CIO locator and CIO-based matrices."""

import unittest

import numpy as np

from erfacore.prenut.cio import bpn2xy, c2ixys, eors, s06

RNPB = (
    (0.9999989440476103608, -0.1332881761240011518e-2, -0.5790767434730085097e-3),
    (0.1332858254308954453e-2, 0.9999991109044505944, -0.4097782710401555759e-4),
    (0.5791308472168153320e-3, 0.4020595661593994396e-4, 0.9999998314954572365),
)


class TestCio(unittest.TestCase):
    """Test cases for s06, eors, bpn2xy and c2ixys."""

    def test_s06(self):
        s = s06((2400000.5, 53736.0), 0.5791308486706011000e-3, 0.4020579816732961219e-4)
        self.assertAlmostEqual(s, -0.1220032213076463117e-7, delta=1e-18)

    def test_bpn2xy(self):
        x, y = bpn2xy(RNPB)
        self.assertEqual(x, 0.5791308472168153320e-3)
        self.assertEqual(y, 0.4020595661593994396e-4)

    def test_eors(self):
        self.assertAlmostEqual(eors(RNPB, -0.1220040848472271978e-7), -0.1332882715130744606e-2, delta=1e-14)

    def test_c2ixys(self):
        r = c2ixys(0.5791308486706011000e-3, 0.4020579816732961219e-4, -0.1220040848472271978e-7)
        expected = (
            (0.9999998323037157138, 0.5581526349032241205e-9, -0.5791308491611263745e-3),
            (-0.2384257057469842953e-7, 0.9999999991917468964, -0.4020579110172324363e-4),
            (0.5791308486706011000e-3, 0.4020579816732961219e-4, 0.9999998314954627590),
        )
        for i in range(3):
            for j in range(3):
                self.assertAlmostEqual(r[i][j], expected[i][j], delta=1e-12)

        m = np.array(r)
        self.assertLess(np.abs(m @ m.T - np.eye(3)).max(), 1e-12)


if __name__ == "__main__":
    unittest.main()
