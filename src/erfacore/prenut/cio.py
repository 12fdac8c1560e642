"""CIO-based quantities: the CIO locator s, the equation of the origins,
and the celestial-to-intermediate matrix.
"""

import math
from typing import Sequence, Tuple

from ..constants import DAS2R, S06_POLY_COEFFS
from ..series import sine_cosine_series
from ..space_time.julian_calc import DateLike, centuries_since_j2000
from ..vectors.matrices import ir, ry, rz
from ..vectors.types import Matrix3x3, as_matrix
from .fundamental_arguments import fad03, fae03, faf03, fal03, falp03, faom03, fapa03, fave03

# Series for s+XY/2, IAU 2006/2000A. Rows are (multipliers of l, l', F, D,
# Om, LVe, LE, pA), sine and cosine coefficients in arcseconds. Sn holds the
# terms of order t**n.
S0_TERMS = (
    ((0, 0, 0, 0, 1, 0, 0, 0), -2640.73e-6, 0.39e-6),
    ((0, 0, 0, 0, 2, 0, 0, 0), -63.53e-6, 0.02e-6),
    ((0, 0, 2, -2, 3, 0, 0, 0), -11.75e-6, -0.01e-6),
    ((0, 0, 2, -2, 1, 0, 0, 0), -11.21e-6, -0.01e-6),
    ((0, 0, 2, -2, 2, 0, 0, 0), 4.57e-6, 0.00e-6),
    ((0, 0, 2, 0, 3, 0, 0, 0), -2.02e-6, 0.00e-6),
    ((0, 0, 2, 0, 1, 0, 0, 0), -1.98e-6, 0.00e-6),
    ((0, 0, 0, 0, 3, 0, 0, 0), 1.72e-6, 0.00e-6),
    ((0, 1, 0, 0, 1, 0, 0, 0), 1.41e-6, 0.01e-6),
    ((0, 1, 0, 0, -1, 0, 0, 0), 1.26e-6, 0.01e-6),
    ((1, 0, 0, 0, -1, 0, 0, 0), 0.63e-6, 0.00e-6),
    ((1, 0, 0, 0, 1, 0, 0, 0), 0.63e-6, 0.00e-6),
    ((0, 1, 2, -2, 3, 0, 0, 0), -0.46e-6, 0.00e-6),
    ((0, 1, 2, -2, 1, 0, 0, 0), -0.45e-6, 0.00e-6),
    ((0, 0, 4, -4, 4, 0, 0, 0), -0.36e-6, 0.00e-6),
    ((0, 0, 1, -1, 1, -8, 12, 0), 0.24e-6, 0.12e-6),
    ((0, 0, 2, 0, 0, 0, 0, 0), -0.32e-6, 0.00e-6),
    ((0, 0, 2, 0, 2, 0, 0, 0), -0.28e-6, 0.00e-6),
    ((1, 0, 2, 0, 3, 0, 0, 0), -0.27e-6, 0.00e-6),
    ((1, 0, 2, 0, 1, 0, 0, 0), -0.26e-6, 0.00e-6),
    ((0, 0, 2, -2, 0, 0, 0, 0), 0.21e-6, 0.00e-6),
    ((0, 1, -2, 2, -3, 0, 0, 0), -0.19e-6, 0.00e-6),
    ((0, 1, -2, 2, -1, 0, 0, 0), -0.18e-6, 0.00e-6),
    ((0, 0, 0, 0, 0, 8, -13, -1), 0.10e-6, -0.05e-6),
    ((0, 0, 0, 2, 0, 0, 0, 0), -0.15e-6, 0.00e-6),
    ((2, 0, -2, 0, -1, 0, 0, 0), 0.14e-6, 0.00e-6),
    ((0, 1, 2, -2, 2, 0, 0, 0), 0.14e-6, 0.00e-6),
    ((1, 0, 0, -2, 1, 0, 0, 0), -0.14e-6, 0.00e-6),
    ((1, 0, 0, -2, -1, 0, 0, 0), -0.14e-6, 0.00e-6),
    ((0, 0, 4, -2, 4, 0, 0, 0), -0.13e-6, 0.00e-6),
    ((0, 0, 2, -2, 4, 0, 0, 0), 0.11e-6, 0.00e-6),
    ((1, 0, -2, 0, -3, 0, 0, 0), -0.11e-6, 0.00e-6),
    ((1, 0, -2, 0, -1, 0, 0, 0), -0.11e-6, 0.00e-6),
)

S1_TERMS = (
    ((0, 0, 0, 0, 2, 0, 0, 0), -0.07e-6, 3.57e-6),
    ((0, 0, 0, 0, 1, 0, 0, 0), 1.73e-6, -0.03e-6),
    ((0, 0, 2, -2, 3, 0, 0, 0), 0.00e-6, 0.48e-6),
)

S2_TERMS = (
    ((0, 0, 0, 0, 1, 0, 0, 0), 743.52e-6, -0.17e-6),
    ((0, 0, 2, -2, 2, 0, 0, 0), 56.91e-6, 0.06e-6),
    ((0, 0, 2, 0, 2, 0, 0, 0), 9.84e-6, -0.01e-6),
    ((0, 0, 0, 0, 2, 0, 0, 0), -8.85e-6, 0.01e-6),
    ((0, 1, 0, 0, 0, 0, 0, 0), -6.38e-6, -0.05e-6),
    ((1, 0, 0, 0, 0, 0, 0, 0), -3.07e-6, 0.00e-6),
    ((0, 1, 2, -2, 2, 0, 0, 0), 2.23e-6, 0.00e-6),
    ((0, 0, 2, 0, 1, 0, 0, 0), 1.67e-6, 0.00e-6),
    ((1, 0, 2, 0, 2, 0, 0, 0), 1.30e-6, 0.00e-6),
    ((0, 1, -2, 2, -2, 0, 0, 0), 0.93e-6, 0.00e-6),
    ((1, 0, 0, -2, 0, 0, 0, 0), 0.68e-6, 0.00e-6),
    ((0, 0, 2, -2, 1, 0, 0, 0), -0.55e-6, 0.00e-6),
    ((1, 0, -2, 0, -2, 0, 0, 0), 0.53e-6, 0.00e-6),
    ((0, 0, 0, 2, 0, 0, 0, 0), -0.27e-6, 0.00e-6),
    ((1, 0, 0, 0, 1, 0, 0, 0), -0.27e-6, 0.00e-6),
    ((1, 0, -2, -2, -2, 0, 0, 0), -0.26e-6, 0.00e-6),
    ((1, 0, 0, 0, -1, 0, 0, 0), -0.25e-6, 0.00e-6),
    ((1, 0, 2, 0, 1, 0, 0, 0), 0.22e-6, 0.00e-6),
    ((2, 0, 0, -2, 0, 0, 0, 0), -0.21e-6, 0.00e-6),
    ((2, 0, -2, 0, -1, 0, 0, 0), 0.20e-6, 0.00e-6),
    ((0, 0, 2, 2, 2, 0, 0, 0), 0.17e-6, 0.00e-6),
    ((2, 0, 2, 0, 2, 0, 0, 0), 0.13e-6, 0.00e-6),
    ((2, 0, 0, 0, 0, 0, 0, 0), -0.13e-6, 0.00e-6),
    ((1, 0, 2, -2, 2, 0, 0, 0), -0.12e-6, 0.00e-6),
    ((0, 0, 2, 0, 0, 0, 0, 0), -0.11e-6, 0.00e-6),
)

S3_TERMS = (
    ((0, 0, 0, 0, 1, 0, 0, 0), 0.30e-6, -23.42e-6),
    ((0, 0, 2, -2, 2, 0, 0, 0), -0.03e-6, -1.46e-6),
    ((0, 0, 2, 0, 2, 0, 0, 0), -0.01e-6, -0.25e-6),
    ((0, 0, 0, 0, 2, 0, 0, 0), 0.00e-6, 0.23e-6),
)

S4_TERMS = (
    ((0, 0, 0, 0, 1, 0, 0, 0), -0.26e-6, -0.01e-6),
)


def s06(tt: DateLike, x: float, y: float) -> float:
    """The CIO locator s, IAU 2006 precession and IAU 2000A nutation.

    Args:
        tt: TT as a two-part Julian Date
        x: CIP X coordinate
        y: CIP Y coordinate

    Returns:
        s in radians, positioning the CIO on the equator of the CIP
    """
    t = centuries_since_j2000(tt)

    fa = (
        fal03(t),
        falp03(t),
        faf03(t),
        fad03(t),
        faom03(t),
        fave03(t),
        fae03(t),
        fapa03(t),
    )

    w0 = sine_cosine_series(S0_TERMS, fa, S06_POLY_COEFFS[0])
    w1 = sine_cosine_series(S1_TERMS, fa, S06_POLY_COEFFS[1])
    w2 = sine_cosine_series(S2_TERMS, fa, S06_POLY_COEFFS[2])
    w3 = sine_cosine_series(S3_TERMS, fa, S06_POLY_COEFFS[3])
    w4 = sine_cosine_series(S4_TERMS, fa, S06_POLY_COEFFS[4])
    w5 = S06_POLY_COEFFS[5]

    return (w0 + (w1 + (w2 + (w3 + (w4 + w5 * t) * t) * t) * t) * t) * DAS2R - x * y / 2.0


def bpn2xy(rbpn: Sequence[Sequence[float]]) -> Tuple[float, float]:
    """CIP X, Y coordinates from the bias-precession-nutation matrix."""
    rbpn = as_matrix(rbpn)
    return rbpn[2][0], rbpn[2][1]


def eors(rnpb: Sequence[Sequence[float]], s: float) -> float:
    """Equation of the origins, given the NPB matrix and the CIO locator s.

    The result is the angle from the CIO to the equinox along the equator,
    so that ERA - EO gives apparent sidereal time.
    """
    rnpb = as_matrix(rnpb)

    # Evaluate Wallace & Capitaine (2006) expression (16).
    x = rnpb[2][0]
    ax = x / (1.0 + rnpb[2][2])
    xs = 1.0 - ax * x
    ys = -ax * rnpb[2][1]
    zs = -x
    p = rnpb[0][0] * xs + rnpb[0][1] * ys + rnpb[0][2] * zs
    q = rnpb[1][0] * xs + rnpb[1][1] * ys + rnpb[1][2] * zs
    if p != 0.0 or q != 0.0:
        return s - math.atan2(q, p)
    return s


def c2ixys(x: float, y: float, s: float) -> Matrix3x3:
    """Celestial-to-intermediate matrix from the CIP X, Y and the CIO locator s."""
    # Obtain the spherical angles E and d.
    r2 = x * x + y * y
    e = math.atan2(y, x) if r2 > 0.0 else 0.0
    d = math.atan(math.sqrt(r2 / (1.0 - r2)))

    # Form the matrix.
    return rz(-(e + s), ry(d, rz(e, ir())))
