"""r-matrix operations.

Rotation helpers follow the SOFA convention: ``rx(phi, r)`` returns
``Rx(phi) * r``, i.e. applies an additional rotation about the x-axis,
anticlockwise as seen looking towards the origin from positive x.
"""

import math
from typing import Sequence

from ..errors import DomainError, ErrorKind
from .types import Matrix3x3, PVVector, Vector3, as_matrix, as_pv, as_vector

# Matrices whose determinant magnitude is below this are treated as singular
# by inverse().
SINGULAR_DETERMINANT_THRESHOLD = 1e-12


def ir() -> Matrix3x3:
    """Identity r-matrix."""
    return ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def zr() -> Matrix3x3:
    """Null r-matrix."""
    return ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0))


def rx(phi: float, r: Sequence[Sequence[float]]) -> Matrix3x3:
    """Rotate an r-matrix about the x-axis."""
    r = as_matrix(r)
    s = math.sin(phi)
    c = math.cos(phi)

    a10 = c * r[1][0] + s * r[2][0]
    a11 = c * r[1][1] + s * r[2][1]
    a12 = c * r[1][2] + s * r[2][2]
    a20 = -s * r[1][0] + c * r[2][0]
    a21 = -s * r[1][1] + c * r[2][1]
    a22 = -s * r[1][2] + c * r[2][2]

    return (r[0], (a10, a11, a12), (a20, a21, a22))


def ry(theta: float, r: Sequence[Sequence[float]]) -> Matrix3x3:
    """Rotate an r-matrix about the y-axis."""
    r = as_matrix(r)
    s = math.sin(theta)
    c = math.cos(theta)

    a00 = c * r[0][0] - s * r[2][0]
    a01 = c * r[0][1] - s * r[2][1]
    a02 = c * r[0][2] - s * r[2][2]
    a20 = s * r[0][0] + c * r[2][0]
    a21 = s * r[0][1] + c * r[2][1]
    a22 = s * r[0][2] + c * r[2][2]

    return ((a00, a01, a02), r[1], (a20, a21, a22))


def rz(psi: float, r: Sequence[Sequence[float]]) -> Matrix3x3:
    """Rotate an r-matrix about the z-axis."""
    r = as_matrix(r)
    s = math.sin(psi)
    c = math.cos(psi)

    a00 = c * r[0][0] + s * r[1][0]
    a01 = c * r[0][1] + s * r[1][1]
    a02 = c * r[0][2] + s * r[1][2]
    a10 = -s * r[0][0] + c * r[1][0]
    a11 = -s * r[0][1] + c * r[1][1]
    a12 = -s * r[0][2] + c * r[1][2]

    return ((a00, a01, a02), (a10, a11, a12), r[2])


def rxr(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix3x3:
    """Multiply two r-matrices, a * b."""
    a = as_matrix(a)
    b = as_matrix(b)
    rows = []
    for i in range(3):
        row = []
        for j in range(3):
            w = 0.0
            for k in range(3):
                w += a[i][k] * b[k][j]
            row.append(w)
        rows.append(tuple(row))
    return (rows[0], rows[1], rows[2])


def tr(r: Sequence[Sequence[float]]) -> Matrix3x3:
    """Transpose an r-matrix."""
    r = as_matrix(r)
    return (
        (r[0][0], r[1][0], r[2][0]),
        (r[0][1], r[1][1], r[2][1]),
        (r[0][2], r[1][2], r[2][2]),
    )


def rxp(r: Sequence[Sequence[float]], p: Sequence[float]) -> Vector3:
    """Multiply a p-vector by an r-matrix, r * p."""
    r = as_matrix(r)
    p = as_vector(p)
    out = []
    for i in range(3):
        w = 0.0
        for j in range(3):
            w += r[i][j] * p[j]
        out.append(w)
    return (out[0], out[1], out[2])


def trxp(r: Sequence[Sequence[float]], p: Sequence[float]) -> Vector3:
    """Multiply a p-vector by the transpose of an r-matrix."""
    return rxp(tr(r), p)


def rxpv(r: Sequence[Sequence[float]], pv: Sequence[Sequence[float]]) -> PVVector:
    """Multiply a pv-vector by an r-matrix."""
    pv = as_pv(pv)
    return (rxp(r, pv[0]), rxp(r, pv[1]))


def determinant(r: Sequence[Sequence[float]]) -> float:
    """Determinant of an r-matrix, expanded along the first row."""
    r = as_matrix(r)
    return (
        r[0][0] * (r[1][1] * r[2][2] - r[1][2] * r[2][1])
        + r[0][1] * (r[1][2] * r[2][0] - r[1][0] * r[2][2])
        + r[0][2] * (r[1][0] * r[2][1] - r[1][1] * r[2][0])
    )


def inverse(r: Sequence[Sequence[float]]) -> Matrix3x3:
    """Invert an r-matrix with the adjugate (cofactor) method.

    Args:
        r: Matrix to invert

    Returns:
        The inverse matrix

    Raises:
        DomainError: If ``|det(r)|`` is below SINGULAR_DETERMINANT_THRESHOLD
            (or is NaN)
    """
    r = as_matrix(r)
    (a00, a01, a02), (a10, a11, a12), (a20, a21, a22) = r

    # Cofactors of the first row, reused for the determinant.
    c00 = a11 * a22 - a12 * a21
    c01 = a12 * a20 - a10 * a22
    c02 = a10 * a21 - a11 * a20
    det = a00 * c00 + a01 * c01 + a02 * c02
    if not abs(det) >= SINGULAR_DETERMINANT_THRESHOLD:
        raise DomainError(
            ErrorKind.SINGULAR_MATRIX, f"determinant {det!r} below singular threshold"
        )

    return (
        (c00 / det, (a02 * a21 - a01 * a22) / det, (a01 * a12 - a02 * a11) / det),
        (c01 / det, (a00 * a22 - a02 * a20) / det, (a02 * a10 - a00 * a12) / det),
        (c02 / det, (a01 * a20 - a00 * a21) / det, (a00 * a11 - a01 * a10) / det),
    )


def rv2m(w: Sequence[float]) -> Matrix3x3:
    """Form the r-matrix corresponding to a rotation vector."""
    x, y, z = as_vector(w)
    phi = math.sqrt(x * x + y * y + z * z)
    s = math.sin(phi)
    c = math.cos(phi)
    f = 1.0 - c

    # Euler axis (direction of rotation vector), perhaps null.
    if phi > 0.0:
        x /= phi
        y /= phi
        z /= phi

    return (
        (x * x * f + c, x * y * f + z * s, x * z * f - y * s),
        (y * x * f - z * s, y * y * f + c, y * z * f + x * s),
        (z * x * f + y * s, z * y * f - x * s, z * z * f + c),
    )


def rm2v(r: Sequence[Sequence[float]]) -> Vector3:
    """Express an r-matrix as a rotation vector."""
    r = as_matrix(r)
    x = r[1][2] - r[2][1]
    y = r[2][0] - r[0][2]
    z = r[0][1] - r[1][0]
    s2 = math.sqrt(x * x + y * y + z * z)
    if s2 > 0.0:
        c2 = r[0][0] + r[1][1] + r[2][2] - 1.0
        phi = math.atan2(s2, c2)
        f = phi / s2
        return (x * f, y * f, z * f)
    return (0.0, 0.0, 0.0)
