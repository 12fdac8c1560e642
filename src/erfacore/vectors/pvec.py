"""p-vector and pv-vector operations."""

import math
from typing import Sequence, Tuple

from ..errors import DomainError, ErrorKind
from .types import PVVector, Vector3, as_pv, as_vector


def zp() -> Vector3:
    """Zero p-vector."""
    return (0.0, 0.0, 0.0)


def sxp(s: float, p: Sequence[float]) -> Vector3:
    """Multiply a p-vector by a scalar."""
    p = as_vector(p)
    return (s * p[0], s * p[1], s * p[2])


def ppp(a: Sequence[float], b: Sequence[float]) -> Vector3:
    """p-vector addition, a + b."""
    a = as_vector(a)
    b = as_vector(b)
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def pmp(a: Sequence[float], b: Sequence[float]) -> Vector3:
    """p-vector subtraction, a - b."""
    a = as_vector(a)
    b = as_vector(b)
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def ppsp(a: Sequence[float], s: float, b: Sequence[float]) -> Vector3:
    """p-vector plus scaled p-vector, a + s*b."""
    a = as_vector(a)
    b = as_vector(b)
    return (a[0] + s * b[0], a[1] + s * b[1], a[2] + s * b[2])


def pdp(a: Sequence[float], b: Sequence[float]) -> float:
    """Inner (dot) product of two p-vectors."""
    a = as_vector(a)
    b = as_vector(b)
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def pxp(a: Sequence[float], b: Sequence[float]) -> Vector3:
    """Outer (cross) product of two p-vectors."""
    a = as_vector(a)
    b = as_vector(b)
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def pm(p: Sequence[float]) -> float:
    """Modulus of a p-vector."""
    p = as_vector(p)
    return math.sqrt(p[0] * p[0] + p[1] * p[1] + p[2] * p[2])


def pn(p: Sequence[float]) -> Tuple[float, Vector3]:
    """Modulus and unit vector of a p-vector.

    A null vector is returned as modulus 0.0 with a zero "unit" vector,
    as SOFA does; use :func:`unit_vector` when a zero-length input
    must be rejected.
    """
    w = pm(p)
    if w == 0.0:
        return 0.0, zp()
    return w, sxp(1.0 / w, p)


def unit_vector(p: Sequence[float]) -> Vector3:
    """Normalize a p-vector to unit length.

    Raises:
        DomainError: If the vector has zero length
    """
    w, u = pn(p)
    if w == 0.0:
        raise DomainError(ErrorKind.ZERO_VECTOR, "cannot normalize a zero-length vector")
    return u


def pvu(dt: float, pv: Sequence[Sequence[float]]) -> PVVector:
    """Update a pv-vector, moving the position along the velocity for ``dt``."""
    pv = as_pv(pv)
    return (ppsp(pv[0], dt, pv[1]), pv[1])


def pvppv(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> PVVector:
    """Add two pv-vectors."""
    a = as_pv(a)
    b = as_pv(b)
    return (ppp(a[0], b[0]), ppp(a[1], b[1]))
