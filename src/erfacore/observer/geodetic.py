"""Geocentric and geodetic coordinates on a reference ellipsoid."""

import math
from typing import Sequence, Tuple, Union

from ..constants import DPI
from ..errors import DomainError, ErrorKind
from ..vectors.types import Vector3, as_vector
from .ellipsoid import Ellipsoid, eform


def gc2gde(a: float, f: float, xyz: Sequence[float]) -> Tuple[float, float, float]:
    """Geocentric to geodetic for an ellipsoid given as (a, f).

    Uses the closed-form solution of Fukushima (2006) with one Halley
    correction.

    Args:
        a: Equatorial radius
        f: Flattening, 0 <= f < 1
        xyz: Geocentric vector, same units as ``a``

    Returns:
        (elong, phi, height): east longitude and geodetic latitude in
        radians, height above the ellipsoid

    Raises:
        DomainError: INVALID_ELLIPSOID for illegal ``f`` or ``a``
    """
    if not 0.0 <= f < 1.0:
        raise DomainError(ErrorKind.INVALID_ELLIPSOID, f"flattening {f!r} outside [0, 1)")
    if not a > 0.0:
        raise DomainError(ErrorKind.INVALID_ELLIPSOID, f"equatorial radius {a!r} not positive")

    # Functions of ellipsoid parameters (with further validation of f).
    aeps2 = a * a * 1e-32
    e2 = (2.0 - f) * f
    e4t = e2 * e2 * 1.5
    ec2 = 1.0 - e2
    if ec2 <= 0.0:
        raise DomainError(ErrorKind.INVALID_ELLIPSOID, f"flattening {f!r} gives no minor axis")
    ec = math.sqrt(ec2)
    b = a * ec

    x, y, z = as_vector(xyz)

    # Distance from polar axis squared.
    p2 = x * x + y * y

    # Longitude.
    elong = math.atan2(y, x) if p2 > 0.0 else 0.0

    # Unsigned z-coordinate.
    absz = abs(z)

    # Proceed unless polar case.
    if p2 > aeps2:
        # Distance from polar axis.
        p = math.sqrt(p2)

        # Normalization.
        s0 = absz / a
        pn = p / a
        zc = ec * s0

        # Prepare Newton correction factors.
        c0 = ec * pn
        c02 = c0 * c0
        c03 = c02 * c0
        s02 = s0 * s0
        s03 = s02 * s0
        a02 = c02 + s02
        a0 = math.sqrt(a02)
        a03 = a02 * a0
        d0 = zc * a03 + e2 * s03
        f0 = pn * a03 - e2 * c03

        # Prepare Halley correction factor.
        b0 = e4t * s02 * c02 * pn * (a0 - ec)
        s1 = d0 * f0 - b0 * s0
        cc = ec * (f0 * f0 - b0 * c0)

        # Evaluate latitude and height.
        phi = math.atan(s1 / cc)
        s12 = s1 * s1
        cc2 = cc * cc
        height = (p * cc + absz * s1 - a * math.sqrt(ec2 * s12 + cc2)) / math.sqrt(s12 + cc2)
    else:
        # Exception: pole.
        phi = DPI / 2.0
        height = absz - b

    # Restore sign of latitude.
    if z < 0:
        phi = -phi

    return elong, phi, height


def gc2gd(ellipsoid: Union[str, Ellipsoid], xyz: Sequence[float]) -> Tuple[float, float, float]:
    """Geocentric (m) to geodetic on a standard ellipsoid."""
    a, f = eform(ellipsoid)
    return gc2gde(a, f, xyz)


def gd2gce(a: float, f: float, elong: float, phi: float, height: float) -> Vector3:
    """Geodetic to geocentric for an ellipsoid given as (a, f).

    Raises:
        DomainError: UNREALISTIC_INPUT when the latitude and flattening
            leave no solution
    """
    # Functions of geodetic latitude.
    sp = math.sin(phi)
    cp = math.cos(phi)
    w = 1.0 - f
    w = w * w
    d = cp * cp + w * sp * sp
    if d <= 0.0:
        raise DomainError(ErrorKind.UNREALISTIC_INPUT, "no geocentric solution for these inputs")
    ac = a / math.sqrt(d)
    as_ = w * ac

    # Geocentric vector.
    r = (ac + height) * cp
    return (r * math.cos(elong), r * math.sin(elong), (as_ + height) * sp)


def gd2gc(ellipsoid: Union[str, Ellipsoid], elong: float, phi: float, height: float) -> Vector3:
    """Geodetic to geocentric (m) on a standard ellipsoid."""
    a, f = eform(ellipsoid)
    return gd2gce(a, f, elong, phi, height)
