"""Spherical and Cartesian coordinate conversions."""

import math
from typing import Sequence, Tuple

from .pvec import pm, sxp
from .types import PVVector, Vector3, as_pv, as_vector


def s2c(theta: float, phi: float) -> Vector3:
    """Unit vector from spherical coordinates (longitude, latitude)."""
    cp = math.cos(phi)
    return (math.cos(theta) * cp, math.sin(theta) * cp, math.sin(phi))


def c2s(p: Sequence[float]) -> Tuple[float, float]:
    """Spherical coordinates (longitude, latitude) of a p-vector.

    The vector need not be of unit length. A null vector, or one along the
    pole, yields zero for the undefined angle(s).
    """
    x, y, z = as_vector(p)
    d2 = x * x + y * y

    theta = 0.0 if d2 == 0.0 else math.atan2(y, x)
    phi = 0.0 if z == 0.0 else math.atan2(z, math.sqrt(d2))
    return theta, phi


def s2p(theta: float, phi: float, r: float) -> Vector3:
    """p-vector from spherical polar coordinates."""
    return sxp(r, s2c(theta, phi))


def p2s(p: Sequence[float]) -> Tuple[float, float, float]:
    """Spherical polar coordinates (theta, phi, r) of a p-vector."""
    theta, phi = c2s(p)
    return theta, phi, pm(p)


def s2pv(
    theta: float, phi: float, r: float, td: float, pd: float, rd: float
) -> PVVector:
    """pv-vector from spherical coordinates and their rates of change.

    Args:
        theta: Longitude angle (radians)
        phi: Latitude angle (radians)
        r: Radial distance
        td: Rate of change of theta
        pd: Rate of change of phi
        rd: Rate of change of r

    Returns:
        (position, velocity)
    """
    st = math.sin(theta)
    ct = math.cos(theta)
    sp = math.sin(phi)
    cp = math.cos(phi)
    rcp = r * cp
    x = rcp * ct
    y = rcp * st
    rpd = r * pd
    w = rpd * sp - cp * rd

    return (
        (x, y, r * sp),
        (-y * td - w * ct, x * td - w * st, rpd * cp + sp * rd),
    )


def pv2s(pv: Sequence[Sequence[float]]) -> Tuple[float, float, float, float, float, float]:
    """Spherical coordinates and rates from a pv-vector.

    Returns:
        (theta, phi, r, td, pd, rd). When the position is null the velocity
        direction is used for the angles, as SOFA does.
    """
    (x, y, z), (xd, yd, zd) = as_pv(pv)

    rxy2 = x * x + y * y
    r2 = rxy2 + z * z
    rtrue = math.sqrt(r2)

    # If null vector, move the origin along the direction of movement.
    rw = rtrue
    if rtrue == 0.0:
        x = xd
        y = yd
        z = zd
        rxy2 = x * x + y * y
        r2 = rxy2 + z * z
        rw = math.sqrt(r2)

    rxy = math.sqrt(rxy2)
    xyp = x * xd + y * yd
    if rxy2 != 0.0:
        theta = math.atan2(y, x)
        phi = math.atan2(z, rxy)
        td = (x * yd - y * xd) / rxy2
        pd = (zd * rxy2 - z * xyp) / (r2 * rxy)
    else:
        theta = 0.0
        phi = math.atan2(z, rxy) if z != 0.0 else 0.0
        td = 0.0
        pd = 0.0
    rd = (xyp + z * zd) / rw if rw != 0.0 else 0.0

    return theta, phi, rtrue, td, pd, rd
