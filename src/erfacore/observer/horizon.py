"""Horizon and equatorial coordinates for an observer at latitude phi."""

import math
from typing import Tuple

from ..constants import D2PI


def hd2ae(ha: float, dec: float, phi: float) -> Tuple[float, float]:
    """Hour angle and declination to azimuth (N=0, E=90) and altitude."""
    sh = math.sin(ha)
    ch = math.cos(ha)
    sd = math.sin(dec)
    cd = math.cos(dec)
    sp = math.sin(phi)
    cp = math.cos(phi)

    # Az,Alt unit vector.
    x = -ch * cd * sp + sd * cp
    y = -sh * cd
    z = ch * cd * cp + sd * sp

    # To spherical.
    r = math.sqrt(x * x + y * y)
    a = math.atan2(y, x) if r != 0.0 else 0.0
    az = a + D2PI if a < 0.0 else a
    el = math.atan2(z, r)

    return az, el


def ae2hd(az: float, el: float, phi: float) -> Tuple[float, float]:
    """Azimuth and altitude to hour angle and declination."""
    sa = math.sin(az)
    ca = math.cos(az)
    se = math.sin(el)
    ce = math.cos(el)
    sp = math.sin(phi)
    cp = math.cos(phi)

    # HA,Dec unit vector.
    x = -ca * ce * sp + se * cp
    y = -sa * ce
    z = ca * ce * cp + se * sp

    # To spherical.
    r = math.sqrt(x * x + y * y)
    ha = math.atan2(y, x) if r != 0.0 else 0.0
    dec = math.atan2(z, r)

    return ha, dec


def hd2pa(ha: float, dec: float, phi: float) -> float:
    """Parallactic angle for a given hour angle and declination.

    Zero at the meridian; undefined at the zenith, where zero is returned.
    """
    sp = math.sin(phi)
    cp = math.cos(phi)
    sqsz = cp * math.sin(ha)
    cqsz = sp * math.cos(dec) - cp * math.sin(dec) * math.cos(ha)
    if sqsz != 0.0 or cqsz != 0.0:
        return math.atan2(sqsz, cqsz)
    return 0.0
