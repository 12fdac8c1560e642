"""Fundamental arguments of nutation theory, IERS Conventions (2003).

Each function takes TDB Julian centuries since J2000.0 (TT is
indistinguishable for these purposes) and returns radians. The Delaunay
arguments are reduced modulo one turn in arcseconds before conversion,
the planetary longitudes modulo 2pi.
"""

import math

from ..constants import D2PI, DAS2R, TURNAS
from ..series import horner

# Delaunay arguments, arcseconds (Simon et al. 1994).
L03_COEFFS = (485868.249036, 1717915923.2178, 31.8792, 0.051635, -0.00024470)
LP03_COEFFS = (1287104.793048, 129596581.0481, -0.5532, 0.000136, -0.00001149)
F03_COEFFS = (335779.526232, 1739527262.8478, -12.7512, -0.001037, 0.00000417)
D03_COEFFS = (1072260.703692, 1602961601.2090, -6.3706, 0.006593, -0.00003169)
OM03_COEFFS = (450160.398036, -6962890.5431, 7.4722, 0.007702, -0.00005939)


def _delaunay(coeffs, t: float) -> float:
    return math.fmod(horner(coeffs, t), TURNAS) * DAS2R


def fal03(t: float) -> float:
    """Mean anomaly of the Moon."""
    return _delaunay(L03_COEFFS, t)


def falp03(t: float) -> float:
    """Mean anomaly of the Sun."""
    return _delaunay(LP03_COEFFS, t)


def faf03(t: float) -> float:
    """Mean longitude of the Moon minus that of the ascending node."""
    return _delaunay(F03_COEFFS, t)


def fad03(t: float) -> float:
    """Mean elongation of the Moon from the Sun."""
    return _delaunay(D03_COEFFS, t)


def faom03(t: float) -> float:
    """Mean longitude of the Moon's ascending node."""
    return _delaunay(OM03_COEFFS, t)


def fame03(t: float) -> float:
    """Mean longitude of Mercury."""
    return math.fmod(4.402608842 + 2608.7903141574 * t, D2PI)


def fave03(t: float) -> float:
    """Mean longitude of Venus."""
    return math.fmod(3.176146697 + 1021.3285546211 * t, D2PI)


def fae03(t: float) -> float:
    """Mean longitude of Earth."""
    return math.fmod(1.753470314 + 628.3075849991 * t, D2PI)


def fama03(t: float) -> float:
    """Mean longitude of Mars."""
    return math.fmod(6.203480913 + 334.0612426700 * t, D2PI)


def faju03(t: float) -> float:
    """Mean longitude of Jupiter."""
    return math.fmod(0.599546497 + 52.9690962641 * t, D2PI)


def fasa03(t: float) -> float:
    """Mean longitude of Saturn."""
    return math.fmod(0.874016757 + 21.3299104960 * t, D2PI)


def faur03(t: float) -> float:
    """Mean longitude of Uranus."""
    return math.fmod(5.481293872 + 7.4781598567 * t, D2PI)


def fane03(t: float) -> float:
    """Mean longitude of Neptune."""
    return math.fmod(5.311886287 + 3.8133035638 * t, D2PI)


def fapa03(t: float) -> float:
    """General accumulated precession in longitude (not reduced)."""
    return (0.024381750 + 0.00000538691 * t) * t
