"""Frame bias, precession and obliquity models.

All dates are TT, as two-part Julian Dates. Angles are radians.
"""

import math
from typing import NamedTuple, Tuple

from ..constants import (
    CHIA_COEFFS,
    DAS2R,
    DEBIAS,
    DJ00,
    DJC,
    DJM0,
    DJM00,
    DPBIAS,
    DRA0,
    EPS0_IAU2000,
    OBL06_COEFFS,
    OBL80_COEFFS,
    OBLCOR,
    OMA77_COEFFS,
    P06_BPA_COEFFS,
    P06_BPIA_COEFFS,
    P06_BQA_COEFFS,
    P06_CHIA_COEFFS,
    P06_EPS0,
    P06_GAM_COEFFS,
    P06_OMA_COEFFS,
    P06_PA_COEFFS,
    P06_PHI_COEFFS,
    P06_PIA_COEFFS,
    P06_PSI_COEFFS,
    P06_PSIA_COEFFS,
    P06_THETAA_COEFFS,
    P06_ZA_COEFFS,
    P06_ZETAA_COEFFS,
    PFW06_GAMB_COEFFS,
    PFW06_PHIB_COEFFS,
    PFW06_PSIB_COEFFS,
    PRECOR,
    PSIA77_COEFFS,
)
from ..series import horner
from ..space_time.julian_calc import DateLike, as_two_part, centuries_since_j2000
from ..vectors.matrices import ir, rx, rxr, ry, rz, tr
from ..vectors.types import Matrix3x3


class FukushimaWilliamsAngles(NamedTuple):
    """Precession angles in the Fukushima-Williams parameterization."""

    gamb: float
    phib: float
    psib: float
    epsa: float


class PrecessionAngles06(NamedTuple):
    """The IAU 2006 precession angles in their various parameterizations.

    Lieske et al. (1977) angles ``psia``, ``oma``, ``chia``; ecliptic pole
    ``bpa``, ``bqa``; moving-ecliptic ``pia``, ``bpia``; 323 Euler angles
    ``za``, ``zetaa``, ``thetaa``; general precession ``pa``; and
    Fukushima-Williams ``gam``, ``phi``, ``psi`` (no frame bias). All radians.
    """

    eps0: float
    psia: float
    oma: float
    bpa: float
    bqa: float
    pia: float
    bpia: float
    epsa: float
    chia: float
    za: float
    zetaa: float
    thetaa: float
    pa: float
    gam: float
    phi: float
    psi: float


class BiasPrecession(NamedTuple):
    """Frame bias, precession, and their product ``rbp = rp * rb``."""

    rb: Matrix3x3
    rp: Matrix3x3
    rbp: Matrix3x3


def obl80(tt: DateLike) -> float:
    """Mean obliquity of the ecliptic, IAU 1980 model."""
    t = centuries_since_j2000(tt)
    return DAS2R * horner(OBL80_COEFFS, t)


def obl06(tt: DateLike) -> float:
    """Mean obliquity of the ecliptic, IAU 2006 precession model."""
    t = centuries_since_j2000(tt)
    return horner(OBL06_COEFFS, t) * DAS2R


def pr00(tt: DateLike) -> Tuple[float, float]:
    """Precession-rate part of the IAU 2000 precession-nutation models.

    Returns:
        (dpsipr, depspr): corrections to the IAU 1976 precession in
        longitude and obliquity
    """
    t = centuries_since_j2000(tt)
    return (PRECOR * DAS2R) * t, (OBLCOR * DAS2R) * t


def bi00() -> Tuple[float, float, float]:
    """Frame bias components of the IAU 2000 models.

    Returns:
        (dpsibi, depsbi, dra): longitude and obliquity corrections, and the
        ICRS right ascension of the J2000.0 mean equinox
    """
    return DPBIAS * DAS2R, DEBIAS * DAS2R, DRA0 * DAS2R


def bp00(tt: DateLike) -> BiasPrecession:
    """Frame bias and precession, IAU 2000."""
    eps0 = EPS0_IAU2000 * DAS2R
    t = centuries_since_j2000(tt)

    dpsibi, depsbi, dra0 = bi00()

    # Precession angles (Lieske et al. 1977)
    psia77 = horner(PSIA77_COEFFS, t) * DAS2R
    oma77 = eps0 + horner(OMA77_COEFFS, t) * DAS2R
    chia = horner(CHIA_COEFFS, t) * DAS2R

    # Apply IAU 2000 precession corrections.
    dpsipr, depspr = pr00(tt)
    psia = psia77 + dpsipr
    oma = oma77 + depspr

    # Frame bias matrix: GCRS to J2000.0.
    rb = rx(-depsbi, ry(dpsibi * math.sin(eps0), rz(dra0, ir())))

    # Precession matrix: J2000.0 to mean of date.
    rp = rz(chia, rx(-oma, rz(-psia, rx(eps0, ir()))))

    return BiasPrecession(rb, rp, rxr(rp, rb))


def prec76(start: DateLike, end: DateLike) -> Tuple[float, float, float]:
    """IAU 1976 precession angles (zeta, z, theta) between two TDB epochs."""
    date01, date02 = as_two_part(start)
    date11, date12 = as_two_part(end)

    # Interval between fundamental epoch J2000.0 and start date (JC).
    t0 = ((date01 - DJ00) + date02) / DJC

    # Interval over which precession required (JC).
    t = ((date11 - date01) + (date12 - date02)) / DJC

    # Euler angles.
    tas2r = t * DAS2R
    w = 2306.2181 + (1.39656 - 0.000139 * t0) * t0

    zeta = (w + ((0.30188 - 0.000344 * t0) + 0.017998 * t) * t) * tas2r
    z = (w + ((1.09468 + 0.000066 * t0) + 0.018203 * t) * t) * tas2r
    theta = (
        (2004.3109 + (-0.85330 - 0.000217 * t0) * t0)
        + ((-0.42665 - 0.000217 * t0) - 0.041833 * t) * t
    ) * tas2r

    return zeta, z, theta


def pmat76(tt: DateLike) -> Matrix3x3:
    """Precession matrix from J2000.0 to a date, IAU 1976 model."""
    zeta, z, theta = prec76((DJ00, 0.0), tt)
    return rz(-z, ry(theta, rz(-zeta, ir())))


def pfw06(tt: DateLike) -> FukushimaWilliamsAngles:
    """Precession angles, IAU 2006 (Fukushima-Williams 4-angle formulation)."""
    t = centuries_since_j2000(tt)
    return FukushimaWilliamsAngles(
        horner(PFW06_GAMB_COEFFS, t) * DAS2R,
        horner(PFW06_PHIB_COEFFS, t) * DAS2R,
        horner(PFW06_PSIB_COEFFS, t) * DAS2R,
        obl06(tt),
    )


def fw2m(gamb: float, phib: float, psi: float, eps: float) -> Matrix3x3:
    """Form a rotation matrix from Fukushima-Williams angles.

    The result is ``R_1(-eps) * R_3(-psi) * R_1(phib) * R_3(gamb)``. With
    precession-only angles it is the bias-precession matrix; adding the
    nutation components to psi and eps gives the full NPB matrix.
    """
    return rx(-eps, rz(-psi, rx(phib, rz(gamb, ir()))))


def pmat06(tt: DateLike) -> Matrix3x3:
    """Bias-precession matrix, IAU 2006."""
    gamb, phib, psib, epsa = pfw06(tt)
    return fw2m(gamb, phib, psib, epsa)


def bp06(tt: DateLike) -> BiasPrecession:
    """Frame bias and precession, IAU 2006."""
    # B matrix.
    gamb, phib, psib, epsa = pfw06((DJM0, DJM00))
    rb = fw2m(gamb, phib, psib, epsa)

    # PxB matrix.
    rbp = pmat06(tt)

    # P matrix.
    return BiasPrecession(rb, rxr(rbp, tr(rb)), rbp)


def numat(epsa: float, dpsi: float, deps: float) -> Matrix3x3:
    """Nutation matrix from the mean obliquity and nutation components."""
    return rx(-(epsa + deps), rz(-dpsi, rx(epsa, ir())))


def p06e(tt: DateLike) -> PrecessionAngles06:
    """Precession angles, IAU 2006, equinox based (Hilton et al. 2006).

    The angles are with respect to the J2000.0 mean equator and ecliptic;
    frame bias is not included.
    """
    t = centuries_since_j2000(tt)

    # Obliquity at J2000.0.
    eps0 = P06_EPS0 * DAS2R

    return PrecessionAngles06(
        eps0=eps0,
        psia=horner(P06_PSIA_COEFFS, t) * DAS2R,
        oma=eps0 + horner(P06_OMA_COEFFS, t) * DAS2R,
        bpa=horner(P06_BPA_COEFFS, t) * DAS2R,
        bqa=horner(P06_BQA_COEFFS, t) * DAS2R,
        pia=horner(P06_PIA_COEFFS, t) * DAS2R,
        bpia=horner(P06_BPIA_COEFFS, t) * DAS2R,
        epsa=obl06(tt),
        chia=horner(P06_CHIA_COEFFS, t) * DAS2R,
        za=horner(P06_ZA_COEFFS, t) * DAS2R,
        zetaa=horner(P06_ZETAA_COEFFS, t) * DAS2R,
        thetaa=horner(P06_THETAA_COEFFS, t) * DAS2R,
        pa=horner(P06_PA_COEFFS, t) * DAS2R,
        gam=horner(P06_GAM_COEFFS, t) * DAS2R,
        phi=eps0 + horner(P06_PHI_COEFFS, t) * DAS2R,
        psi=horner(P06_PSI_COEFFS, t) * DAS2R,
    )
