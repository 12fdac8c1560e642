"""Earth rotation angle and sidereal time.

UT1 and TT are two-part Julian Dates. Results are radians in [0, 2pi)
except where stated.
"""

import math
from datetime import datetime
from typing import Optional, Sequence, Union

from ..angles import anp, anpm
from ..constants import (
    D2PI,
    DAS2R,
    DAYSEC,
    DD2R,
    DJ00,
    DJC,
    DPI,
    DS2R,
    ERA00_AT_J2000,
    ERA00_RATE,
    GMST00_COEFFS,
    GMST06_COEFFS,
    GMST82_COEFFS,
)
from ..prenut.bias_precession_nutation import (
    PrecessionNutationModel,
    bias_precession_nutation_matrix,
    pnm06a,
)
from ..prenut.cio import bpn2xy, eors, s06
from ..series import horner
from .julian import dtf2d
from .julian_calc import DateLike, as_two_part, centuries_since_j2000
from .pythonic_datetimes import calendar_fields, ensure_utc
from .timescales import TimeScale, tai_to_tt, utc_to_tai, utc_to_ut1


def _ordered(date: DateLike):
    """The two parts with the smaller first (by value, not magnitude)."""
    dj1, dj2 = as_two_part(date)
    if dj1 < dj2:
        return dj1, dj2
    return dj2, dj1


def era00(ut1: DateLike) -> float:
    """Earth rotation angle, IAU 2000 model.

    The fractional parts of the two date components are taken separately
    to keep the whole-turn content of the daily rotation out of the
    product.
    """
    d1, d2 = _ordered(ut1)

    # Days since fundamental epoch.
    t = d1 + (d2 - DJ00)

    # Fractional part of T (days).
    f = math.fmod(d1, 1.0) + math.fmod(d2, 1.0)

    return anp(D2PI * (f + ERA00_AT_J2000 + ERA00_RATE * t))


def gmst82(ut1: DateLike) -> float:
    """Greenwich mean sidereal time, IAU 1982 model."""
    d1, d2 = _ordered(ut1)

    # Julian centuries since fundamental epoch.
    t = (d1 + (d2 - DJ00)) / DJC

    # Fractional part of JD(UT1), in seconds.
    f = DAYSEC * (math.fmod(d1, 1.0) + math.fmod(d2, 1.0))

    return anp(DS2R * (horner(GMST82_COEFFS, t) + f))


def gmst00(ut1: DateLike, tt: DateLike) -> float:
    """Greenwich mean sidereal time, consistent with IAU 2000 resolutions."""
    t = centuries_since_j2000(tt)
    return anp(era00(ut1) + horner(GMST00_COEFFS, t) * DAS2R)


def gmst06(ut1: DateLike, tt: DateLike) -> float:
    """Greenwich mean sidereal time, consistent with IAU 2006 precession."""
    t = centuries_since_j2000(tt)
    return anp(era00(ut1) + horner(GMST06_COEFFS, t) * DAS2R)


def gst06(ut1: DateLike, tt: DateLike, rnpb: Sequence[Sequence[float]]) -> float:
    """Greenwich apparent sidereal time from a supplied NPB matrix.

    Computed as the Earth rotation angle minus the equation of the origins,
    with the CIO locator from the IAU 2006 series.
    """
    x, y = bpn2xy(rnpb)
    s = s06(tt, x, y)
    return anp(era00(ut1) - eors(rnpb, s))


def gst06a(ut1: DateLike, tt: DateLike) -> float:
    """Greenwich apparent sidereal time, IAU 2006/2000A."""
    return gst06(ut1, tt, pnm06a(tt))


def gast(
    ut1: DateLike,
    tt: DateLike,
    model: Union[str, PrecessionNutationModel] = PrecessionNutationModel.IAU2006_2000A,
) -> float:
    """Greenwich apparent sidereal time with the NPB matrix of ``model``."""
    return gst06(ut1, tt, bias_precession_nutation_matrix(tt, model))


def equation_of_equinoxes(
    ut1: DateLike,
    tt: DateLike,
    model: Union[str, PrecessionNutationModel] = PrecessionNutationModel.IAU2006_2000A,
) -> float:
    """Apparent minus mean sidereal time, from -pi to +pi."""
    return anpm(gast(ut1, tt, model) - gmst06(ut1, tt))


def gst_from_equation_of_equinoxes(gmst: float, ee: float) -> float:
    """Apparent sidereal time from mean sidereal time and the equation of the equinoxes."""
    return anp(gmst + ee)


def local_sidereal_time(gst: float, longitude: float) -> float:
    """Local sidereal time from Greenwich sidereal time.

    Args:
        gst: Greenwich sidereal time (radians)
        longitude: Observer's longitude in radians, positive east
    """
    return anp(gst + longitude)


def sidereal_time_from_julian(
    julian_date: DateLike, longitude: float, tt: Optional[DateLike] = None
) -> float:
    """
    Calculate Local Mean Sidereal Time (LMST) for a given Julian Date and longitude.

    Parameters:
    julian_date: The Julian Date in UT1.
    longitude (float): Observer's longitude in degrees.
                       Positive for East of Prime Meridian,
                       Negative for West.
    tt: The same instant in TT. When omitted UT1 is used in its place,
        which changes GMST by well under a microarcsecond.

    Returns:
    float: LMST in decimal hours (0 ≤ LMST < 24).
    """
    gmst = gmst06(julian_date, julian_date if tt is None else tt)
    lmst = local_sidereal_time(gmst, longitude * DD2R)
    return lmst * 12.0 / DPI


def sidereal_time_from_datetime(dt: datetime, longitude: float, dut1: float = 0.0) -> float:
    """LMST in decimal hours for an aware datetime, taken as UTC.

    Args:
        dt: Timezone-aware datetime
        longitude: Observer's longitude in degrees, positive east
        dut1: UT1-UTC in seconds
    """
    utc = dtf2d(TimeScale.UTC, *calendar_fields(ensure_utc(dt))).value
    ut1 = utc_to_ut1(utc, dut1).value
    tt = tai_to_tt(utc_to_tai(utc).value)
    return sidereal_time_from_julian(ut1, longitude, tt)
