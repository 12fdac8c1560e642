"""Angle normalization and sexagesimal conversions."""

import math
from enum import Enum
from typing import NamedTuple

from .constants import DAS2R, DAYSEC, D2PI, DPI, DS2R
from .errors import DomainError, ErrorKind
from .space_time.rounding import dint, dnint


class AngleRange(Enum):
    """Target interval for :func:`normalize_angle`."""

    ZERO_TO_TWO_PI = "0..2pi"
    MINUS_PI_TO_PI = "-pi..pi"


class Sexagesimal(NamedTuple):
    """Sign and fields of an angle or interval split into base-60 units.

    ``major`` is hours or degrees depending on the producing function;
    ``fraction`` is the fractional second scaled by 10**ndp.
    """

    sign: str
    major: int
    minutes: int
    seconds: int
    fraction: int


def anp(a: float) -> float:
    """Normalize an angle into the range [0, 2pi)."""
    w = math.fmod(a, D2PI)
    if w < 0.0:
        w += D2PI
    return w


def anpm(a: float) -> float:
    """Normalize an angle into the range -pi to +pi.

    Exactly +pi maps to -pi and exactly -pi to +pi.
    """
    w = math.fmod(a, D2PI)
    if abs(w) >= DPI:
        w -= math.copysign(D2PI, a)
    return w


def normalize_angle(a: float, angle_range: AngleRange = AngleRange.ZERO_TO_TWO_PI) -> float:
    """Normalize an angle into one of the half-open intervals of :class:`AngleRange`.

    ``ZERO_TO_TWO_PI`` gives [0, 2pi) and ``MINUS_PI_TO_PI`` gives (-pi, pi].
    Unlike :func:`anpm`, an exact half turn of either sign comes back as +pi.

    Raises:
        DomainError: UNKNOWN_ANGLE_RANGE if ``angle_range`` is not an AngleRange
    """
    if angle_range is AngleRange.ZERO_TO_TWO_PI:
        return anp(a)
    if angle_range is AngleRange.MINUS_PI_TO_PI:
        w = anpm(a)
        return DPI if w == -DPI else w
    raise DomainError(ErrorKind.UNKNOWN_ANGLE_RANGE, f"unknown angle range {angle_range!r}")


def d2tf(ndp: int, days: float) -> Sexagesimal:
    """Decompose days into hours, minutes, seconds and fraction.

    Args:
        ndp: Number of decimal places in the seconds field. Negative values
            round to coarser units: -1 to 10s, -2 to 1m, -3 to 10m, -4 to 1h,
            -5 to 10h
        days: Interval in days

    Returns:
        Sexagesimal with ``major`` in hours. The fields may overflow into
        the next day (24h) if the rounded value reaches it.
    """
    sign = "+" if days >= 0.0 else "-"

    a = DAYSEC * abs(days)

    # Pre-round if resolution coarser than 1s (then pretend ndp=1).
    if ndp < 0:
        nrs = 1
        for n in range(1, -ndp + 1):
            nrs *= 6 if (n == 2 or n == 4) else 10
        rs = float(nrs)
        w = a / rs
        a = rs * dnint(w)

    nrs = 1
    for _ in range(ndp):
        nrs *= 10
    rs = float(nrs)
    rm = rs * 60.0
    rh = rm * 60.0

    # Round the interval and express in smallest units required.
    a = dnint(rs * a)

    ah = dint(a / rh)
    a -= ah * rh
    am = dint(a / rm)
    a -= am * rm
    asec = dint(a / rs)
    af = a - asec * rs

    return Sexagesimal(sign, int(ah), int(am), int(asec), int(af))


def a2tf(ndp: int, angle: float) -> Sexagesimal:
    """Decompose radians into hours, minutes, seconds and fraction."""
    return d2tf(ndp, angle / D2PI)


def a2af(ndp: int, angle: float) -> Sexagesimal:
    """Decompose radians into degrees, arcminutes, arcseconds and fraction."""
    # Hours to degrees * radians to turns
    return d2tf(ndp, angle * (15.0 / D2PI))


def _sign_factor(sign: str) -> float:
    return -1.0 if sign == "-" else 1.0


def tf2a(sign: str, hour: int, minute: int, second: float) -> float:
    """Convert hours, minutes, seconds to radians.

    Raises:
        DomainError: BAD_HOUR, BAD_MINUTE or BAD_SECOND for fields outside
            0-23, 0-59 and [0, 60)
    """
    _check_time_fields(hour, minute, second)
    return _sign_factor(sign) * (
        60.0 * (60.0 * float(abs(hour)) + float(abs(minute))) + abs(second)
    ) * DS2R


def tf2d(sign: str, hour: int, minute: int, second: float) -> float:
    """Convert hours, minutes, seconds to days."""
    _check_time_fields(hour, minute, second)
    return _sign_factor(sign) * (
        60.0 * (60.0 * float(abs(hour)) + float(abs(minute))) + abs(second)
    ) / DAYSEC


def af2a(sign: str, degrees: int, arcminutes: int, arcseconds: float) -> float:
    """Convert degrees, arcminutes, arcseconds to radians.

    Raises:
        DomainError: BAD_DEGREES, BAD_ARCMINUTES or BAD_ARCSECONDS for fields
            outside 0-359, 0-59 and [0, 60)
    """
    if degrees < 0 or degrees > 359:
        raise DomainError(ErrorKind.BAD_DEGREES, f"degrees {degrees} outside 0-359")
    if arcminutes < 0 or arcminutes > 59:
        raise DomainError(ErrorKind.BAD_ARCMINUTES, f"arcminutes {arcminutes} outside 0-59")
    if not 0.0 <= arcseconds < 60.0:
        raise DomainError(ErrorKind.BAD_ARCSECONDS, f"arcseconds {arcseconds} outside [0, 60)")
    return _sign_factor(sign) * (
        60.0 * (60.0 * float(abs(degrees)) + float(abs(arcminutes))) + abs(arcseconds)
    ) * DAS2R


def _check_time_fields(hour: int, minute: int, second: float) -> None:
    if hour < 0 or hour > 23:
        raise DomainError(ErrorKind.BAD_HOUR, f"hour {hour} outside 0-23")
    if minute < 0 or minute > 59:
        raise DomainError(ErrorKind.BAD_MINUTE, f"minute {minute} outside 0-59")
    if not 0.0 <= second < 60.0:
        raise DomainError(ErrorKind.BAD_SECOND, f"second {second} outside [0, 60)")
