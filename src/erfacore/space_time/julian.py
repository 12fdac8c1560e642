from datetime import datetime
from typing import NamedTuple, Union

from ..angles import d2tf
from ..constants import DAYSEC, DJ00, DJM0, DJM00, DJY, DTY
from ..errors import DomainError, ErrorKind, StatusResult, WarningKind, merge_warnings
from .julian_calc import (
    CalendarDate,
    DateLike,
    TwoPartDate,
    as_two_part,
    cal2jd,
    jd2cal,
)
from .leap_seconds import dat
from .pythonic_datetimes import calendar_fields, ensure_utc
from .rounding import create_and_round_to_microsecond
from .timescales import TimeScale

__all__ = [
    "CalendarDate",
    "DateTimeFields",
    "TwoPartDate",
    "besselian_epoch",
    "besselian_epoch_to_date",
    "d2dtf",
    "datetime_to_two_part",
    "dtf2d",
    "julian_epoch",
    "julian_epoch_to_date",
    "two_part_to_datetime",
]

# Days between J2000.0 and B1900.0 (JD 2415020.31352), as used by epb.
D1900 = 36524.68648

# MJD of B1900.0
MJD_B1900 = 15019.81352


class DateTimeFields(NamedTuple):
    """Calendar date and time of day, seconds split into whole and fraction.

    ``fraction`` is the fractional second scaled by 10**ndp.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    fraction: int


def _leap_in_day(year: int, month: int, day: int, tomorrow: CalendarDate):
    """TAI-UTC at 0h, and the size of any leap at the end of the UTC day."""
    dat0 = dat(year, month, day, 0.0)
    dat12 = dat(year, month, day, 0.5)
    dat24 = dat(tomorrow.year, tomorrow.month, tomorrow.day, 0.0)
    dleap = dat24.value - (2.0 * dat12.value - dat0.value)
    return dleap, merge_warnings(dat0.warnings, dat12.warnings, dat24.warnings)


def dtf2d(
    scale: Union[str, TimeScale],
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: float,
) -> StatusResult[TwoPartDate]:
    """Calendar date and time of day to a two-part Julian Date.

    For UTC the day length follows the leap-second table, so 23:59:60.5 on a
    day ending in a leap second is a valid input. The result is split as
    (JD at 0h, fraction of the day).

    Raises:
        DomainError: calendar errors of cal2jd, or BAD_HOUR, BAD_MINUTE,
            BAD_SECOND (negative seconds)
    """
    is_utc = TimeScale.from_name(scale) is TimeScale.UTC

    djm0, djm = cal2jd(year, month, day)
    dj = djm0 + djm

    # Day length and final minute length in seconds (provisional).
    day_length = DAYSEC
    seclim = 60.0
    warnings = ()

    if is_utc:
        dleap, warnings = _leap_in_day(year, month, day, jd2cal((dj, 1.5)))

        # If leap second day, correct the day and final minute lengths.
        day_length += dleap
        if hour == 23 and minute == 59:
            seclim += dleap

    if hour < 0 or hour > 23:
        raise DomainError(ErrorKind.BAD_HOUR, f"hour {hour} outside 0-23")
    if minute < 0 or minute > 59:
        raise DomainError(ErrorKind.BAD_MINUTE, f"minute {minute} outside 0-59")
    if second < 0:
        raise DomainError(ErrorKind.BAD_SECOND, f"second {second} is negative")
    if second >= seclim:
        warnings = merge_warnings(warnings, (WarningKind.TIME_PAST_END_OF_DAY,))

    time = (60.0 * float(60 * hour + minute) + second) / day_length
    return StatusResult(TwoPartDate(dj, time), warnings)


def d2dtf(scale: Union[str, TimeScale], ndp: int, date: DateLike) -> StatusResult[DateTimeFields]:
    """Two-part Julian Date to calendar date and time of day.

    Args:
        scale: Time scale; only UTC is treated specially
        ndp: Decimal places of seconds (see :func:`erfacore.angles.d2tf`)
        date: Two-part Julian Date

    Returns:
        StatusResult with DateTimeFields. On a UTC day ending in a leap
        second the final second is reported as 23:59:60.
    """
    is_utc = TimeScale.from_name(scale) is TimeScale.UTC
    a1, b1 = as_two_part(date)

    # The calendar date, and the fraction of the day.
    iy1, im1, id1, fd = jd2cal((a1, b1))

    leap = False
    warnings = ()
    if is_utc:
        dleap, warnings = _leap_in_day(iy1, im1, id1, jd2cal((a1 + 1.5, b1 - fd)))

        # If leap second day, scale the fraction of a day into SI.
        leap = abs(dleap) > 0.5
        if leap:
            fd += fd * dleap / DAYSEC

    # Provisional time of day.
    _, hour, minute, second, fraction = d2tf(ndp, fd)

    # Has the (rounded) time gone past 24h?
    if hour > 23:
        # Yes: the calendar date of tomorrow.
        tomorrow = jd2cal((a1 + 1.5, b1 - fd))

        if not leap:
            # Use 0h tomorrow.
            iy1, im1, id1 = tomorrow.year, tomorrow.month, tomorrow.day
            hour, minute, second = 0, 0, 0
        else:
            if second > 0:
                # Use tomorrow but allow for the leap second.
                iy1, im1, id1 = tomorrow.year, tomorrow.month, tomorrow.day
                hour, minute, second = 0, 0, 0
            else:
                # Use 23 59 60... today.
                hour, minute, second = 23, 59, 60

            # If rounding to 10s or coarser always go up to new day.
            if ndp < 0 and second == 60:
                iy1, im1, id1 = tomorrow.year, tomorrow.month, tomorrow.day
                hour, minute, second = 0, 0, 0

    return StatusResult(DateTimeFields(iy1, im1, id1, hour, minute, second, fraction), warnings)


def julian_epoch(date: DateLike) -> float:
    """Julian Epoch (e.g. 2000.0) of a two-part Julian Date."""
    dj1, dj2 = as_two_part(date)
    return 2000.0 + ((dj1 - DJ00) + dj2) / DJY


def julian_epoch_to_date(epoch: float) -> TwoPartDate:
    """Two-part (MJD zero-point, MJD) date of a Julian Epoch."""
    return TwoPartDate(DJM0, DJM00 + (epoch - 2000.0) * DJY)


def besselian_epoch(date: DateLike) -> float:
    """Besselian Epoch (e.g. 1950.0) of a two-part Julian Date."""
    dj1, dj2 = as_two_part(date)
    return 1900.0 + ((dj1 - DJ00) + (dj2 + D1900)) / DTY


def besselian_epoch_to_date(epoch: float) -> TwoPartDate:
    """Two-part (MJD zero-point, MJD) date of a Besselian Epoch."""
    return TwoPartDate(DJM0, MJD_B1900 + (epoch - 1900.0) * DTY)


def datetime_to_two_part(dt: datetime) -> TwoPartDate:
    """Convert an aware datetime to a two-part Julian Date.

    The day is taken as 86400 seconds; use :func:`dtf2d` for UTC dates
    that need leap-second-aware day lengths.

    Args:
        dt: Timezone-aware datetime

    Returns:
        TwoPartDate of (JD at 0h, fraction of day)

    Raises:
        NaiveDateTimeError: If ``dt`` has no timezone
    """
    year, month, day, hour, minute, second = calendar_fields(ensure_utc(dt))
    djm0, djm = cal2jd(year, month, day)
    seconds = 60.0 * float(60 * hour + minute) + second
    return TwoPartDate(djm0 + djm, seconds / DAYSEC)


def two_part_to_datetime(date: DateLike) -> datetime:
    """Convert a two-part Julian Date to a UTC datetime, to the microsecond."""
    year, month, day, fraction = jd2cal(date)
    return create_and_round_to_microsecond(fraction * DAYSEC, 0, 0, day, month, year)
