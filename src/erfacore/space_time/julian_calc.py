"""Julian date calculation module.

Conversions between the proleptic Gregorian calendar and two-part Julian
Dates. A Julian Date is carried as a pair of floats whose sum is the date;
keeping the pair apart (for example a day number and a fraction) preserves
precision that a single double would lose.
"""

import math
import sys
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Sequence, Union

from ..constants import DJ00, DJC, DJM0
from ..errors import DomainError, ErrorKind
from .rounding import c_div, dnint

# Earliest year cal2jd accepts (JD 0 falls in -4712; the integer algorithm
# stays valid back to -4799 Jan 1).
IYMIN = -4799

# Julian Date range jd2cal accepts.
DJMIN = -68569.5
DJMAX = 1e9

# Days in each month of a common year
MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DBL_EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class TwoPartDate:
    """A Julian Date held as two parts, ``jd1 + jd2``.

    How the date is apportioned between the parts is up to the caller
    (JD and zero, MJD zero-point and MJD, J2000 and days since, day and
    fraction). Conversions leave the larger-magnitude part untouched and
    apply their corrections to the other one.
    """

    jd1: float
    jd2: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.jd1) and math.isfinite(self.jd2)):
            raise DomainError(
                ErrorKind.NOT_FINITE, f"Julian Date parts must be finite: {self.jd1!r}, {self.jd2!r}"
            )
        object.__setattr__(self, "jd1", float(self.jd1))
        object.__setattr__(self, "jd2", float(self.jd2))

    def __iter__(self) -> Iterator[float]:
        yield self.jd1
        yield self.jd2

    @property
    def jd(self) -> float:
        """The date collapsed to a single float (loses precision)."""
        return self.jd1 + self.jd2

    def difference(self, other: "TwoPartDate") -> float:
        """Days from ``other`` to this date."""
        return (self.jd1 - other.jd1) + (self.jd2 - other.jd2)

    def add_days(self, delta: float) -> "TwoPartDate":
        """Shift the date by ``delta`` days, applied to the smaller part."""
        if abs(self.jd1) >= abs(self.jd2):
            return TwoPartDate(self.jd1, self.jd2 + delta)
        return TwoPartDate(self.jd1 + delta, self.jd2)

    def normalized(self) -> "TwoPartDate":
        """Whole days in ``jd1`` and the remainder, in [-0.5, 0.5], in ``jd2``."""
        d1 = dnint(self.jd1)
        d2 = dnint(self.jd2)
        f = (self.jd1 - d1) + (self.jd2 - d2)
        d = d1 + d2
        df = dnint(f)
        return TwoPartDate(d + df, f - df)


DateLike = Union[TwoPartDate, Sequence[float]]


def as_two_part(date: DateLike) -> TwoPartDate:
    """Accept a TwoPartDate or any ``(jd1, jd2)`` pair."""
    if isinstance(date, TwoPartDate):
        return date
    if len(date) != 2:
        raise DomainError(
            ErrorKind.DIMENSION_MISMATCH, f"expected a (jd1, jd2) pair, got {len(date)} values"
        )
    return TwoPartDate(date[0], date[1])


class CalendarDate(NamedTuple):
    """Gregorian calendar date with the fraction of the day."""

    year: int
    month: int
    day: int
    fraction: float


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    return MONTH_DAYS[month - 1] + (1 if month == 2 and is_leap_year(year) else 0)


def cal2jd(year: int, month: int, day: int) -> TwoPartDate:
    """Convert a Gregorian calendar date to a two-part Julian Date.

    Args:
        year: Year (proleptic Gregorian, astronomical numbering)
        month: Month (1-12)
        day: Day of month

    Returns:
        TwoPartDate of (MJD zero-point, Modified Julian Date at 0h)

    Raises:
        DomainError: BAD_YEAR before -4799, BAD_MONTH, or BAD_DAY when the
            day does not exist in that month
    """
    if year < IYMIN:
        raise DomainError(ErrorKind.BAD_YEAR, f"year {year} is before {IYMIN}")
    if month < 1 or month > 12:
        raise DomainError(ErrorKind.BAD_MONTH, f"month {month} outside 1-12")
    if day < 1 or day > days_in_month(year, month):
        raise DomainError(ErrorKind.BAD_DAY, f"day {day} not in {year}-{month:02d}")

    my = c_div(month - 14, 12)
    iypmy = year + my
    djm = (
        (1461 * (iypmy + 4800)) // 4
        + (367 * (month - 2 - 12 * my)) // 12
        - (3 * ((iypmy + 4900) // 100)) // 4
        + day
        - 2432076
    )
    return TwoPartDate(DJM0, float(djm))


def jd2cal(date: DateLike) -> CalendarDate:
    """Convert a two-part Julian Date to a Gregorian calendar date.

    The day fraction is computed with compensated summation so that it is
    correct to the last bit whichever way the date is split.

    Raises:
        DomainError: JULIAN_DATE_OUT_OF_RANGE outside [-68569.5, 1e9]
    """
    dj1, dj2 = as_two_part(date)

    dj = dj1 + dj2
    if dj < DJMIN or dj > DJMAX:
        raise DomainError(
            ErrorKind.JULIAN_DATE_OUT_OF_RANGE, f"JD {dj!r} outside [{DJMIN}, {DJMAX}]"
        )

    # Separate day and fraction (where -0.5 <= fraction <= 0.5).
    d = dnint(dj1)
    f1 = dj1 - d
    jd = int(d)
    d = dnint(dj2)
    f2 = dj2 - d
    jd += int(d)

    # Compute f1+f2+0.5 using compensated summation (Klein 2006).
    s = 0.5
    cs = 0.0
    for x in (f1, f2):
        t = s + x
        cs += (s - t) + x if abs(s) >= abs(x) else (x - t) + s
        s = t
        if s >= 1.0:
            jd += 1
            s -= 1.0
    f = s + cs
    cs = f - s

    # Deal with negative f.
    if f < 0.0:
        f = s + 1.0
        cs += (1.0 - f) + s
        s = f
        f = s + cs
        cs = f - s
        jd -= 1

    # Deal with f that is 1.0 or more (when rounded to double).
    if (f - 1.0) >= -DBL_EPSILON / 4.0:
        t = s - 1.0
        cs += (s - t) - 1.0
        s = t
        f = s + cs
        if -DBL_EPSILON / 2.0 < f:
            jd += 1
            f = max(f, 0.0)

    # Express day in Gregorian calendar.
    l = jd + 68569
    n = (4 * l) // 146097
    l -= (146097 * n + 3) // 4
    i = (4000 * (l + 1)) // 1461001
    l -= (1461 * i) // 4 - 31
    k = (80 * l) // 2447
    day = l - (2447 * k) // 80
    l = k // 11
    month = k + 2 - 12 * l
    year = 100 * (n - 49) + i + l

    return CalendarDate(year, month, day, f)


def centuries_since_j2000(date: DateLike) -> float:
    """Julian centuries elapsed since J2000.0, ``((jd1 - J2000) + jd2) / 36525``."""
    d1, d2 = as_two_part(date)
    return ((d1 - DJ00) + d2) / DJC
