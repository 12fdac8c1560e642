"""TAI-UTC from the built-in leap-second table."""

from ..constants import (
    LEAP_SECOND_DRIFT,
    LEAP_SECOND_ERA_START_YEAR,
    LEAP_SECOND_TABLE,
    LEAP_SECOND_TABLE_YEAR,
)
from ..errors import DomainError, ErrorKind, StatusResult, WarningKind
from ..logging import get_logger
from .julian_calc import cal2jd

logger = get_logger(__name__)

# Dates this many years past the table's release are flagged.
TABLE_VALIDITY_YEARS = 5

FIRST_TABLE_YEAR = LEAP_SECOND_TABLE[0][0]


def dat(year: int, month: int, day: int, fraction: float = 0.0) -> StatusResult[float]:
    """TAI-UTC in seconds for a UTC calendar date.

    Before 1972 UTC ran at a different rate from TAI ("rubber seconds") and
    the offset is a linear function of the date, hence the fraction-of-day
    argument. From 1972 onwards it is a whole number of seconds.

    Args:
        year: UTC year
        month: UTC month
        day: UTC day of month
        fraction: Fraction of the day, 0 to 1 inclusive

    Returns:
        StatusResult with TAI-UTC in seconds. Dates before 1960 give 0.0 and
        dates before 1972 carry PREDATES_LEAP_SECOND_TABLE; dates more than
        five years after the table's release carry BEYOND_LEAP_SECOND_TABLE
        and use the last tabulated value.

    Raises:
        DomainError: BAD_FRACTION for a fraction outside [0, 1], or the
            calendar errors of cal2jd
    """
    if not 0.0 <= fraction <= 1.0:
        raise DomainError(ErrorKind.BAD_FRACTION, f"day fraction {fraction!r} outside [0, 1]")

    djm0, djm = cal2jd(year, month, day)

    # Pre-UTC year: no value available.
    if year < FIRST_TABLE_YEAR:
        logger.debug(f"{year}-{month:02d}-{day:02d} predates UTC, TAI-UTC taken as 0")
        return StatusResult(0.0, (WarningKind.PREDATES_LEAP_SECOND_TABLE,))

    warnings = ()
    if year < LEAP_SECOND_ERA_START_YEAR:
        warnings = (WarningKind.PREDATES_LEAP_SECOND_TABLE,)
    elif year > LEAP_SECOND_TABLE_YEAR + TABLE_VALIDITY_YEARS:
        logger.debug(f"{year} is beyond the leap-second table, using last value")
        warnings = (WarningKind.BEYOND_LEAP_SECOND_TABLE,)

    # Combine year and month to form a date-ordered integer, then find the
    # most recent table entry.
    m = 12 * year + month
    index = len(LEAP_SECOND_TABLE) - 1
    while index >= 0:
        entry_year, entry_month, _ = LEAP_SECOND_TABLE[index]
        if m >= 12 * entry_year + entry_month:
            break
        index -= 1

    # Before the first table entry.
    if index < 0:
        raise DomainError(ErrorKind.BAD_YEAR, f"no leap-second entry for {year}-{month:02d}")

    da = LEAP_SECOND_TABLE[index][2]

    # If pre-1972, adjust for drift.
    if index < len(LEAP_SECOND_DRIFT):
        reference_mjd, rate = LEAP_SECOND_DRIFT[index]
        da += (djm + fraction - reference_mjd) * rate

    return StatusResult(da, warnings)
