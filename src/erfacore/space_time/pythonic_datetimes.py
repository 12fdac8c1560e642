"""Helpers for timezone-aware :class:`datetime` values."""

from datetime import datetime
from typing import NamedTuple

import pytz

from ..errors import DomainError, ErrorKind


class NaiveDateTimeError(DomainError):
    """Raised when a datetime object has no timezone info."""

    def __init__(self, message: str = "Datetime must have timezone info") -> None:
        super().__init__(ErrorKind.NAIVE_DATETIME, message)


class CalendarFields(NamedTuple):
    """Calendar date and time of day, seconds including the microseconds."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float


def ensure_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC if it has a timezone.

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    if dt.tzinfo is None:
        raise NaiveDateTimeError()
    return dt.astimezone(pytz.UTC)


def calendar_fields(dt: datetime) -> CalendarFields:
    """Split a datetime into the fields taken by :func:`~erfacore.space_time.julian.dtf2d`.

    Aware datetimes are converted to UTC first; naive ones are used as they
    stand.
    """
    if dt.tzinfo is not None:
        dt = ensure_utc(dt)
    return CalendarFields(
        dt.year,
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second + dt.microsecond / 1e6,
    )
