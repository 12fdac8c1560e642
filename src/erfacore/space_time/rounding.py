import math
from datetime import datetime, timedelta, timezone


def dnint(a: float) -> float:
    """Round to the nearest whole number, halves away from zero.

    Unlike the builtin ``round`` this does not round half to even.
    """
    if abs(a) < 0.5:
        return 0.0
    if a < 0.0:
        return float(math.ceil(a - 0.5))
    return float(math.floor(a + 0.5))


def dint(a: float) -> float:
    """Truncate towards zero, keeping a float."""
    if a < 0.0:
        return float(math.ceil(a))
    return float(math.floor(a))


def c_div(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def create_and_round_to_microsecond(
    seconds: float,
    minute: int,
    hour: int,
    day: int,
    month: int,
    year: int,
) -> datetime:
    """Build a UTC datetime from fractional seconds, normalizing overflow."""
    # Round to nearest microsecond
    total_micros = int(dnint(seconds * 1_000_000))

    # Handle overflow into whole seconds before creating datetime
    extra_seconds = total_micros // 1_000_000
    normalized_micros = total_micros % 1_000_000

    dt = datetime(
        year,
        month,
        day,
        hour,
        minute,
        0,
        normalized_micros,
        tzinfo=timezone.utc,
    )

    if extra_seconds:
        dt += timedelta(seconds=extra_seconds)

    return dt
