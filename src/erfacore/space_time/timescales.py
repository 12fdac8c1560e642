"""Conversions between astronomical time scales.

Every converter takes and returns a :class:`TwoPartDate`. The part with the
larger magnitude is passed through unchanged and the correction is applied
to the other part, so the caller's choice of split survives the round trip.

Scales and the links between them::

    UT1 --- UTC --- TAI --- TT --- TDB --- TCB
                             |
                            TCG

UTC-UT1 needs the measured UT1-UTC (``dut1``) and TT-TDB needs ``dtr``;
the remaining links are defined by convention or by the leap-second table.
"""

from collections import deque
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

from ..constants import DAYSEC, DJM0, DJM77, ELB, ELG, TDB0, TTMTAI
from ..errors import (
    ConfigurationError,
    ConfigurationKind,
    DomainError,
    ErrorKind,
    StatusResult,
    merge_warnings,
)
from ..logging import get_logger
from .julian_calc import DateLike, TwoPartDate, as_two_part, cal2jd, jd2cal
from .leap_seconds import dat

logger = get_logger(__name__)


class TimeScale(Enum):
    """Supported time scales."""

    TAI = "TAI"
    UTC = "UTC"
    UT1 = "UT1"
    TT = "TT"
    TCG = "TCG"
    TDB = "TDB"
    TCB = "TCB"

    @classmethod
    def from_name(cls, name: Union[str, "TimeScale"]) -> "TimeScale":
        """Look up a scale by (case-insensitive) name.

        Raises:
            DomainError: UNKNOWN_TIME_SCALE
        """
        if isinstance(name, TimeScale):
            return name
        try:
            return cls(str(name).strip().upper())
        except ValueError as e:
            raise DomainError(ErrorKind.UNKNOWN_TIME_SCALE, f"unknown time scale {name!r}") from e


# TCG, TCB and TDB are tied to TT at 1977 January 1.0 TAI.
T77_TT_OFFSET = DJM77 + TTMTAI / DAYSEC


def _split(date: TwoPartDate) -> Tuple[bool, float, float]:
    """(big1, bigger part, smaller part), ties going to the first part."""
    if abs(date.jd1) >= abs(date.jd2):
        return True, date.jd1, date.jd2
    return False, date.jd2, date.jd1


def _join(big1: bool, big: float, small: float) -> TwoPartDate:
    if big1:
        return TwoPartDate(big, small)
    return TwoPartDate(small, big)


def _offset(date: TwoPartDate, delta_days: float) -> TwoPartDate:
    """Add a constant offset to the smaller part (ties go to the first)."""
    if abs(date.jd1) > abs(date.jd2):
        return TwoPartDate(date.jd1, date.jd2 + delta_days)
    return TwoPartDate(date.jd1 + delta_days, date.jd2)


def utc_to_tai(utc: DateLike) -> StatusResult[TwoPartDate]:
    """UTC to TAI.

    On a day ending in a leap second the UTC day fraction is stretched to
    cover 86400 +/- 1 SI seconds; before 1972 the rate offset is applied
    as well.
    """
    big1, u1, u2 = _split(as_two_part(utc))

    iy, im, iday, fd = jd2cal((u1, u2))
    dat0 = dat(iy, im, iday, 0.0)
    dat12 = dat(iy, im, iday, 0.5)

    # TAI-UTC at 0h tomorrow, to detect jumps.
    iyt, imt, idt, _ = jd2cal((u1 + 1.5, u2 - fd))
    dat24 = dat(iyt, imt, idt, 0.0)

    # Separate TAI-UTC change into per-day (DLOD) and any jump (DLEAP).
    dlod = 2.0 * (dat12.value - dat0.value)
    dleap = dat24.value - (dat0.value + dlod)

    # Remove any scaling applied to spread leap into preceding day.
    fd *= (DAYSEC + dleap) / DAYSEC

    # Scale from (pre-1972) UTC seconds to SI seconds.
    fd *= (DAYSEC + dlod) / DAYSEC

    # Today's calendar date to 2-part JD.
    z1, z2 = cal2jd(iy, im, iday)

    # Assemble the TAI result, preserving the UTC split and order.
    a2 = z1 - u1
    a2 += z2
    a2 += fd + dat0.value / DAYSEC

    return StatusResult(
        _join(big1, u1, a2), merge_warnings(dat0.warnings, dat12.warnings, dat24.warnings)
    )


def tai_to_utc(tai: DateLike) -> StatusResult[TwoPartDate]:
    """TAI to UTC, by iterating utc_to_tai."""
    big1, a1, a2 = _split(as_two_part(tai))

    # Initial guess for UTC.
    u1 = a1
    u2 = a2

    # Iterate (though in most cases just once is enough).
    result = None
    for _ in range(3):
        result = utc_to_tai((u1, u2))
        g1, g2 = result.value
        u2 += a1 - g1
        u2 += a2 - g2

    return StatusResult(_join(big1, u1, u2), result.warnings)


def tai_to_tt(tai: DateLike) -> TwoPartDate:
    """TAI to TT (fixed 32.184s)."""
    return _offset(as_two_part(tai), TTMTAI / DAYSEC)


def tt_to_tai(tt: DateLike) -> TwoPartDate:
    """TT to TAI."""
    return _offset(as_two_part(tt), -TTMTAI / DAYSEC)


def tt_to_tdb(tt: DateLike, dtr: float) -> TwoPartDate:
    """TT to TDB given TDB-TT in seconds."""
    return _offset(as_two_part(tt), dtr / DAYSEC)


def tdb_to_tt(tdb: DateLike, dtr: float) -> TwoPartDate:
    """TDB to TT given TDB-TT in seconds."""
    return _offset(as_two_part(tdb), -dtr / DAYSEC)


def tai_to_ut1(tai: DateLike, dta: float) -> TwoPartDate:
    """TAI to UT1 given UT1-TAI in seconds."""
    return _offset(as_two_part(tai), dta / DAYSEC)


def ut1_to_tai(ut1: DateLike, dta: float) -> TwoPartDate:
    """UT1 to TAI given UT1-TAI in seconds."""
    return _offset(as_two_part(ut1), -dta / DAYSEC)


def tdb_to_tcb(tdb: DateLike) -> TwoPartDate:
    """TDB to TCB (IAU 2006 resolution B3 definition of TDB)."""
    date = as_two_part(tdb)
    t77td = DJM0 + DJM77
    t77tf = TTMTAI / DAYSEC
    tdb0 = TDB0 / DAYSEC
    elbb = ELB / (1.0 - ELB)

    if abs(date.jd1) > abs(date.jd2):
        d = t77td - date.jd1
        f = date.jd2 - tdb0
        return TwoPartDate(date.jd1, f - (d - (f - t77tf)) * elbb)
    d = t77td - date.jd2
    f = date.jd1 - tdb0
    return TwoPartDate(f - (d - (f - t77tf)) * elbb, date.jd2)


def tcb_to_tdb(tcb: DateLike) -> TwoPartDate:
    """TCB to TDB."""
    date = as_two_part(tcb)
    t77td = DJM0 + DJM77
    t77tf = TTMTAI / DAYSEC
    tdb0 = TDB0 / DAYSEC

    if abs(date.jd1) > abs(date.jd2):
        d = date.jd1 - t77td
        return TwoPartDate(date.jd1, date.jd2 + tdb0 - (d + (date.jd2 - t77tf)) * ELB)
    d = date.jd2 - t77td
    return TwoPartDate(date.jd1 + tdb0 - (d + (date.jd1 - t77tf)) * ELB, date.jd2)


def tt_to_tcg(tt: DateLike) -> TwoPartDate:
    """TT to TCG."""
    date = as_two_part(tt)
    elgg = ELG / (1.0 - ELG)

    if abs(date.jd1) > abs(date.jd2):
        return TwoPartDate(
            date.jd1, date.jd2 + ((date.jd1 - DJM0) + (date.jd2 - T77_TT_OFFSET)) * elgg
        )
    return TwoPartDate(
        date.jd1 + ((date.jd2 - DJM0) + (date.jd1 - T77_TT_OFFSET)) * elgg, date.jd2
    )


def tcg_to_tt(tcg: DateLike) -> TwoPartDate:
    """TCG to TT."""
    date = as_two_part(tcg)

    if abs(date.jd1) > abs(date.jd2):
        return TwoPartDate(
            date.jd1, date.jd2 - ((date.jd1 - DJM0) + (date.jd2 - T77_TT_OFFSET)) * ELG
        )
    return TwoPartDate(
        date.jd1 - ((date.jd2 - DJM0) + (date.jd1 - T77_TT_OFFSET)) * ELG, date.jd2
    )


def utc_to_ut1(utc: DateLike, dut1: float) -> StatusResult[TwoPartDate]:
    """UTC to UT1 given UT1-UTC in seconds.

    ``dut1`` is the value for the UTC date in question; on a leap-second
    day it is the value before the leap.
    """
    utc = as_two_part(utc)

    # Look up TAI-UTC.
    iy, im, iday, _ = jd2cal(utc)
    dat0 = dat(iy, im, iday, 0.0)

    # Form UT1-TAI.
    dta = dut1 - dat0.value

    # UTC to TAI to UT1.
    tai = utc_to_tai(utc)
    return StatusResult(
        tai_to_ut1(tai.value, dta), merge_warnings(dat0.warnings, tai.warnings)
    )


def ut1_to_utc(ut1: DateLike, dut1: float) -> StatusResult[TwoPartDate]:
    """UT1 to UTC given UT1-UTC in seconds.

    Handles dates within a day of a leap second, where UT1-UTC jumps.
    """
    big1, u1, u2 = _split(as_two_part(ut1))

    # See if the UT1 can possibly be in a leap-second day.
    duts = dut1
    dats1 = 0.0
    warnings = ()
    for i in range(-1, 4):
        iy, im, iday, _ = jd2cal((u1, u2 + float(i)))
        dats2 = dat(iy, im, iday, 0.0)
        warnings = merge_warnings(warnings, dats2.warnings)
        if i == -1:
            dats1 = dats2.value
        ddats = dats2.value - dats1
        if abs(ddats) >= 0.5:
            # Yes, leap second nearby: ensure UT1-UTC is "before" value.
            if ddats * duts >= 0:
                duts -= ddats

            # UT1 for the start of the UTC day that ends in a leap.
            d1, d2 = cal2jd(iy, im, iday)
            us1 = d1
            us2 = d2 - 1.0 + duts / DAYSEC

            # Is the UT1 after this point?
            du = u1 - us1
            du += u2 - us2
            if du > 0:
                # Yes: fraction of the current UTC day that has elapsed.
                fd = du * DAYSEC / (DAYSEC + ddats)

                # Ramp UT1-UTC to bring about SOFA's JD(UTC) convention.
                duts += ddats * (fd if fd <= 1.0 else 1.0)

            break
        dats1 = dats2.value

    # Subtract the (possibly adjusted) UT1-UTC from UT1 to give UTC.
    u2 -= duts / DAYSEC

    return StatusResult(_join(big1, u1, u2), warnings)


# Converter signature used by the routing table: (date, dut1, dtr).
_Hop = Callable[[TwoPartDate, Optional[float], Optional[float]], StatusResult[TwoPartDate]]


def _require(value: Optional[float], kind: ConfigurationKind) -> float:
    if value is None:
        raise ConfigurationError(kind)
    return value


def _plain(fn: Callable[[TwoPartDate], TwoPartDate]) -> _Hop:
    return lambda date, dut1, dtr: StatusResult(fn(date))


_HOPS: Dict[Tuple[TimeScale, TimeScale], _Hop] = {
    (TimeScale.UTC, TimeScale.TAI): lambda date, dut1, dtr: utc_to_tai(date),
    (TimeScale.TAI, TimeScale.UTC): lambda date, dut1, dtr: tai_to_utc(date),
    (TimeScale.UTC, TimeScale.UT1): lambda date, dut1, dtr: utc_to_ut1(
        date, _require(dut1, ConfigurationKind.MISSING_DUT1)
    ),
    (TimeScale.UT1, TimeScale.UTC): lambda date, dut1, dtr: ut1_to_utc(
        date, _require(dut1, ConfigurationKind.MISSING_DUT1)
    ),
    (TimeScale.TAI, TimeScale.TT): _plain(tai_to_tt),
    (TimeScale.TT, TimeScale.TAI): _plain(tt_to_tai),
    (TimeScale.TT, TimeScale.TDB): lambda date, dut1, dtr: StatusResult(
        tt_to_tdb(date, _require(dtr, ConfigurationKind.MISSING_DTR))
    ),
    (TimeScale.TDB, TimeScale.TT): lambda date, dut1, dtr: StatusResult(
        tdb_to_tt(date, _require(dtr, ConfigurationKind.MISSING_DTR))
    ),
    (TimeScale.TDB, TimeScale.TCB): _plain(tdb_to_tcb),
    (TimeScale.TCB, TimeScale.TDB): _plain(tcb_to_tdb),
    (TimeScale.TT, TimeScale.TCG): _plain(tt_to_tcg),
    (TimeScale.TCG, TimeScale.TT): _plain(tcg_to_tt),
}


def conversion_path(from_scale: TimeScale, to_scale: TimeScale) -> List[TimeScale]:
    """Shortest chain of scales linking ``from_scale`` to ``to_scale``."""
    previous: Dict[TimeScale, Optional[TimeScale]] = {from_scale: None}
    queue = deque([from_scale])
    while queue:
        scale = queue.popleft()
        if scale is to_scale:
            break
        for (a, b) in _HOPS:
            if a is scale and b not in previous:
                previous[b] = scale
                queue.append(b)

    path = [to_scale]
    while previous[path[-1]] is not None:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def convert(
    date: DateLike,
    from_scale: Union[str, TimeScale],
    to_scale: Union[str, TimeScale],
    dut1: Optional[float] = None,
    dtr: Optional[float] = None,
) -> StatusResult[TwoPartDate]:
    """Convert a date between any two supported time scales.

    Args:
        date: Date in ``from_scale``
        from_scale: Source scale (TimeScale or name)
        to_scale: Target scale (TimeScale or name)
        dut1: UT1-UTC in seconds, needed for any hop to or from UT1
        dtr: TDB-TT in seconds, needed for any hop to or from TDB/TCB

    Returns:
        StatusResult with the date in ``to_scale`` and the warnings
        collected along the way

    Raises:
        DomainError: UNKNOWN_TIME_SCALE for an unrecognized name
        ConfigurationError: MISSING_DUT1 or MISSING_DTR when a hop needs an
            offset that was not supplied
    """
    source = TimeScale.from_name(from_scale)
    target = TimeScale.from_name(to_scale)
    current = as_two_part(date)

    path = conversion_path(source, target)
    logger.debug(f"Converting {source.value} to {target.value} via {[s.value for s in path]}")

    warnings = ()
    for a, b in zip(path, path[1:]):
        result = _HOPS[(a, b)](current, dut1, dtr)
        current = result.value
        warnings = merge_warnings(warnings, result.warnings)

    return StatusResult(current, warnings)
