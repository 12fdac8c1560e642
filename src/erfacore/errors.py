"""Error taxonomy and status-carrying results.

SOFA signals problems with integer status codes: positive
values mean "result computed but of dubious accuracy", negative values mean
"no usable result". Here the positive codes become :class:`WarningKind`
members attached to a :class:`StatusResult`, and the negative codes become
exceptions carrying an enumerated kind so callers can branch on the cause.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")


class WarningKind(Enum):
    """Reasons a computed value may be of degraded accuracy."""

    PREDATES_LEAP_SECOND_TABLE = "date predates the leap-second table"
    BEYOND_LEAP_SECOND_TABLE = "date extrapolated past the leap-second table"
    TIME_PAST_END_OF_DAY = "time of day is past the end of the day"
    DISTANCE_OVERRIDDEN = "parallax too small, distance overridden"
    EXCESSIVE_SPEED = "excessive velocity, set to zero"
    NO_CONVERGENCE = "relativistic solution did not converge"
    PARALLAX_OVERRIDDEN = "parallax increased to limit transverse speed"


class ErrorKind(Enum):
    """Causes of a :class:`DomainError`."""

    NOT_FINITE = "value is NaN or infinite"
    BAD_YEAR = "year out of range"
    BAD_MONTH = "month out of range"
    BAD_DAY = "day out of range"
    BAD_FRACTION = "fraction of day out of range"
    BAD_HOUR = "hour out of range"
    BAD_MINUTE = "minute out of range"
    BAD_SECOND = "second out of range"
    BAD_DEGREES = "degrees out of range"
    BAD_ARCMINUTES = "arcminutes out of range"
    BAD_ARCSECONDS = "arcseconds out of range"
    JULIAN_DATE_OUT_OF_RANGE = "Julian Date out of range"
    UNKNOWN_TIME_SCALE = "unknown time scale"
    ZERO_VECTOR = "zero-length vector"
    SINGULAR_MATRIX = "matrix is singular"
    DIMENSION_MISMATCH = "wrong vector or matrix shape"
    UNSUPPORTED_MODEL = "unsupported model"
    UNKNOWN_ANGLE_RANGE = "unknown angle range"
    INVALID_ELLIPSOID = "invalid ellipsoid parameters"
    UNREALISTIC_INPUT = "unrealistic input"
    SUPERLUMINAL = "superluminal speed"
    NULL_POSITION = "null position vector"
    NAIVE_DATETIME = "datetime has no timezone"


class ConfigurationKind(Enum):
    """Externally measured quantities a caller failed to supply."""

    MISSING_DUT1 = "UT1-UTC not supplied"
    MISSING_DTR = "TDB-TT not supplied"


class ErfacoreError(Exception):
    """Base class for all erfacore failures."""

    pass


class DomainError(ErfacoreError, ValueError):
    """Raised when inputs make the computation impossible."""

    def __init__(self, kind: ErrorKind, message: Optional[str] = None) -> None:
        self.kind = kind
        super().__init__(message or kind.value)


class ConfigurationError(ErfacoreError):
    """Raised when a required externally measured offset was not supplied."""

    def __init__(self, kind: ConfigurationKind, message: Optional[str] = None) -> None:
        self.kind = kind
        super().__init__(message or kind.value)


def merge_warnings(*groups: Iterable[WarningKind]) -> Tuple[WarningKind, ...]:
    """Concatenate warning groups, keeping first-seen order and dropping repeats."""
    merged = []
    for group in groups:
        for kind in group:
            if kind not in merged:
                merged.append(kind)
    return tuple(merged)


@dataclass(frozen=True)
class StatusResult(Generic[T]):
    """A computed value with any accuracy warnings attached."""

    value: T
    warnings: Tuple[WarningKind, ...] = ()

    @property
    def warning(self) -> Optional[WarningKind]:
        """The first warning, or None."""
        return self.warnings[0] if self.warnings else None

    @property
    def ok(self) -> bool:
        """True when the result carries no warning."""
        return not self.warnings

    def with_warnings(self, *kinds: WarningKind) -> "StatusResult[T]":
        """Return a copy with further warnings appended."""
        return StatusResult(self.value, merge_warnings(self.warnings, kinds))
