"""Reference ellipsoids."""

from enum import Enum
from typing import Tuple, Union

from ..errors import DomainError, ErrorKind


class Ellipsoid(Enum):
    """Standard reference ellipsoids, as (equatorial radius m, flattening)."""

    WGS84 = (6378137.0, 1.0 / 298.257223563)
    GRS80 = (6378137.0, 1.0 / 298.257222101)
    WGS72 = (6378135.0, 1.0 / 298.26)

    @property
    def a(self) -> float:
        return self.value[0]

    @property
    def f(self) -> float:
        return self.value[1]

    @classmethod
    def from_name(cls, name: Union[str, "Ellipsoid"]) -> "Ellipsoid":
        """Look up an ellipsoid by name.

        Raises:
            DomainError: INVALID_ELLIPSOID for an unknown name
        """
        if isinstance(name, Ellipsoid):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError as e:
            raise DomainError(ErrorKind.INVALID_ELLIPSOID, f"unknown ellipsoid {name!r}") from e


def eform(ellipsoid: Union[str, Ellipsoid]) -> Tuple[float, float]:
    """Equatorial radius (m) and flattening of a reference ellipsoid."""
    e = Ellipsoid.from_name(ellipsoid)
    return e.a, e.f
