"""Angular separations."""

import math
from typing import Sequence

from .pvec import pdp, pm, pxp
from .spherical import s2c


def sepp(a: Sequence[float], b: Sequence[float]) -> float:
    """Angular separation between two p-vectors, in [0, pi].

    Uses atan2 of the cross and dot products, which stays accurate for
    both small and near-antipodal separations. Null inputs give zero.
    """
    axb = pxp(a, b)
    ss = pm(axb)
    cs = pdp(a, b)
    if ss != 0.0 or cs != 0.0:
        return math.atan2(ss, cs)
    return 0.0


def seps(al: float, ap: float, bl: float, bp: float) -> float:
    """Angular separation between two sets of spherical coordinates."""
    return sepp(s2c(al, ap), s2c(bl, bp))
