"""Bias-precession-nutation matrices.

The full transformation from GCRS to true equator and equinox of date is
``rbpn = rn * rp * rb``: frame bias first, then precession, then nutation.
"""

from enum import Enum
from typing import NamedTuple, Sequence, Union

from ..constants import DJM0, DJM00
from ..errors import DomainError, ErrorKind
from ..space_time.julian_calc import DateLike
from ..vectors.matrices import rxp, rxr, tr
from ..vectors.types import Matrix3x3, Vector3
from .nutation import nut00a, nut00b, nut06a
from .precession import bp00, fw2m, numat, obl80, pfw06, pr00


class PrecessionNutationModel(Enum):
    """Supported precession-nutation model combinations."""

    # IAU 2000 bias-precession with IAU 2000A nutation
    IAU2000A = "IAU2000A"
    # IAU 2000 bias-precession with IAU 2000B nutation
    IAU2000B = "IAU2000B"
    # IAU 2006 precession with IAU 2000B nutation
    IAU2006_2000B = "IAU2006/2000B"
    # IAU 2006 precession with IAU 2000A nutation adjusted for it
    IAU2006_2000A = "IAU2006/2000A"

    @classmethod
    def from_name(cls, name: Union[str, "PrecessionNutationModel"]) -> "PrecessionNutationModel":
        """Look up a model by value or member name.

        Raises:
            DomainError: UNSUPPORTED_MODEL
        """
        if isinstance(name, PrecessionNutationModel):
            return name
        key = str(name).strip().upper()
        for model in cls:
            if key in (model.value, model.name):
                return model
        raise DomainError(ErrorKind.UNSUPPORTED_MODEL, f"unsupported model {name!r}")


class PrecessionNutation(NamedTuple):
    """Mean obliquity and the matrices of a precession-nutation model."""

    epsa: float
    rb: Matrix3x3
    rp: Matrix3x3
    rbp: Matrix3x3
    rn: Matrix3x3
    rbpn: Matrix3x3


def pn00(tt: DateLike, dpsi: float, deps: float) -> PrecessionNutation:
    """Precession-nutation, IAU 2000 model, given the nutation components.

    Args:
        tt: TT as a two-part Julian Date
        dpsi: Nutation in longitude (radians)
        deps: Nutation in obliquity (radians)
    """
    # IAU 2000 precession-rate adjustments.
    _, depspr = pr00(tt)

    # Mean obliquity, consistent with IAU 2000 precession-nutation.
    epsa = obl80(tt) + depspr

    # Frame bias and precession matrices and their product.
    rb, rp, rbp = bp00(tt)

    # Nutation matrix.
    rn = numat(epsa, dpsi, deps)

    return PrecessionNutation(epsa, rb, rp, rbp, rn, rxr(rn, rbp))


def pn00a(tt: DateLike) -> PrecessionNutation:
    """Precession-nutation, IAU 2000A model."""
    dpsi, deps = nut00a(tt)
    return pn00(tt, dpsi, deps)


def pnm00a(tt: DateLike) -> Matrix3x3:
    """Bias-precession-nutation matrix, IAU 2000A model."""
    return pn00a(tt).rbpn


def pn00b(tt: DateLike) -> PrecessionNutation:
    """Precession-nutation, IAU 2000B model."""
    dpsi, deps = nut00b(tt)
    return pn00(tt, dpsi, deps)


def pnm00b(tt: DateLike) -> Matrix3x3:
    """Bias-precession-nutation matrix, IAU 2000B model."""
    return pn00b(tt).rbpn


def pn06(tt: DateLike, dpsi: float, deps: float) -> PrecessionNutation:
    """Precession-nutation, IAU 2006 model, given the nutation components."""
    # Bias-precession Fukushima-Williams angles of J2000.0 = frame bias.
    gamb, phib, psib, eps = pfw06((DJM0, DJM00))
    rb = fw2m(gamb, phib, psib, eps)

    # Bias-precession Fukushima-Williams angles of date.
    gamb, phib, psib, eps = pfw06(tt)
    rbp = fw2m(gamb, phib, psib, eps)

    # Solve for precession matrix.
    rp = rxr(rbp, tr(rb))

    # Equinox-based bias-precession-nutation matrix.
    rbpn = fw2m(gamb, phib, psib + dpsi, eps + deps)

    # Solve for nutation matrix.
    rn = rxr(rbpn, tr(rbp))

    return PrecessionNutation(eps, rb, rp, rbp, rn, rbpn)


def pn06b(tt: DateLike) -> PrecessionNutation:
    """Precession-nutation, IAU 2006 precession with IAU 2000B nutation.

    The nutation components are used as IAU 2000B gives them, without the
    IAU 2006 rescaling applied to the full 2000A series.
    """
    dpsi, deps = nut00b(tt)
    return pn06(tt, dpsi, deps)


def pn06a(tt: DateLike) -> PrecessionNutation:
    """Precession-nutation, IAU 2006/2000A model."""
    dpsi, deps = nut06a(tt)
    return pn06(tt, dpsi, deps)


def pnm06a(tt: DateLike) -> Matrix3x3:
    """Bias-precession-nutation matrix, IAU 2006/2000A model.

    Built directly from the Fukushima-Williams angles of date with the
    nutation added, as SOFA does.
    """
    gamb, phib, psib, epsa = pfw06(tt)
    dp, de = nut06a(tt)
    return fw2m(gamb, phib, psib + dp, epsa + de)


_MODELS = {
    PrecessionNutationModel.IAU2000A: pn00a,
    PrecessionNutationModel.IAU2000B: pn00b,
    PrecessionNutationModel.IAU2006_2000B: pn06b,
    PrecessionNutationModel.IAU2006_2000A: pn06a,
}


def precession_nutation(
    tt: DateLike,
    model: Union[str, PrecessionNutationModel] = PrecessionNutationModel.IAU2006_2000A,
) -> PrecessionNutation:
    """All precession-nutation quantities for ``model``."""
    model = PrecessionNutationModel.from_name(model)
    builder = _MODELS.get(model)
    if builder is None:
        raise DomainError(ErrorKind.UNSUPPORTED_MODEL, f"no builder for {model!r}")
    return builder(tt)


def bias_precession_nutation_matrix(
    tt: DateLike,
    model: Union[str, PrecessionNutationModel] = PrecessionNutationModel.IAU2006_2000A,
) -> Matrix3x3:
    """GCRS to true-of-date rotation matrix for ``model``.

    Raises:
        DomainError: UNSUPPORTED_MODEL
    """
    return precession_nutation(tt, model).rbpn


def rotate_bias_precession_nutation(
    vector: Sequence[float],
    tt: DateLike,
    model: Union[str, PrecessionNutationModel] = PrecessionNutationModel.IAU2006_2000A,
) -> Vector3:
    """Rotate a GCRS vector into the true equator and equinox of date."""
    return rxp(bias_precession_nutation_matrix(tt, model), vector)
