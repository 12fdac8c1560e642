"""Star catalog space motion.

Catalog coordinates (RA, Dec, proper motions, parallax, radial velocity)
are converted to and from position-velocity vectors in AU and AU/day, and
propagated between epochs with light-time and special-relativity
corrections.
"""

import math
from typing import NamedTuple, Sequence, Tuple, Union

from ..angles import anp
from ..constants import AULT, DAS2R, DAU, DAYSEC, DC, DJM, DJY, DR2AS
from ..errors import DomainError, ErrorKind, StatusResult, WarningKind
from ..logging import get_logger
from ..prenut.bias_precession_nutation import (
    PrecessionNutationModel,
    bias_precession_nutation_matrix,
)
from ..space_time.julian_calc import DateLike, as_two_part
from ..vectors.matrices import rxp
from ..vectors.pvec import pdp, pm, pmp, pn, ppp, pvu, sxp, zp
from ..vectors.separation import seps
from ..vectors.spherical import c2s, pv2s, s2c, s2pv
from ..vectors.types import PVVector, Vector3, as_pv, as_vector

logger = get_logger(__name__)

# Smallest parallax starpv accepts (arcsec); smaller values are overridden.
PXMIN = 1e-7

# Largest speed starpv accepts, as a fraction of c.
VMAX = 0.5

# Maximum number of iterations for the relativistic solution.
IMAX = 100

# Parallax floor applied by pmsafe (arcsec).
PMSAFE_PXMIN = 5e-7

# Factor giving the parallax needed to keep transverse speed below 0.5c.
PMSAFE_F = 326.0


class CatalogEntry(NamedTuple):
    """Catalog astrometry of a star.

    Attributes:
        ra: Right ascension (radians)
        dec: Declination (radians)
        pmr: RA proper motion (radians/year), i.e. dRA/dt, not cos(Dec) dRA/dt
        pmd: Dec proper motion (radians/year)
        px: Parallax (arcsec)
        rv: Radial velocity (km/s, positive = receding)
    """

    ra: float
    dec: float
    pmr: float
    pmd: float
    px: float
    rv: float


def starpv(
    ra: float, dec: float, pmr: float, pmd: float, px: float, rv: float
) -> StatusResult[PVVector]:
    """Catalog coordinates to a space-motion pv-vector.

    Returns:
        StatusResult with (position AU, velocity AU/day). Warnings:
        DISTANCE_OVERRIDDEN when the parallax was below PXMIN,
        EXCESSIVE_SPEED when the velocity exceeded VMAX*c and was zeroed,
        NO_CONVERGENCE when the relativistic iteration did not settle
    """
    warnings = []

    # Distance (AU).
    if px >= PXMIN:
        w = px
    else:
        w = PXMIN
        warnings.append(WarningKind.DISTANCE_OVERRIDDEN)
    r = DR2AS / w

    # Radial speed (AU/day).
    rd = DAYSEC * rv * 1e3 / DAU

    # Proper motion (radian/day).
    rad = pmr / DJY
    decd = pmd / DJY

    # To pv-vector (AU,AU/day).
    position, velocity = s2pv(ra, dec, r, rad, decd, rd)

    # If excessive velocity, arbitrarily set it to zero.
    v = pm(velocity)
    if v / DC > VMAX:
        velocity = zp()
        warnings.append(WarningKind.EXCESSIVE_SPEED)

    # Isolate the radial component of the velocity (AU/day).
    _, x = pn(position)
    vsr = pdp(x, velocity)
    usr = sxp(vsr, x)

    # Isolate the transverse component of the velocity (AU/day).
    ust = pmp(velocity, usr)
    vst = pm(ust)

    # Special-relativity dimensionless parameters.
    betsr = vsr / DC
    betst = vst / DC

    # Determine the observed-to-inertial conversion factor iteratively.
    bett = betst
    betr = betsr
    d = 0.0
    dl = 0.0
    od = 0.0
    odl = 0.0
    odd = 0.0
    oddl = 0.0
    converged = False
    for i in range(IMAX):
        d = 1.0 + betr
        w = betr * betr + bett * bett
        dl = -w / (math.sqrt(1.0 - w) + 1.0)
        betr = d * betsr + dl
        bett = d * betst
        if i > 0:
            dd = abs(d - od)
            ddl = abs(dl - odl)
            if i > 1 and dd >= odd and ddl >= oddl:
                converged = True
                break
            odd = dd
            oddl = ddl
        od = d
        odl = dl
    if not converged:
        warnings.append(WarningKind.NO_CONVERGENCE)

    # Scale observed tangential velocity vector into inertial (AU/d).
    ut = sxp(d, ust)

    # Compute inertial radial velocity vector (AU/d).
    ur = sxp(DC * (d * betsr + dl), x)

    if warnings:
        logger.debug(f"starpv warnings: {[kind.name for kind in warnings]}")

    # Combine the two to obtain the inertial space velocity vector.
    return StatusResult((position, ppp(ur, ut)), tuple(warnings))


def pvstar(pv: Sequence[Sequence[float]]) -> CatalogEntry:
    """Space-motion pv-vector to catalog coordinates.

    Raises:
        DomainError: SUPERLUMINAL when the velocity implies a speed of light
            or more, NULL_POSITION when the position is the origin
    """
    position, velocity = as_pv(pv)

    # Isolate the radial component of the velocity (AU/day, inertial).
    _, x = pn(position)
    vr = pdp(x, velocity)
    ur = sxp(vr, x)

    # Isolate the transverse component of the velocity (AU/day, inertial).
    ut = pmp(velocity, ur)
    vt = pm(ut)

    # Special-relativity dimensionless parameters.
    bett = vt / DC
    betr = vr / DC

    # The observed-to-inertial correction terms.
    d = 1.0 + betr
    w = betr * betr + bett * bett
    if d == 0.0 or w > 1.0:
        raise DomainError(ErrorKind.SUPERLUMINAL, "space motion is superluminal")
    dl = -w / (math.sqrt(1.0 - w) + 1.0)

    # Scale inertial tangential velocity vector into observed (AU/d).
    ust = sxp(1.0 / d, ut)

    # Compute observed radial velocity vector (AU/d).
    usr = sxp(DC * (betr - dl) / d, x)

    # Combine the two to obtain the observed velocity vector.
    observed = (position, ppp(usr, ust))

    # Cartesian to spherical.
    a, dec, r, rad, decd, rd = pv2s(observed)
    if r == 0.0:
        raise DomainError(ErrorKind.NULL_POSITION, "position vector is null")

    return CatalogEntry(
        anp(a),
        dec,
        rad * DJY,
        decd * DJY,
        DR2AS / r,
        1e-3 * rd * DAU / DAYSEC,
    )


def starpm(entry: CatalogEntry, ep1: DateLike, ep2: DateLike) -> StatusResult[CatalogEntry]:
    """Propagate catalog coordinates from one epoch to another.

    Args:
        entry: Catalog astrometry at ``ep1``
        ep1: "Before" epoch, TDB two-part Julian Date
        ep2: "After" epoch, TDB two-part Julian Date

    Returns:
        StatusResult with the astrometry at ``ep2`` and any starpv warnings

    Raises:
        DomainError: SUPERLUMINAL if the space motion cannot be propagated
    """
    ep1a, ep1b = as_two_part(ep1)
    ep2a, ep2b = as_two_part(ep2)

    # RA,Dec etc. at the "before" epoch to space motion pv-vector.
    start = starpv(*entry)
    pv1 = start.value

    # Light time when observed (days).
    tl1 = pm(pv1[0]) / DC

    # Time interval, "before" to "after" (days).
    dt = (ep2a - ep1a) + (ep2b - ep1b)

    # Move star along track from the "before" observed position to the
    # "after" geometric position.
    pv = pvu(dt + tl1, pv1)

    # From this geometric position, deduce the observed light time (days)
    # at the "after" epoch.
    r2 = pdp(pv[0], pv[0])
    rdv = pdp(pv[0], pv[1])
    v2 = pdp(pv[1], pv[1])
    c2mv2 = DC * DC - v2
    if c2mv2 <= 0:
        raise DomainError(ErrorKind.SUPERLUMINAL, "space motion is superluminal")
    tl2 = (-rdv + math.sqrt(rdv * rdv + c2mv2 * r2)) / c2mv2

    # Move the position along track from the observed place at the
    # "before" epoch to the observed place at the "after" epoch.
    pv2 = pvu(dt + (tl1 - tl2), pv1)

    return StatusResult(pvstar(pv2), start.warnings)


def pmsafe(entry: CatalogEntry, ep1: DateLike, ep2: DateLike) -> StatusResult[CatalogEntry]:
    """starpm with the parallax raised where needed to keep speeds sane.

    Catalog entries with zero or tiny parallax but significant proper motion
    would otherwise imply superluminal transverse speeds. The parallax is
    raised to at least 326 times the yearly proper motion (and at least
    5e-7 arcsec); when that happens PARALLAX_OVERRIDDEN is attached.
    """
    ra1, dec1, pmr1, pmd1, px1, rv1 = entry

    # Proper motion in one year (radians).
    pmy = seps(ra1, dec1, ra1 + pmr1, dec1 + pmd1)

    # Override the parallax to reduce the chances of a warning status.
    overridden = False
    px1a = px1
    pmy *= PMSAFE_F
    if px1a < pmy:
        overridden = True
        px1a = pmy
    if px1a < PMSAFE_PXMIN:
        overridden = True
        px1a = PMSAFE_PXMIN

    # Carry out the transformation using the modified parallax.
    result = starpm(CatalogEntry(ra1, dec1, pmr1, pmd1, px1a, rv1), ep1, ep2)

    if overridden and WarningKind.DISTANCE_OVERRIDDEN not in result.warnings:
        logger.debug(f"pmsafe: parallax {px1!r} raised to {px1a!r}")
        return result.with_warnings(WarningKind.PARALLAX_OVERRIDDEN)
    return result


def pmpx(
    rc: float,
    dc: float,
    pr: float,
    pd: float,
    px: float,
    rv: float,
    pmt: float,
    pob: Sequence[float],
) -> Vector3:
    """Proper motion and parallax applied to a catalog direction.

    Args:
        rc: ICRS right ascension at catalog epoch (radians)
        dc: ICRS declination at catalog epoch (radians)
        pr: RA proper motion (radians/year)
        pd: Dec proper motion (radians/year)
        px: Parallax (arcsec)
        rv: Radial velocity (km/s, positive = receding)
        pmt: Proper motion time interval (SSB, Julian years)
        pob: SSB to observer vector (AU)

    Returns:
        Coordinate direction (BCRS unit vector)
    """
    pob = as_vector(pob)

    # Km/s to au/year
    vf = DAYSEC * DJM / DAU

    # Light time for 1 au, Julian years
    aulty = AULT / DAYSEC / DJY

    # Spherical coordinates to unit vector (and useful functions).
    sr = math.sin(rc)
    cr = math.cos(rc)
    sd = math.sin(dc)
    cd = math.cos(dc)
    x = cr * cd
    y = sr * cd
    z = sd
    p = (x, y, z)

    # Proper motion time interval (y) including Roemer effect.
    dt = pmt + pdp(p, pob) * aulty

    # Space motion (radians per year).
    pxr = px * DAS2R
    w = vf * rv * pxr
    pdz = pd * z
    pmv = (
        -pr * y - pdz * cr + w * x,
        pr * x - pdz * sr + w * y,
        pd * cd + w * z,
    )

    # Coordinate direction of star (unit vector, BCRS).
    moved = tuple(p[i] + (dt * pmv[i] - pxr * pob[i]) for i in range(3))
    return pn(moved)[1]


def propagate_to_true_of_date(
    entry: CatalogEntry,
    ep1: DateLike,
    tt: DateLike,
    model: Union[str, PrecessionNutationModel] = PrecessionNutationModel.IAU2006_2000A,
) -> StatusResult[Tuple[float, float]]:
    """Catalog place at ``ep1`` to (RA, Dec) on the true equator and equinox of ``tt``.

    Space motion is applied with :func:`pmsafe` (TT standing in for TDB),
    then the direction is rotated by the bias-precession-nutation matrix of
    ``model``. Aberration and light deflection are not applied.
    """
    moved = pmsafe(entry, ep1, tt)
    direction = s2c(moved.value.ra, moved.value.dec)
    ra, dec = c2s(rxp(bias_precession_nutation_matrix(tt, model), direction))
    return StatusResult((anp(ra), dec), moved.warnings)
