"""Vector, matrix and spherical-coordinate utilities."""

from .types import Matrix3x3, PVVector, Vector3, as_matrix, as_pv, as_vector
from .pvec import pdp, pm, pmp, pn, ppp, ppsp, pvppv, pvu, pxp, sxp, unit_vector, zp
from .matrices import (
    SINGULAR_DETERMINANT_THRESHOLD,
    determinant,
    inverse,
    ir,
    rm2v,
    rv2m,
    rx,
    rxp,
    rxpv,
    rxr,
    ry,
    rz,
    tr,
    trxp,
    zr,
)
from .spherical import c2s, p2s, pv2s, s2c, s2p, s2pv
from .separation import sepp, seps

__all__ = [
    "Matrix3x3",
    "PVVector",
    "Vector3",
    "as_matrix",
    "as_pv",
    "as_vector",
    "pdp",
    "pm",
    "pmp",
    "pn",
    "ppp",
    "ppsp",
    "pvppv",
    "pvu",
    "pxp",
    "sxp",
    "unit_vector",
    "zp",
    "SINGULAR_DETERMINANT_THRESHOLD",
    "determinant",
    "inverse",
    "ir",
    "rm2v",
    "rv2m",
    "rx",
    "rxp",
    "rxpv",
    "rxr",
    "ry",
    "rz",
    "tr",
    "trxp",
    "zr",
    "c2s",
    "p2s",
    "pv2s",
    "s2c",
    "s2p",
    "s2pv",
    "sepp",
    "seps",
]
