"""Frame bias, precession and nutation."""

from .bias_precession_nutation import (
    PrecessionNutation,
    PrecessionNutationModel,
    bias_precession_nutation_matrix,
    pn00,
    pn00a,
    pn00b,
    pn06,
    pn06a,
    pn06b,
    pnm00a,
    pnm00b,
    pnm06a,
    precession_nutation,
    rotate_bias_precession_nutation,
)
from .cio import bpn2xy, c2ixys, eors, s06
from .nutation import nut00a, nut00b, nut06a
from .precession import (
    PrecessionAngles06,
    bi00,
    bp00,
    bp06,
    fw2m,
    numat,
    obl06,
    obl80,
    p06e,
    pfw06,
    pmat06,
    pmat76,
    pr00,
    prec76,
)

__all__ = [
    "PrecessionNutation",
    "PrecessionNutationModel",
    "bias_precession_nutation_matrix",
    "pn00",
    "pn00a",
    "pn00b",
    "pn06",
    "pn06a",
    "pn06b",
    "pnm00a",
    "pnm00b",
    "pnm06a",
    "precession_nutation",
    "rotate_bias_precession_nutation",
    "bpn2xy",
    "c2ixys",
    "eors",
    "s06",
    "nut00a",
    "nut00b",
    "nut06a",
    "PrecessionAngles06",
    "bi00",
    "bp00",
    "bp06",
    "fw2m",
    "numat",
    "obl06",
    "obl80",
    "p06e",
    "pfw06",
    "pmat06",
    "pmat76",
    "pr00",
    "prec76",
]
