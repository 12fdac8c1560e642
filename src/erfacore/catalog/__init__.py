"""Star catalog space motion."""

from .space_motion import (
    CatalogEntry,
    pmpx,
    pmsafe,
    propagate_to_true_of_date,
    pvstar,
    starpm,
    starpv,
)

__all__ = [
    "CatalogEntry",
    "pmpx",
    "pmsafe",
    "propagate_to_true_of_date",
    "pvstar",
    "starpm",
    "starpv",
]
