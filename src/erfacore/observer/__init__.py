"""Observer geometry: reference ellipsoids and horizon coordinates."""

from .ellipsoid import Ellipsoid, eform
from .geodetic import gc2gd, gc2gde, gd2gc, gd2gce
from .horizon import ae2hd, hd2ae, hd2pa

__all__ = ["Ellipsoid", "eform", "gc2gd", "gc2gde", "gd2gc", "gd2gce", "ae2hd", "hd2ae", "hd2pa"]
