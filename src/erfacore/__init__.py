"""Fundamental astronomy: time scales, Earth rotation, precession-nutation
and catalog propagation, reproducing the SOFA/ERFA routines in Python."""

__version__ = "0.1.0"
