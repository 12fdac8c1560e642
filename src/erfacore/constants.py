"""Physical and astronomical constants, leap-second table and polynomial
coefficient sets.

Everything here is immutable module-level data. Polynomial coefficient sets
are tuples in ascending power of time and are evaluated with
:func:`erfacore.series.horner`, which reproduces the nested grouping used by
SOFA.
"""

from typing import Tuple

# Pi
DPI = 3.141592653589793238462643

# 2Pi
D2PI = 6.283185307179586476925287

# Radians to degrees
DR2D = 57.29577951308232087679815

# Degrees to radians
DD2R = 1.745329251994329576923691e-2

# Radians to arcseconds
DR2AS = 206264.8062470963551564734

# Arcseconds to radians
DAS2R = 4.848136811095359935899141e-6

# Seconds of time to radians
DS2R = 7.272205216643039903848712e-5

# Arcseconds in a full circle
TURNAS = 1296000.0

# Milliarcseconds to radians
DMAS2R = DAS2R / 1e3

# Length of tropical year B1900 (days)
DTY = 365.242198781

# Seconds per day
DAYSEC = 86400.0

# Days per Julian year
DJY = 365.25

# Days per Julian century
DJC = 36525.0

# Days per Julian millennium
DJM = 365250.0

# Reference epoch (J2000.0), Julian Date
DJ00 = 2451545.0

# Julian Date of Modified Julian Date zero
DJM0 = 2400000.5

# Reference epoch (J2000.0), Modified Julian Date
DJM00 = 51544.5

# 1977 Jan 1.0 as MJD
DJM77 = 43144.0

# TT minus TAI (s)
TTMTAI = 32.184

# Astronomical unit (m, IAU 2012)
DAU = 149597870.7e3

# Speed of light (m/s)
CMPS = 299792458.0

# Light time for 1 au (s)
AULT = DAU / CMPS

# Speed of light (au per day)
DC = DAYSEC / AULT

# L_G = 1 - d(TT)/d(TCG)
ELG = 6.969290134e-10

# L_B = 1 - d(TDB)/d(TCB), and TDB (s) at TAI 1977/1/1.0
ELB = 1.550519768e-8
TDB0 = -6.55e-5

# Schwarzschild radius of the Sun (au)
SRS = 1.97412574336e-8

# ---------------------------------------------------------------------------
# Leap seconds
# ---------------------------------------------------------------------------

# Release year of the leap-second table. Dates more than five years later
# are flagged as beyond the table.
LEAP_SECOND_TABLE_YEAR = 2023

# First year of the integer leap-second era (TAI-UTC = 10s at 1972 Jan 1).
LEAP_SECOND_ERA_START_YEAR = 1972

# (year, month, TAI-UTC in seconds) at each change, in date order.
LEAP_SECOND_TABLE: Tuple[Tuple[int, int, float], ...] = (
    (1960, 1, 1.4178180),
    (1961, 1, 1.4228180),
    (1961, 8, 1.3728180),
    (1962, 1, 1.8458580),
    (1963, 11, 1.9458580),
    (1964, 1, 3.2401300),
    (1964, 4, 3.3401300),
    (1964, 9, 3.4401300),
    (1965, 1, 3.5401300),
    (1965, 3, 3.6401300),
    (1965, 7, 3.7401300),
    (1965, 9, 3.8401300),
    (1966, 1, 4.3131700),
    (1968, 2, 4.2131700),
    (1972, 1, 10.0),
    (1972, 7, 11.0),
    (1973, 1, 12.0),
    (1974, 1, 13.0),
    (1975, 1, 14.0),
    (1976, 1, 15.0),
    (1977, 1, 16.0),
    (1978, 1, 17.0),
    (1979, 1, 18.0),
    (1980, 1, 19.0),
    (1981, 7, 20.0),
    (1982, 7, 21.0),
    (1983, 7, 22.0),
    (1985, 7, 23.0),
    (1988, 1, 24.0),
    (1990, 1, 25.0),
    (1991, 1, 26.0),
    (1992, 7, 27.0),
    (1993, 7, 28.0),
    (1994, 7, 29.0),
    (1996, 1, 30.0),
    (1997, 7, 31.0),
    (1999, 1, 32.0),
    (2006, 1, 33.0),
    (2009, 1, 34.0),
    (2012, 7, 35.0),
    (2015, 7, 36.0),
    (2017, 1, 37.0),
)

# Reference MJD and drift rate (s/day) for the pre-1972 entries above,
# index-aligned with the first rows of LEAP_SECOND_TABLE.
LEAP_SECOND_DRIFT: Tuple[Tuple[float, float], ...] = (
    (37300.0, 0.0012960),
    (37300.0, 0.0012960),
    (37300.0, 0.0012960),
    (37665.0, 0.0011232),
    (37665.0, 0.0011232),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (39126.0, 0.0025920),
    (39126.0, 0.0025920),
)

# ---------------------------------------------------------------------------
# Polynomial coefficient sets (ascending powers of T, Julian centuries TT
# since J2000.0 unless stated)
# ---------------------------------------------------------------------------

# GMST (IAU 1982), seconds of time; the constant term is referred to 0h UT1.
GMST82_COEFFS = (24110.54841 - DAYSEC / 2.0, 8640184.812866, 0.093104, -6.2e-6)

# GMST (IAU 2000), arcseconds, added to the Earth rotation angle.
GMST00_COEFFS = (0.014506, 4612.15739966, 1.39667721, -0.00009344, 0.00001882)

# GMST (IAU 2006), arcseconds, added to the Earth rotation angle.
GMST06_COEFFS = (
    0.014506,
    4612.156534,
    1.3915817,
    -0.00000044,
    -0.000029956,
    -0.0000000368,
)

# Earth rotation angle: fraction of a turn at J2000.0 and rate in turns/day
# (the integer part of the rate is carried by the day fraction).
ERA00_AT_J2000 = 0.7790572732640
ERA00_RATE = 0.00273781191135448

# Mean obliquity, IAU 1980, arcseconds.
OBL80_COEFFS = (84381.448, -46.8150, -0.00059, 0.001813)

# Mean obliquity, IAU 2006, arcseconds.
OBL06_COEFFS = (
    84381.406,
    -46.836769,
    -0.0001831,
    0.00200340,
    -0.000000576,
    -0.0000000434,
)

# IAU 2000 precession-rate corrections (arcsec per century).
PRECOR = -0.29965
OBLCOR = -0.02524

# IAU 2000 frame bias (arcsec).
DPBIAS = -0.041775
DEBIAS = -0.0068192
DRA0 = -0.0146

# J2000.0 obliquity used by the IAU 2000 bias-precession model (arcsec).
EPS0_IAU2000 = 84381.448

# Lieske et al. (1977) precession angles, arcseconds (leading zero term
# so that the whole expression is multiplied by T).
PSIA77_COEFFS = (0.0, 5038.7784, -1.07259, -0.001147)
OMA77_COEFFS = (0.0, 0.0, 0.05127, -0.007726)
CHIA_COEFFS = (0.0, 10.5526, -2.38064, -0.001125)

# IAU 2006 Fukushima-Williams bias-precession angles, arcseconds.
PFW06_GAMB_COEFFS = (
    -0.052928,
    10.556378,
    0.4932044,
    -0.00031238,
    -0.000002788,
    0.0000000260,
)
PFW06_PHIB_COEFFS = (
    84381.412819,
    -46.811016,
    0.0511268,
    0.00053289,
    -0.000000440,
    -0.0000000176,
)
PFW06_PSIB_COEFFS = (
    -0.041775,
    5038.481484,
    1.5584175,
    -0.00018522,
    -0.000026452,
    -0.0000000148,
)

# IAU 2006 precession angles of Hilton et al. (2006), arcseconds. A leading
# zero term means the whole expression is multiplied by T.
P06_EPS0 = 84381.406
P06_PSIA_COEFFS = (0.0, 5038.481507, -1.0790069, -0.00114045, 0.000132851, -0.0000000951)
P06_OMA_COEFFS = (0.0, -0.025754, 0.0512623, -0.00772503, -0.000000467, 0.0000003337)
P06_BPA_COEFFS = (0.0, 4.199094, 0.1939873, -0.00022466, -0.000000912, 0.0000000120)
P06_BQA_COEFFS = (0.0, -46.811015, 0.0510283, 0.00052413, -0.000000646, -0.0000000172)
P06_PIA_COEFFS = (0.0, 46.998973, -0.0334926, -0.00012559, 0.000000113, -0.0000000022)
P06_BPIA_COEFFS = (629546.7936, -867.95758, 0.157992, -0.0005371, -0.00004797, 0.000000072)
P06_CHIA_COEFFS = (0.0, 10.556403, -2.3814292, -0.00121197, 0.000170663, -0.0000000560)
P06_ZA_COEFFS = (-2.650545, 2306.077181, 1.0927348, 0.01826837, -0.000028596, -0.0000002904)
P06_ZETAA_COEFFS = (2.650545, 2306.083227, 0.2988499, 0.01801828, -0.000005971, -0.0000003173)
P06_THETAA_COEFFS = (0.0, 2004.191903, -0.4294934, -0.04182264, -0.000007089, -0.0000001274)
P06_PA_COEFFS = (0.0, 5028.796195, 1.1054348, 0.00007964, -0.000023857, -0.0000000383)
P06_GAM_COEFFS = (0.0, 10.556403, 0.4932044, -0.00031238, -0.000002788, 0.0000000260)
P06_PHI_COEFFS = (0.0, -46.811015, 0.0511269, 0.00053289, -0.000000440, -0.0000000176)
P06_PSI_COEFFS = (0.0, 5038.481507, 1.5584176, -0.00018522, -0.000026452, -0.0000000148)

# CIO locator s+XY/2 polynomial part (arcsec), IAU 2006/2000A.
S06_POLY_COEFFS = (
    94.00e-6,
    3808.65e-6,
    -122.68e-6,
    -72574.11e-6,
    27.98e-6,
    15.62e-6,
)

# IAU 2000B fixed offsets standing in for the planetary nutation terms
# (milliarcseconds).
NUT00B_DPPLAN = -0.135
NUT00B_DEPLAN = 0.388
