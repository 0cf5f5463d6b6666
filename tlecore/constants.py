"""Physical constants and small angle helpers used by the orbit code."""

import math

PI = 3.141592653589793
TWOPI = 2.0 * PI
RADS_PER_DEG = PI / 180.0

GM = 398601.2  # Earth gravitational constant, km^3/sec^2
GEOSYNC_ALT = 42241.892  # km
EARTH_DIA = 12800.0  # km
DAY_SIDERAL = (23 * 3600) + (56 * 60) + 4.09  # sec
DAY_24HR = 24 * 3600  # sec

AE = 1.0
AU = 149597870.0  # Astronomical unit (km) (IAU 76)
SR = 696000.0  # Solar radius (km) (IAU 76)
XKMPER_WGS72 = 6378.135  # Earth equatorial radius, km (WGS '72)
F = 1.0 / 298.26  # Earth flattening (WGS '72)
GE = 398600.8  # Earth gravitational constant (WGS '72)
J2 = 1.082616e-3  # J2 harmonic (WGS '72)
J3 = -2.53881e-6  # J3 harmonic (WGS '72)
J4 = -1.65597e-6  # J4 harmonic (WGS '72)
CK2 = J2 / 2.0
CK4 = -3.0 * J4 / 8.0
XJ3 = J3
QO = AE + 120.0 / XKMPER_WGS72
S = AE + 78.0 / XKMPER_WGS72
HR_PER_DAY = 24.0  # hours per solar day
MIN_PER_DAY = 1440.0  # minutes per solar day
SEC_PER_DAY = 86400.0  # seconds per solar day
OMEGA_E = 1.00273790934  # earth rotation per sidereal day
XKE = math.sqrt(3600.0 * GE / (XKMPER_WGS72 * XKMPER_WGS72 * XKMPER_WGS72))
QOMS2T = (QO - S) ** 4


def sqr(x: float) -> float:
    """Return x squared."""
    return x * x


def fmod2p(arg: float) -> float:
    """Reduce an angle in radians to the range [0, 2*pi)."""
    modu = math.fmod(arg, TWOPI)
    if modu < 0.0:
        modu += TWOPI
    return modu


def ac_tan(sinx: float, cosx: float) -> float:
    """Arctangent of sinx / cosx that keeps the correct quadrant."""
    if cosx == 0.0:
        return PI / 2.0 if sinx > 0.0 else 3.0 * PI / 2.0
    if cosx > 0.0:
        return math.atan(sinx / cosx)
    return PI + math.atan(sinx / cosx)


def rad2deg(r: float) -> float:
    """Convert radians to degrees."""
    return r * (180.0 / PI)


def deg2rad(d: float) -> float:
    """Convert degrees to radians."""
    return d * (PI / 180.0)