"""Earth-centred inertial, geodetic and topocentric coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from tlecore.constants import (
    F,
    OMEGA_E,
    PI,
    SEC_PER_DAY,
    TWOPI,
    XKMPER_WGS72,
    ac_tan,
    rad2deg,
    sqr,
)
from tlecore.julian import Julian
from tlecore.vector import Vector

_LATITUDE_TOLERANCE = 1.0e-07


def _geo_to_eci_vectors(geo: Geo, date: Julian) -> tuple[Vector, Vector]:
    """Position (km) and velocity (km/s) of a point fixed on the rotating Earth.

    Treats the Earth as an oblate spheroid (WGS '72).
    """
    lat = geo.latitude
    alt = geo.altitude

    theta = date.to_lmst(geo.longitude)
    c = 1.0 / math.sqrt(1.0 + F * (F - 2.0) * sqr(math.sin(lat)))
    s = sqr(1.0 - F) * c
    achcp = (XKMPER_WGS72 * c + alt) * math.cos(lat)

    px = achcp * math.cos(theta)
    py = achcp * math.sin(theta)
    pz = (XKMPER_WGS72 * s + alt) * math.sin(lat)
    position = Vector(px, py, pz, math.sqrt(sqr(px) + sqr(py) + sqr(pz)))

    mfactor = TWOPI * (OMEGA_E / SEC_PER_DAY)
    vx = -mfactor * py
    vy = mfactor * px
    velocity = Vector(vx, vy, 0.0, math.sqrt(sqr(vx) + sqr(vy)))
    return position, velocity


def _eci_to_geo_values(position: Vector, date: Julian) -> tuple[float, float, float]:
    """Latitude (rad), longitude (rad) and altitude (km) of an ECI position."""
    theta = math.fmod(ac_tan(position.y, position.x) - date.to_gmst(), TWOPI)
    theta = math.fmod(theta, TWOPI)
    if theta < 0.0:
        theta += TWOPI

    semi_major = XKMPER_WGS72
    r = math.sqrt(sqr(position.x) + sqr(position.y))
    e2 = F * (2.0 - F)
    lat = ac_tan(position.z, r)

    while True:
        phi = lat
        c = 1.0 / math.sqrt(1.0 - e2 * sqr(math.sin(phi)))
        lat = ac_tan(position.z + semi_major * c * e2 * math.sin(phi), r)
        if abs(lat - phi) <= _LATITUDE_TOLERANCE:
            break

    alt = r / math.cos(lat) - semi_major * c
    return lat, theta, alt


@dataclass(frozen=True)
class Eci:
    """Position (km) and velocity (km/s) in Earth-centred inertial coordinates."""

    position: Vector
    velocity: Vector

    @classmethod
    def from_geo(cls, geo: Geo, date: Julian) -> Eci:
        """ECI coordinates of a geodetic location at ``date``."""
        return cls(*_geo_to_eci_vectors(geo, date))

    def scale_position(self, factor: float) -> Eci:
        """Return a copy with the position vector scaled by ``factor``."""
        return replace(self, position=self.position.scaled(factor))

    def scale_velocity(self, factor: float) -> Eci:
        """Return a copy with the velocity vector scaled by ``factor``."""
        return replace(self, velocity=self.velocity.scaled(factor))


@dataclass(frozen=True)
class EciTime(Eci):
    """ECI coordinates together with the time they refer to."""

    date: Julian

    @classmethod
    def from_geo(cls, geo: Geo, date: Julian) -> EciTime:
        """ECI coordinates of a geodetic location at ``date``."""
        position, velocity = _geo_to_eci_vectors(geo, date)
        return cls(position, velocity, date)

    @classmethod
    def from_geo_time(cls, geo: GeoTime) -> EciTime:
        """ECI coordinates of a timed geodetic location."""
        return cls.from_geo(geo, geo.date)


@dataclass(frozen=True)
class Geo:
    """Geodetic coordinates: radians (negative south / west) and km altitude."""

    latitude: float
    longitude: float
    altitude: float

    @classmethod
    def from_eci(cls, eci: Eci, date: Julian) -> Geo:
        """Geodetic location beneath an ECI position at ``date``."""
        return cls(*_eci_to_geo_values(eci.position, date))

    def latitude_deg(self) -> float:
        return rad2deg(self.latitude)

    def longitude_deg(self) -> float:
        return rad2deg(self.longitude)

    def __str__(self) -> str:
        north = "N" if self.latitude >= 0.0 else "S"
        east = "E" if self.longitude >= 0.0 else "W"
        return "%04.3f%s %05.3f%s %.1fm" % (
            abs(self.latitude_deg()),
            north,
            abs(self.longitude_deg()),
            east,
            self.altitude * 1000.0,
        )


@dataclass(frozen=True)
class GeoTime(Geo):
    """Geodetic coordinates together with the time they refer to."""

    date: Julian

    @classmethod
    def from_eci(cls, eci: Eci, date: Julian) -> GeoTime:
        """Geodetic location beneath an ECI position at ``date``."""
        return cls(*_eci_to_geo_values(eci.position, date), date)

    @classmethod
    def from_eci_time(cls, eci: EciTime) -> GeoTime:
        """Geodetic location beneath a timed ECI position."""
        return cls.from_eci(eci, eci.date)


@dataclass(frozen=True)
class Topo:
    """Topocentric-horizon coordinates.

    Angles in radians, range in km, range rate in km/s (negative means
    approaching the observer).
    """

    azimuth: float
    elevation: float
    range_km: float
    range_rate: float

    def azimuth_deg(self) -> float:
        return rad2deg(self.azimuth)

    def elevation_deg(self) -> float:
        return rad2deg(self.elevation)


@dataclass(frozen=True)
class TopoTime(Topo):
    """Topocentric-horizon coordinates together with their time."""

    date: Julian


__all__ = ["Eci", "EciTime", "Geo", "GeoTime", "Topo", "TopoTime", "PI"]