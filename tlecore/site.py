"""A ground observing site on the Earth's surface."""

from __future__ import annotations

import math

from tlecore.constants import PI, deg2rad, sqr
from tlecore.coord import EciTime, Geo, Topo
from tlecore.julian import Julian
from tlecore.vector import Vector


def _azimuth(top_s: float, top_e: float) -> float:
    if top_s != 0.0:
        return math.atan(-top_e / top_s)
    if top_e == 0.0:
        return math.nan
    # Division by zero gives a signed infinity, whose arctangent is +-pi/2.
    sign = math.copysign(1.0, -top_e) * math.copysign(1.0, top_s)
    return math.copysign(PI / 2.0, sign)


class Site:
    """A named ground location given by geodetic latitude, longitude and altitude."""

    def __init__(
        self, lat_deg: float, lon_deg: float, alt_km: float, name: str = ""
    ) -> None:
        self.geo = Geo(deg2rad(lat_deg), deg2rad(lon_deg), alt_km)
        self.name = name

    @classmethod
    def from_geo(cls, geo: Geo) -> Site:
        """Create an unnamed site at the given geodetic coordinates."""
        site = cls.__new__(cls)
        site.geo = geo
        site.name = ""
        return site

    def position_eci(self, date: Julian) -> EciTime:
        """ECI coordinates of the site at ``date``."""
        return EciTime.from_geo(self.geo, date)

    def look_angle(self, eci: EciTime) -> Topo:
        """Azimuth, elevation, range and range rate to an object at ``eci``."""
        date = eci.date
        site = EciTime.from_geo(self.geo, date)

        rate_vec = Vector(
            eci.velocity.x - site.velocity.x,
            eci.velocity.y - site.velocity.y,
            eci.velocity.z - site.velocity.z,
        )
        x = eci.position.x - site.position.x
        y = eci.position.y - site.position.y
        z = eci.position.z - site.position.z
        w = math.sqrt(sqr(x) + sqr(y) + sqr(z))

        theta = date.to_lmst(self.longitude_rad())
        sin_lat = math.sin(self.latitude_rad())
        cos_lat = math.cos(self.latitude_rad())
        sin_theta = math.sin(theta)
        cos_theta = math.cos(theta)

        top_s = sin_lat * cos_theta * x + sin_lat * sin_theta * y - cos_lat * z
        top_e = -sin_theta * x + cos_theta * y
        top_z = cos_lat * cos_theta * x + cos_lat * sin_theta * y + sin_lat * z

        az = _azimuth(top_s, top_e)
        if top_s > 0.0:
            az += PI
        if az < 0.0:
            az += 2.0 * PI

        el = math.asin(max(-1.0, min(1.0, top_z / w)))
        rate = (x * rate_vec.x + y * rate_vec.y + z * rate_vec.z) / w

        return Topo(az, el, w, rate)

    def latitude_rad(self) -> float:
        return self.geo.latitude

    def longitude_rad(self) -> float:
        return self.geo.longitude

    def latitude_deg(self) -> float:
        return self.geo.latitude_deg()

    def longitude_deg(self) -> float:
        return self.geo.longitude_deg()

    def altitude_km(self) -> float:
        return self.geo.altitude

    def __str__(self) -> str:
        if not self.name:
            return str(self.geo)
        return f"{self.name} {self.geo}"

    def __repr__(self) -> str:
        return f"Site(geo={self.geo!r}, name={self.name!r})"