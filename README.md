# tlecore

Building blocks for working with NORAD two-line element sets (TLEs) and
the Earth coordinate systems around them.

## Modules

- `tlecore.tle`: `Tle` holds a satellite name and its two data lines.
  `Tle.field(fld, units)` returns a numeric field. With `Units.RAD`, the
  angle fields (`Field.I`, `Field.RAAN`, `Field.ARGPER`, `Field.M`) are
  converted to radians. `Tle.field_text(fld, with_units)` returns the
  field's text, optionally followed by its unit name. Three helpers work on
  single lines:
  - `is_valid_line(line, kind)` checks the shape of a name line or data
    line, with `kind` a `TleLine`.
  - `checksum(line)` computes the modulo-10 line checksum.
  - `exp_to_float_text(text)` rewrites TLE exponent notation such as
    `" 12345-3"` as `" 0.12345e-3"`.
- `tlecore.julian`: `Julian`, a Julian date. It can be built from a year and
  day of year (`from_year_day`), a Unix timestamp (`from_timestamp`) or a
  calendar date (`from_calendar`). It provides:
  - sidereal time (`to_gmst`, `to_lmst`);
  - conversion back to a timestamp (`to_timestamp`) and to calendar
    components (`components`);
  - offsets from standard epochs;
  - `add_*` and `span_*` arithmetic.

  Years must lie between 1583 and 2999; other years raise `ValueError`.
  The module also provides `is_leap_year`.
- `tlecore.vector`: `Vector`, an immutable x, y, z vector with an extra `w`
  component. It provides `scaled`, subtraction, `dot`, `magnitude` and
  `angle`.
- `tlecore.coord`: Earth-centred inertial coordinates (`Eci`, `EciTime`),
  geodetic coordinates (`Geo`, `GeoTime`) and topocentric coordinates
  (`Topo`, `TopoTime`). `Eci.from_geo` converts a geodetic location to ECI.
  `Geo.from_eci` converts an ECI position to geodetic coordinates on the
  WGS '72 ellipsoid. `str(geo)` gives text such as `38.000N 045.000W 500.0m`.
- `tlecore.site`: `Site`, a ground location. `position_eci(date)` gives its
  ECI position. `look_angle(eci)` gives the azimuth, elevation, range and
  range rate to a target.
- `tlecore.models`:
  - `GravityModel` advances a state `[rx, ry, rz, vx, vy, vz]` one explicit
    Euler step under point-mass gravity (`next_state(state, t, dt)`).
  - `ReactionModel` holds `params` and `model_type`. Its `right_part(t, x)`
    currently returns an empty list for every model type.
- `tlecore.exceptions`: `PropagationError` and its subclass `DecayError`,
  which carries `decay_time` and `satellite_name`.
- `tlecore.constants`: WGS '72 and other physical constants, plus `sqr`,
  `fmod2p`, `ac_tan`, `rad2deg` and `deg2rad`.

## Installation

```
pip install .
```

## Example

```python
from tlecore.tle import Tle, Field, Units
from tlecore.julian import Julian
from tlecore.site import Site

tle = Tle(
    "NOAA 6",
    "1 11416U          86 50.28438588 0.00000140           67960-4 0  5293",
    "2 11416  98.5105  69.3305 0012788  63.2828 296.9658 14.24899292346978",
)
print(tle.field(Field.I, Units.RAD))            # inclination in radians
print(tle.field_text(Field.MMOTION, True))      # "14.24899292 revs / day"

date = Julian.from_calendar(2001, 1, 1, 12, 0, 0.0)
print(date.to_gmst())

site = Site(38.0, -45.0, 0.5, "Observer")
eci = site.position_eci(date)
print(site)
```

The following runs one two-body integration step in SI units:

```python
from tlecore.models import GravityModel

model = GravityModel(3.986e14)
state = [7.0e6, 0.0, 0.0, 0.0, 7.5e3, 0.0]
state = model.next_state(state, 0.0, 1.0)
```

## What it does not do

- It has no SGP4/SDP4 propagator. A `Tle` gives access to its orbital
  elements, but the package does not compute a satellite's position from
  them.
- It does not read files of element sets.
- It has no command-line program and no plotting.

## Tests

```
pip install .[test]
pytest
```