"""NORAD two-line element sets and access to their fields."""

from __future__ import annotations

import re
from enum import Enum, IntEnum

from tlecore.constants import RADS_PER_DEG

# Column offsets are zero based.
TLE_LEN_LINE_DATA = 69
TLE_LEN_LINE_NAME = 24

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class TleLine(IntEnum):
    """Which line of an element set a text line is."""

    ZERO = 0
    ONE = 1
    TWO = 2


class Field(IntEnum):
    """Fields of a two-line element set."""

    NORADNUM = 0
    INTLDESC = 1
    SET = 2  # element set number
    EPOCHYEAR = 3  # last two digits of the epoch year
    EPOCHDAY = 4  # fractional day of year of the epoch
    ORBITNUM = 5  # revolution number at epoch
    I = 6  # inclination  # noqa: E741
    RAAN = 7  # right ascension of the ascending node
    E = 8  # eccentricity
    ARGPER = 9  # argument of perigee
    M = 10  # mean anomaly
    MMOTION = 11  # mean motion
    MMOTIONDT = 12  # first time derivative of mean motion
    MMOTIONDT2 = 13  # second time derivative of mean motion
    BSTAR = 14  # BSTAR drag term


class Units(Enum):
    """Units a numeric field may be returned in."""

    RAD = 0
    DEG = 1
    NATIVE = 2


_ANGLE_FIELDS = frozenset({Field.I, Field.RAAN, Field.ARGPER, Field.M})

_UNIT_SUFFIX = {
    Field.I: " degrees",
    Field.RAAN: " degrees",
    Field.ARGPER: " degrees",
    Field.M: " degrees",
    Field.MMOTION: " revs / day",
}


def _substr(text: str, pos: int, length: int) -> str:
    if pos > len(text):
        raise ValueError(
            f"line of length {len(text)} has no column {pos}: {text!r}"
        )
    return text[pos:pos + length]


def _parse_leading_float(text: str) -> float:
    match = _NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


def exp_to_float_text(text: str) -> str:
    """Turn TLE exponential notation such as ``" 12345-3"`` into ``" 0.12345e-3"``.

    The decimal point is implied left of the mantissa; a blank sign means
    a positive value.
    """
    sign = _substr(text, 0, 1)
    mantissa = _substr(text, 1, 5)
    exponent = _substr(text, 6, 2).lstrip(" ")
    return f"{sign}0.{mantissa}e{exponent}"


def checksum(line: str) -> int:
    """Modulo-10 checksum of a data line, ignoring its last character.

    Digits count their value, minus signs count one, all else counts zero.
    """
    if not line:
        raise ValueError("cannot compute the checksum of an empty line")
    total = sum(
        int(ch) if ch.isdigit() else 1 if ch == "-" else 0 for ch in line[:-1]
    )
    return total % 10


def is_valid_line(line: str, kind: TleLine) -> bool:
    """True if ``line`` is well formed as the given line of an element set."""
    text = line.strip(" ")
    if kind == TleLine.ZERO:
        return len(text) <= TLE_LEN_LINE_NAME
    return (
        len(text) == TLE_LEN_LINE_DATA
        and text[0].isdigit()
        and int(text[0]) == int(kind)
        and text[1] == " "
    )


def _parse_fields(line1: str, line2: str) -> dict[Field, str]:
    fields: dict[Field, str] = {}
    fields[Field.NORADNUM] = _substr(line1, 2, 5)
    fields[Field.INTLDESC] = _substr(line1, 9, 2 + 3 + 3)
    fields[Field.EPOCHYEAR] = _substr(line1, 18, 2)
    fields[Field.EPOCHDAY] = _substr(line1, 20, 12)

    prefix = "-0" if _substr(line1, 33, 1) == "-" else "0"
    fields[Field.MMOTIONDT] = prefix + _substr(line1, 34, 10)
    fields[Field.MMOTIONDT2] = exp_to_float_text(_substr(line1, 44, 8))
    fields[Field.BSTAR] = exp_to_float_text(_substr(line1, 53, 8))
    fields[Field.SET] = _substr(line1, 64, 4).lstrip(" ")

    fields[Field.I] = _substr(line2, 8, 8).lstrip(" ")
    fields[Field.RAAN] = _substr(line2, 17, 8).lstrip(" ")
    fields[Field.E] = "0." + _substr(line2, 26, 7)
    fields[Field.ARGPER] = _substr(line2, 34, 8).lstrip(" ")
    fields[Field.M] = _substr(line2, 43, 8).lstrip(" ")
    fields[Field.MMOTION] = _substr(line2, 52, 11).lstrip(" ")
    fields[Field.ORBITNUM] = _substr(line2, 63, 5).lstrip(" ")
    return fields


class Tle:
    """One satellite's name and two lines of orbital elements."""

    def __init__(self, name: str, line1: str, line2: str) -> None:
        if not line1 or not line2:
            raise ValueError("both data lines of an element set are required")
        self.name = name.rstrip(" ")
        self.line1 = line1
        self.line2 = line2
        self._fields = _parse_fields(line1, line2)
        self._cache: dict[tuple[Units, Field], float] = {}

    def field(self, fld: Field, units: Units = Units.NATIVE) -> float:
        """Numeric value of a field, angles converted to ``units``."""
        key = (units, fld)
        value = self._cache.get(key)
        if value is None:
            value = _parse_leading_float(self._fields[fld])
            if fld in _ANGLE_FIELDS and units is Units.RAD:
                value *= RADS_PER_DEG
            self._cache[key] = value
        return value

    def field_text(self, fld: Field, with_units: bool = False) -> str:
        """Text of a field, optionally followed by its unit name."""
        text = self._fields[fld]
        if with_units:
            text += _UNIT_SUFFIX.get(fld, "")
        return text.strip(" ")

    def __repr__(self) -> str:
        return f"Tle(name={self.name!r}, line1={self.line1!r}, line2={self.line2!r})"