"""Julian dates, where each day begins at noon."""

from __future__ import annotations

import calendar
import math
import time
from dataclasses import dataclass, field
from typing import NamedTuple

from tlecore.constants import (
    HR_PER_DAY,
    MIN_PER_DAY,
    OMEGA_E,
    SEC_PER_DAY,
    TWOPI,
)

EPOCH_JAN0_12H_1900 = 2415020.0  # Dec 31 1899 12h UTC
EPOCH_JAN1_00H_1900 = 2415020.5  # Jan 1 1900 00h UTC
EPOCH_JAN1_12H_2000 = 2451545.0  # Jan 1 2000 12h UTC


class CalendarDate(NamedTuple):
    """Calendar components: day is the day of month with its fraction."""

    year: int
    month: int
    day: float


def is_leap_year(year: int) -> bool:
    """True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _julian_date(year: int, day: float) -> float:
    # 1582: ten days removed from the calendar; 3000: arbitrary limit.
    if not 1582 < year < 3000:
        raise ValueError(f"year {year} out of range (1583..2999)")
    if not 1.0 <= day < 367.0:
        raise ValueError(f"day of year {day} out of range [1, 367)")
    year -= 1
    a = year // 100
    b = 2 - a + a // 4
    new_years = int(365.25 * year) + int(30.6001 * 14) + 1720994.5 + b
    return new_years + day


@dataclass(frozen=True, order=True)
class Julian:
    """A point in time held as a Julian date."""

    date: float = field(default_factory=lambda: _julian_date(2000, 1.0))

    @classmethod
    def from_year_day(cls, year: int, day: float) -> Julian:
        """Create from a year and a fractional day of year (Jan 1 00h is 1.0)."""
        return cls(_julian_date(year, day))

    @classmethod
    def from_timestamp(cls, timestamp: float) -> Julian:
        """Create from seconds since 1970-01-01 00:00 UTC (whole seconds)."""
        stm = time.gmtime(int(timestamp))
        day = stm.tm_yday + (
            stm.tm_hour + (stm.tm_min + stm.tm_sec / 60.0) / 60.0
        ) / 24.0
        return cls(_julian_date(stm.tm_year, day))

    @classmethod
    def from_calendar(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: float = 0.0,
    ) -> Julian:
        """Create from calendar date and time of day in UTC."""
        f1 = int((275.0 * month) / 9.0)
        f2 = int((month + 9.0) / 12.0)
        if is_leap_year(year):
            n = f1 - f2 + day - 30
        else:
            n = f1 - 2 * f2 + day - 30
        day_of_year = n + (hour + (minute + second / 60.0) / 60.0) / 24.0
        return cls(_julian_date(year, day_of_year))

    def to_gmst(self) -> float:
        """Greenwich Mean Sidereal Time as an angle in radians."""
        ut = math.fmod(self.date + 0.5, 1.0)
        tu = (self.from_jan1_12h_2000() - ut) / 36525.0
        gmst = 24110.54841 + tu * (8640184.812866 + tu * (0.093104 - tu * 6.2e-06))
        gmst = math.fmod(gmst + SEC_PER_DAY * OMEGA_E * ut, SEC_PER_DAY)
        if gmst < 0.0:
            gmst += SEC_PER_DAY
        return TWOPI * (gmst / SEC_PER_DAY)

    def to_lmst(self, lon: float) -> float:
        """Local Mean Sidereal Time in radians for longitude ``lon`` (radians)."""
        return math.fmod(self.to_gmst() + lon, TWOPI)

    def to_timestamp(self) -> int:
        """Seconds since 1970-01-01 00:00 UTC, rounded to the nearest second."""
        year, month, day = self.components()
        dom = int(day)
        secs = int((day - dom) * 86400 + 0.5)
        hour = secs // 3600
        minute = (secs % 3600) // 60
        second = (secs % 3600) % 60
        return calendar.timegm((year, month, dom, hour, minute, second, 0, 0, 0))

    def components(self) -> CalendarDate:
        """Year, month (1..12) and fractional day of month."""
        jd_adj = self.date + 0.5
        z = int(jd_adj)
        f = jd_adj - z
        alpha = float(int((z - 1867216.25) / 36524.25))
        a = z + 1 + alpha - int(alpha / 4.0)
        b = a + 1524.0
        c = int((b - 122.1) / 365.25)
        d = int(c * 365.25)
        e = int((b - d) / 30.6001)
        dom = b - d - int(e * 30.6001) + f
        month = e - 1 if e < 13.5 else e - 13
        year = c - 4716 if month > 2.5 else c - 4715
        return CalendarDate(year, month, dom)

    def from_jan0_12h_1900(self) -> float:
        """Days since Dec 31 1899 12h UTC."""
        return self.date - EPOCH_JAN0_12H_1900

    def from_jan1_00h_1900(self) -> float:
        """Days since Jan 1 1900 00h UTC."""
        return self.date - EPOCH_JAN1_00H_1900

    def from_jan1_12h_2000(self) -> float:
        """Days since Jan 1 2000 12h UTC."""
        return self.date - EPOCH_JAN1_12H_2000

    def add_days(self, days: float) -> Julian:
        return Julian(self.date + days)

    def add_hours(self, hours: float) -> Julian:
        return Julian(self.date + hours / HR_PER_DAY)

    def add_minutes(self, minutes: float) -> Julian:
        return Julian(self.date + minutes / MIN_PER_DAY)

    def add_seconds(self, seconds: float) -> Julian:
        return Julian(self.date + seconds / SEC_PER_DAY)

    def span_days(self, other: Julian) -> float:
        """Days from ``other`` to this date."""
        return self.date - other.date

    def span_hours(self, other: Julian) -> float:
        return self.span_days(other) * HR_PER_DAY

    def span_minutes(self, other: Julian) -> float:
        return self.span_days(other) * MIN_PER_DAY

    def span_seconds(self, other: Julian) -> float:
        return self.span_days(other) * SEC_PER_DAY