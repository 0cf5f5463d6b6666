import math

import pytest

from tlecore import constants
from tlecore.constants import ac_tan, deg2rad, fmod2p, rad2deg, sqr


def test_documented_constants():
    assert constants.XKMPER_WGS72 == 6378.135
    assert constants.SEC_PER_DAY == 86400.0
    assert constants.MIN_PER_DAY == 1440.0
    assert constants.TWOPI == pytest.approx(2.0 * math.pi)
    assert rad2deg(constants.RADS_PER_DEG) == pytest.approx(1.0)
    assert fmod2p(constants.TWOPI + 1.0) == pytest.approx(1.0)


def test_derived_constants_consistent():
    assert constants.CK2 == constants.J2 / 2.0
    assert constants.XJ3 == constants.J3
    assert constants.QO > constants.S > constants.AE
    assert sqr(sqr(constants.QO - constants.S)) == pytest.approx(constants.QOMS2T)


def test_sqr_matches_power():
    for x in (-2.5, 0.0, 1.0, 7.25):
        assert sqr(x) == pytest.approx(x ** 2)


def test_fmod2p_range_and_equivalence():
    for angle in (-10.0, -math.pi / 2, 0.0, 1.0, 7.0, 100.0):
        reduced = fmod2p(angle)
        assert 0.0 <= reduced < constants.TWOPI
        assert math.sin(reduced) == pytest.approx(math.sin(angle), abs=1e-9)
        assert math.cos(reduced) == pytest.approx(math.cos(angle), abs=1e-9)


def test_fmod2p_negative_wraps():
    assert fmod2p(-math.pi / 2) == pytest.approx(3 * math.pi / 2)


def test_ac_tan_axes():
    assert ac_tan(1.0, 0.0) == pytest.approx(math.pi / 2)
    assert ac_tan(-1.0, 0.0) == pytest.approx(3 * math.pi / 2)
    assert ac_tan(0.0, -1.0) == pytest.approx(math.pi)
    assert ac_tan(0.0, 1.0) == pytest.approx(0.0)


def test_ac_tan_quadrants_match_atan2():
    for s, c in ((1.0, 1.0), (1.0, -1.0), (-1.0, -1.0)):
        assert math.tan(ac_tan(s, c)) == pytest.approx(s / c)
        assert math.sin(ac_tan(s, c)) == pytest.approx(math.sin(math.atan2(s, c)))


def test_degree_radian_round_trip():
    assert rad2deg(math.pi) == pytest.approx(180.0)
    for d in (-90.0, 0.0, 45.0, 359.0):
        assert rad2deg(deg2rad(d)) == pytest.approx(d)