import math

import pytest

from tlecore.tle import (
    Field,
    Tle,
    TleLine,
    Units,
    checksum,
    exp_to_float_text,
    is_valid_line,
)

NAME = "ISS (ZARYA)   "
LINE1 = "1 25544U 98067A   08264.51782528 -.00002182  00000-0 -11606-4 0  2927"
LINE2 = "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 15.72125391563537"


@pytest.fixture
def tle():
    return Tle(NAME, LINE1, LINE2)


def test_lines_have_data_length(tle):
    assert len(tle.line1) == 69
    assert len(tle.line2) == 69


@pytest.mark.parametrize(
    "text, expected",
    [
        (" 12345-3", " 0.12345e-3"),
        ("-23429-5", "-0.23429e-5"),
        (" 40436+1", " 0.40436e+1"),
        (" 31415 1", " 0.31415e1"),
    ],
)
def test_exp_to_float_text(text, expected):
    assert exp_to_float_text(text) == expected


def test_exp_to_float_text_values():
    assert float(exp_to_float_text(" 12345-3")) == pytest.approx(0.12345e-3)
    assert float(exp_to_float_text("-23429-5")) == pytest.approx(-0.23429e-5)


def test_exp_to_float_text_too_short():
    with pytest.raises(ValueError):
        exp_to_float_text("123")


@pytest.mark.parametrize("line", [LINE1, LINE2])
def test_checksum_matches_last_column(line):
    assert checksum(line) == int(line[-1])


def test_checksum_counts_minus_as_one():
    assert checksum("--x") == 2
    assert checksum("9a9x") == 8


def test_checksum_empty_line():
    with pytest.raises(ValueError):
        checksum("")


def test_is_valid_line_name():
    assert is_valid_line(NAME, TleLine.ZERO)
    assert not is_valid_line("X" * 25, TleLine.ZERO)


def test_is_valid_line_data():
    assert is_valid_line(LINE1, TleLine.ONE)
    assert is_valid_line(LINE2, TleLine.TWO)
    assert not is_valid_line(LINE1, TleLine.TWO)
    assert not is_valid_line(LINE1[:-1], TleLine.ONE)
    assert is_valid_line("  " + LINE2 + "  ", TleLine.TWO)


def test_name_is_trimmed(tle):
    assert tle.name == "ISS (ZARYA)"
    assert tle.line1 == LINE1
    assert tle.line2 == LINE2


def test_angle_fields_native(tle):
    assert tle.field(Field.I) == pytest.approx(51.6416)
    assert tle.field(Field.RAAN) == pytest.approx(247.4627)
    assert tle.field(Field.ARGPER) == pytest.approx(130.5360)
    assert tle.field(Field.M, Units.DEG) == pytest.approx(325.0288)


def test_angle_fields_in_radians(tle):
    assert tle.field(Field.I, Units.RAD) == pytest.approx(math.radians(51.6416))
    assert tle.field(Field.M, Units.RAD) == pytest.approx(math.radians(325.0288))


def test_non_angle_field_not_converted(tle):
    assert tle.field(Field.E, Units.RAD) == tle.field(Field.E)
    assert tle.field(Field.E) == pytest.approx(0.0006703)


def test_other_numeric_fields(tle):
    assert tle.field(Field.MMOTION) == pytest.approx(15.72125391)
    assert tle.field(Field.EPOCHYEAR) == 8.0
    assert tle.field(Field.EPOCHDAY) == pytest.approx(264.51782528)
    assert tle.field(Field.NORADNUM) == 25544.0
    assert tle.field(Field.ORBITNUM) == 56353.0
    assert tle.field(Field.SET) == 292.0


def test_exponential_fields(tle):
    assert tle.field(Field.MMOTIONDT) == pytest.approx(-0.00002182)
    assert tle.field(Field.MMOTIONDT2) == 0.0
    assert tle.field(Field.BSTAR) == pytest.approx(-0.11606e-4)


def test_cached_value_is_stable(tle):
    first = tle.field(Field.I, Units.RAD)
    assert tle.field(Field.I, Units.RAD) == first


def test_field_text(tle):
    assert tle.field_text(Field.I) == "51.6416"
    assert tle.field_text(Field.I, with_units=True) == "51.6416 degrees"
    assert tle.field_text(Field.MMOTION, True) == "15.72125391 revs / day"
    assert tle.field_text(Field.E, True) == "0.0006703"
    assert tle.field_text(Field.INTLDESC) == "98067A"
    assert tle.field_text(Field.MMOTIONDT) == "-0.00002182"
    assert tle.field_text(Field.BSTAR) == "-0.11606e-4"


def test_empty_line_rejected():
    with pytest.raises(ValueError):
        Tle(NAME, "", LINE2)


def test_short_line_rejected():
    with pytest.raises(ValueError):
        Tle(NAME, LINE1[:20], LINE2)