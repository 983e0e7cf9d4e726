"""Tests for path text output."""

import pytest

from tests.conftest import ALL_COMMANDS, SQUARE

from pathsight.models.segment import LineTo, MoveTo, Path
from pathsight.svg.parser import parse
from pathsight.svg.serializer import format_number, round_path, serialize


@pytest.mark.parametrize(
    "value, precision, expected",
    [
        (0.5, 4, ".5"),
        (-0.5, 4, "-.5"),
        (10.0, 4, "10"),
        (1.23456, 4, "1.2346"),
        (1.23456, 2, "1.23"),
        (-0.00001, 4, "0"),
        (-0.0, 4, "0"),
        (7.5, 0, "8"),
        (0.1, None, ".1"),
        (-2.0, None, "-2"),
        (1e-20, None, "1e-20"),
        (0.30000000000000004, None, ".30000000000000004"),
        (2.5, False, "2.5"),
    ],
)
def test_format_number(value, precision, expected):
    assert format_number(value, precision) == expected


def test_serialize_square():
    assert serialize(parse(SQUARE)) == SQUARE


def test_no_space_before_minus():
    assert serialize(parse("M0 0L-5 -5")) == "M0 0L-5-5"


def test_no_space_between_fractions():
    assert serialize(parse("M0.5 0.5")) == "M.5.5"
    assert serialize(parse("M1.5 0.5")) == "M1.5.5"
    # ".5" after an integer needs the space
    assert serialize(parse("M1 0.5")) == "M1 .5"


def test_arc_flags_are_packed():
    assert serialize(parse("M0 0A10 10 0 1 1 20 0")) == "M0 0A10 10 0 1120 0"
    assert serialize(parse("M0 0a10 10 0 0 0 -20 0")) == "M0 0a10 10 0 00-20 0"


def test_precision_rounds():
    path = parse("M0.123456 1.98765L3.14159 2.71828")
    assert serialize(path, 2) == "M.12 1.99L3.14 2.72"
    assert serialize(path, None) == "M.123456 1.98765L3.14159 2.71828"


def test_round_path():
    path = round_path(parse("M0.123456 1.98765L-0.00001 2"), 3)
    assert path == Path((MoveTo(0.123, 1.988), LineTo(0.0, 2.0)))
    assert round_path(path, None) is path


def test_negative_precision_keeps_full_values():
    path = parse("M1.5 2L0.123456 -7")
    assert serialize(path, -1) == "M1.5 2L.123456-7"
    assert round_path(path, -2) is path
    assert format_number(1.25, -1) == "1.25"


def test_str_is_unrounded():
    path = parse("M0.123456 0L1 1")
    assert str(path) == "M.123456 0L1 1"


def test_round_trip_is_exact(sample_path):
    assert parse(serialize(sample_path, None)) == sample_path


def test_round_trip_all_commands():
    text = serialize(parse(ALL_COMMANDS))
    assert parse(text) == parse(ALL_COMMANDS)
