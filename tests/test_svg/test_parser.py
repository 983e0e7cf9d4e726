"""Tests for the path data scanner."""

import pytest

from tests.conftest import ALL_COMMANDS, SQUARE

from pathsight.exceptions import ParseError
from pathsight.models.segment import (
    ArcTo,
    ClosePath,
    CubicTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    SmoothQuadTo,
    VerticalLineTo,
)
from pathsight.svg.parser import is_valid_path, parse, scan


def test_parse_square():
    path = parse(SQUARE)
    assert list(path) == [
        MoveTo(0, 0),
        LineTo(10, 0),
        LineTo(10, 10),
        LineTo(0, 10),
        ClosePath(),
    ]


def test_relative_letters():
    path = parse("m1 2h3v4z")
    assert list(path) == [
        MoveTo(1, 2, relative=True),
        HorizontalLineTo(3, relative=True),
        VerticalLineTo(4, relative=True),
        ClosePath(relative=True),
    ]


def test_implicit_lineto_after_moveto():
    assert list(parse("M0 0 10 10 20 20")) == [MoveTo(0, 0), LineTo(10, 10), LineTo(20, 20)]
    assert list(parse("m1 1 2 2")) == [MoveTo(1, 1, relative=True), LineTo(2, 2, relative=True)]


def test_implicit_repeat_of_other_commands():
    path = parse("M0 0C1 1 2 2 3 3 4 4 5 5 6 6t1 1 2 2")
    assert [seg.letter for seg in path] == ["M", "C", "C", "t", "t"]
    assert path[2] == CubicTo(4, 4, 5, 5, 6, 6)
    assert path[4] == SmoothQuadTo(2, 2, relative=True)


def test_separators_are_optional():
    assert parse("M0,0L10,10") == parse("M 0 0 L 10 10")
    assert parse("\tM 0 , 0\n L 10 ,10 ") == parse("M0 0L10 10")


def test_number_forms():
    path = parse("M.5-.5L1e2 1E-1L+3 -0.25")
    assert path[0] == MoveTo(0.5, -0.5)
    assert path[1] == LineTo(100, 0.1)
    assert path[2] == LineTo(3, -0.25)


def test_adjacent_decimals():
    assert parse("M1.5.5")[0] == MoveTo(1.5, 0.5)


def test_compact_arc_flags():
    path = parse("M0 0a25 25 -30 0150 -25")
    assert path[1] == ArcTo(25, 25, -30, 0, 1, 50, -25, relative=True)


def test_arc_flags_with_separators():
    path = parse("M0 0A25,25,-30,1,0,50,-25")
    assert path[1] == ArcTo(25, 25, -30, 1, 0, 50, -25)


def test_every_command():
    path = parse(ALL_COMMANDS)
    letters = "".join(seg.letter for seg in path)
    assert letters == "MhvHVzmcsqtalCSQTALZ"


def test_empty_path():
    with pytest.raises(ParseError, match="empty") as exc:
        parse("   ")
    assert exc.value.position == 3


@pytest.mark.parametrize(
    "text, position, message",
    [
        ("L0 0", 0, "must start with a moveto"),
        ("M0 0 X1 1", 5, "not a path command"),
        ("M0 0 L10", 8, "reached end of path"),
        ("M0 0 L10 x", 9, "expected a number"),
        ("M1e 0", 1, "malformed exponent"),
        ("M0 0A1 1 0 2 0 1 1", 11, "arc flag"),
        ("M1e999 0", 1, "out of range"),
        ("M0 0Z5", 5, "not a path command"),
    ],
)
def test_parse_errors(text, position, message):
    with pytest.raises(ParseError, match=message) as exc:
        parse(text)
    assert exc.value.position == position


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse("Q0 0")


def test_scan_keeps_error_as_value():
    parser = scan("M0 0 L10")
    assert parser.error is not None
    assert parser.error.message == "expected a number, reached end of path"
    # the segment before the failure was still finalized
    assert parser.segments == [MoveTo(0, 0)]


def test_first_error_wins():
    assert scan("M0 0 L1 x Y").error.position == 8


def test_deterministic():
    assert parse(ALL_COMMANDS) == parse(ALL_COMMANDS)
    assert str(scan("M0 0 Lx").error) == str(scan("M0 0 Lx").error)


def test_is_valid_path():
    assert is_valid_path(SQUARE)
    assert not is_valid_path("")
    assert not is_valid_path("M0 0 L")


def test_non_string_input():
    with pytest.raises(TypeError):
        parse(None)
