"""Tests for bounding box, length, point-at-length and area.

svgpathtools measures the same paths independently; arcs are compared with a
looser tolerance because they are approximated by cubics here.
"""

import math

import pytest
import svgpathtools

from tests.conftest import CIRCLE, HOME, LINE, SEMICIRCLE, SQUARE, WAVE

from pathsight.engine.area import DrawDirection, draw_direction, path_area
from pathsight.engine.bbox import BoundingBox, bounding_box
from pathsight.engine.config import GeometryConfig
from pathsight.engine.length import cubic_length, path_length, point_at_length
from pathsight.engine.reverse import reverse
from pathsight.svg.parser import parse


def _oracle_bbox(text):
    xmin, xmax, ymin, ymax = svgpathtools.parse_path(text).bbox()
    return xmin, ymin, xmax, ymax


# -- bounding box -----------------------------------------------------------


def test_square_bbox():
    box = bounding_box(parse(SQUARE))
    assert box.as_tuple() == (0, 0, 10, 10)
    assert (box.width, box.height, box.cx, box.cy) == (10, 10, 5, 5)


def test_circle_bbox():
    assert bounding_box(parse(CIRCLE)).as_tuple() == pytest.approx((0, 0, 20, 20), abs=1e-6)


def test_semicircle_bbox():
    assert bounding_box(parse(SEMICIRCLE)).as_tuple() == pytest.approx((0, -10, 20, 0), abs=1e-6)


def test_cubic_bbox_matches_svgpathtools():
    assert bounding_box(parse(WAVE)).as_tuple() == pytest.approx(_oracle_bbox(WAVE), abs=1e-9)


def test_icon_bbox_matches_svgpathtools():
    assert bounding_box(parse(HOME)).as_tuple() == pytest.approx(_oracle_bbox(HOME), abs=1e-3)


def test_lone_moveto_bbox():
    assert bounding_box(parse("M5 5")).as_tuple() == (5, 5, 5, 5)
    assert bounding_box(parse("M0 0L1 1M20 -3")).as_tuple() == (0, -3, 20, 1)


def test_bbox_to_dict():
    data = BoundingBox(0, 0, 4, 2).to_dict()
    assert data == {"x": 0, "y": 0, "x2": 4, "y2": 2, "width": 4, "height": 2, "cx": 2, "cy": 1}


# -- length -----------------------------------------------------------------


def test_line_length():
    assert path_length(parse(LINE)) == 10


def test_close_path_adds_closing_line():
    assert path_length(parse(SQUARE)) == pytest.approx(40)
    assert path_length(parse("M0 0L10 0L10 10")) == pytest.approx(20)


def test_semicircle_length():
    assert path_length(parse(SEMICIRCLE)) == pytest.approx(10 * math.pi, rel=1e-3)


def test_circle_length():
    assert path_length(parse(CIRCLE)) == pytest.approx(20 * math.pi, rel=1e-3)


def test_cubic_length_matches_svgpathtools():
    expected = svgpathtools.parse_path(WAVE).length()
    assert path_length(parse(WAVE)) == pytest.approx(expected, rel=1e-5)


def test_icon_length_matches_svgpathtools():
    expected = svgpathtools.parse_path(HOME).length()
    assert path_length(parse(HOME)) == pytest.approx(expected, rel=1e-3)


def test_partial_cubic_length():
    p = ((0, 0), (0, 10), (10, 10), (10, 0))
    full = cubic_length(*p)
    # symmetric curve, half the parameter covers half the length
    assert cubic_length(*p, t=0.5) == pytest.approx(full / 2)
    assert cubic_length(*p, t=0) == 0


def test_quadrature_order_is_configurable():
    path = parse(WAVE)
    coarse = path_length(path, GeometryConfig(quadrature_order=8))
    assert coarse == pytest.approx(path_length(path), rel=1e-2)


# -- point at length --------------------------------------------------------


@pytest.mark.parametrize(
    "distance, expected",
    [
        (5, (5, 0)),
        (0, (0, 0)),
        (-1, (0, 0)),
        (100, (10, 0)),
    ],
)
def test_point_on_line(distance, expected):
    assert point_at_length(parse(LINE), distance) == pytest.approx(expected)


def test_point_on_square():
    square = parse(SQUARE)
    assert point_at_length(square, 15) == pytest.approx((10, 5))
    # on the closing line
    assert point_at_length(square, 35) == pytest.approx((0, 5))
    assert point_at_length(square, 40) == pytest.approx((0, 0))


def test_point_on_cubic():
    path = parse("M0 0C0 10 10 10 10 0")
    half = path_length(path) / 2
    assert point_at_length(path, half) == pytest.approx((5, 7.5), abs=1e-6)


def test_point_on_semicircle():
    path = parse(SEMICIRCLE)
    assert point_at_length(path, 5 * math.pi) == pytest.approx((10, -10), abs=1e-2)


def test_point_matches_svgpathtools():
    oracle = svgpathtools.parse_path(WAVE)
    total = oracle.length()
    path = parse(WAVE)
    for fraction in (0.1, 0.4, 0.8):
        point = oracle.point(oracle.ilength(total * fraction))
        expected = (point.real, point.imag)
        assert point_at_length(path, total * fraction) == pytest.approx(expected, abs=1e-5)


# -- area and direction -----------------------------------------------------


def test_square_area_is_positive_clockwise():
    assert path_area(parse(SQUARE)) == pytest.approx(100)
    assert draw_direction(parse(SQUARE)) is DrawDirection.CLOCKWISE


def test_counter_clockwise_square():
    path = parse("M0 0L0 10L10 10L10 0Z")
    assert path_area(path) == pytest.approx(-100)
    assert draw_direction(path) is DrawDirection.COUNTER_CLOCKWISE


def test_circle_area():
    assert path_area(parse(CIRCLE)) == pytest.approx(100 * math.pi, rel=1e-3)


def test_open_path_closes_implicitly():
    assert path_area(parse("M0 0L10 0L10 10L0 10")) == pytest.approx(100)


def test_subpath_areas_add_up():
    path = parse("M0 0L10 0L10 10L0 10ZM20 0L20 10L30 10L30 0Z")
    assert path_area(path) == pytest.approx(0)


def test_lines_have_no_area():
    assert path_area(parse(LINE)) == 0
    assert path_area(parse("M5 5")) == 0


@pytest.mark.parametrize("text", [SQUARE + " Z", "m0 0h10v10h-10z z"])
def test_repeated_close_is_measured_once(text):
    path = parse(text)
    assert bounding_box(path).as_tuple() == (0, 0, 10, 10)
    assert path_length(path) == pytest.approx(40)
    assert point_at_length(path, 35) == pytest.approx((0, 5))
    assert path_area(path) == pytest.approx(100)
    assert draw_direction(path) is DrawDirection.CLOCKWISE


def test_drawing_after_repeated_close_starts_at_subpath_start():
    path = parse("M0 0L10 0L10 10ZZL0 10")
    assert path_length(path) == pytest.approx(10 + 10 + math.hypot(10, 10) + 10)


def test_reverse_flips_direction(sample_path):
    area = path_area(sample_path)
    assert path_area(reverse(sample_path)) == pytest.approx(-area, abs=1e-6)
