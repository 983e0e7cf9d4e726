"""Tests for arc to cubic conversion."""

import math

import pytest

from pathsight.engine.arc import arc_to_cubic, line_to_cubic
from pathsight.utils.geometry import cubic_point


def _on_circle(cubics, start, center, radius, tol=0.05):
    """Sample every cubic and check the points stay near the circle."""
    x0, y0 = start
    for c in cubics:
        for t in (0.0, 0.25, 0.5, 0.75, 1.0):
            x, y = cubic_point((x0, y0), (c[0], c[1]), (c[2], c[3]), (c[4], c[5]), t)
            assert math.hypot(x - center[0], y - center[1]) == pytest.approx(radius, abs=tol)
        x0, y0 = c[4], c[5]


def test_zero_radius_is_a_line():
    assert arc_to_cubic(0, 0, 0, 5, 0, 0, 1, 10, 0) == [line_to_cubic(0, 0, 10, 0)]


def test_same_endpoints_is_a_line():
    assert arc_to_cubic(5, 5, 10, 10, 0, 1, 1, 5, 5) == [line_to_cubic(5, 5, 5, 5)]


def test_semicircle():
    cubics = arc_to_cubic(0, 0, 10, 10, 0, 0, 1, 20, 0)
    assert len(cubics) == 2
    # sweep-flag 1 turns through negative y on a y-down canvas
    assert cubics[0][4:] == pytest.approx((10, -10))
    assert cubics[-1][4:] == (20, 0)
    _on_circle(cubics, (0, 0), (10, 0), 10)


def test_sweep_flag_picks_the_side():
    cubics = arc_to_cubic(0, 0, 10, 10, 0, 0, 0, 20, 0)
    assert cubics[0][4:] == pytest.approx((10, 10))


def test_large_arc_flag_picks_the_center():
    small = arc_to_cubic(0, 0, 10, 10, 0, 0, 1, 10, 10)
    large = arc_to_cubic(0, 0, 10, 10, 0, 1, 1, 10, 10)
    assert len(small) == 1
    assert len(large) == 3
    # the quarter arc and the three-quarter arc lie on different circles
    _on_circle(small, (0, 0), (0, 10), 10)
    _on_circle(large, (0, 0), (10, 0), 10)


def test_small_radii_are_scaled_up():
    cubics = arc_to_cubic(0, 0, 1, 1, 0, 0, 1, 20, 0)
    assert cubics[-1][4:] == (20, 0)
    _on_circle(cubics, (0, 0), (10, 0), 10)


def test_rotated_ellipse_end_point():
    cubics = arc_to_cubic(0, 0, 20, 10, 30, 1, 0, 15, 5)
    assert 1 <= len(cubics) <= 4
    assert cubics[-1][4:] == (15, 5)


def test_subarcs_never_exceed_a_quarter_turn():
    cubics = arc_to_cubic(0, 10, 10, 10, 0, 1, 1, 0.001, 10)
    assert len(cubics) == 4
