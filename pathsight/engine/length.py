"""Arc length and point-at-length.

Cubic lengths integrate the parametric speed with Gauss-Legendre quadrature
(``scipy.integrate.fixed_quad``). Straight pieces, which is how lines and
closing segments appear in curve form, use the plain chord length.
"""

from __future__ import annotations

import logging

from scipy.integrate import fixed_quad

from pathsight.engine.config import DEFAULT_CONFIG, GeometryConfig
from pathsight.engine.curve import Bezier, contours, is_straight
from pathsight.models.segment import Path
from pathsight.utils.geometry import Point, cubic_point, cubic_speed, distance, lerp
from pathsight.utils.math_helpers import clamp

logger = logging.getLogger(__name__)


def cubic_length(
    p0: Point,
    p1: Point,
    p2: Point,
    p3: Point,
    t: float = 1.0,
    config: GeometryConfig | None = None,
) -> float:
    """Length of the cubic from parameter 0 to ``t``."""
    config = config or DEFAULT_CONFIG
    if t <= 0:
        return 0.0
    value, _ = fixed_quad(
        lambda ts: cubic_speed(p0, p1, p2, p3, ts), 0.0, t, n=config.quadrature_order
    )
    return float(value)


def piece_length(piece: Bezier, config: GeometryConfig | None = None) -> float:
    if is_straight(piece):
        return distance(piece[0], piece[3])
    return cubic_length(*piece, config=config)


def path_length(path: Path, config: GeometryConfig | None = None) -> float:
    """Total drawn length. A close path contributes its closing line."""
    total = sum(
        piece_length(piece, config)
        for contour in contours(path)
        for piece in contour.pieces
    )
    logger.debug("Path length %.6f", total)
    return total


def _locate(piece: Bezier, target: float, config: GeometryConfig) -> Point:
    p0, p1, p2, p3 = piece
    if is_straight(piece):
        chord = distance(p0, p3)
        return lerp(p0, p3, target / chord) if chord else p0

    lo, hi = 0.0, 1.0
    for _ in range(config.max_bisection_steps):
        if hi - lo <= config.bisection_tolerance:
            break
        mid = (lo + hi) / 2
        if cubic_length(p0, p1, p2, p3, mid, config) < target:
            lo = mid
        else:
            hi = mid
    return cubic_point(p0, p1, p2, p3, (lo + hi) / 2)


def point_at_length(
    path: Path, length: float, config: GeometryConfig | None = None
) -> Point:
    """Point reached after travelling ``length`` along the path.

    The distance is clamped to ``[0, path_length(path)]``: zero or less gives
    the start point, anything past the end gives the last point.
    """
    config = config or DEFAULT_CONFIG
    shapes = contours(path)
    start = shapes[0].start
    if length <= 0:
        return start

    remaining = length
    last = start
    for contour in shapes:
        last = contour.start
        for piece in contour.pieces:
            size = piece_length(piece, config)
            if remaining <= size:
                return _locate(piece, clamp(remaining, 0.0, size), config)
            remaining -= size
            last = piece[3]
    return last
