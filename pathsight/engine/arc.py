"""Elliptical arc → cubic bezier conversion.

Endpoint-to-center conversion follows the SVG arc implementation notes
(https://www.w3.org/TR/SVG11/implnote.html#ArcImplementationNotes):

1. move the chord midpoint to the origin and undo the x-axis rotation;
2. grow the radii when they cannot span the chord (Λ > 1);
3. solve for the center, picking the sign branch from the flags;
4. measure the start angle and the signed sweep, wrapped to match the
   sweep flag.

The sweep is split into equal sub-arcs of at most 90°, each approximated
with the circular tangent coefficient κ = 4/3·tan(Δ/4), then mapped back
onto the rotated ellipse.
"""

from __future__ import annotations

import logging
import math

from pathsight.utils.math_helpers import EPSILON

logger = logging.getLogger(__name__)

Cubic = tuple[float, float, float, float, float, float]

# Each cubic covers at most a quarter turn
_MAX_SUBARC = math.pi / 2
_MAX_SUBARCS = 4


def line_to_cubic(x1: float, y1: float, x2: float, y2: float) -> Cubic:
    """Straight cubic with control points at 1/3 and 2/3 of the chord."""
    return (
        x1 + (x2 - x1) / 3,
        y1 + (y2 - y1) / 3,
        x1 + 2 * (x2 - x1) / 3,
        y1 + 2 * (y2 - y1) / 3,
        x2,
        y2,
    )


def arc_to_cubic(
    x1: float,
    y1: float,
    rx: float,
    ry: float,
    angle: float,
    large_arc: int,
    sweep: int,
    x2: float,
    y2: float,
) -> list[Cubic]:
    """Approximate the arc from (x1, y1) to (x2, y2) with 1–4 cubics.

    Each cubic is returned as ``(c1x, c1y, c2x, c2y, x, y)``; the start
    point is implied by the previous one. Zero radii or coincident endpoints
    give a single straight cubic.
    """
    rx, ry = abs(rx), abs(ry)
    if rx < EPSILON or ry < EPSILON or (abs(x1 - x2) < EPSILON and abs(y1 - y2) < EPSILON):
        return [line_to_cubic(x1, y1, x2, y2)]

    phi = math.radians(angle % 360)
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)

    # (x1', y1'): start point in the unrotated frame centred on the chord
    dx, dy = (x1 - x2) / 2, (y1 - y2) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        scale = math.sqrt(lam)
        rx *= scale
        ry *= scale

    rx2, ry2 = rx * rx, ry * ry
    num = rx2 * ry2 - rx2 * y1p * y1p - ry2 * x1p * x1p
    den = rx2 * y1p * y1p + ry2 * x1p * x1p
    coef = math.sqrt(max(0.0, num / den))
    if large_arc == sweep:
        coef = -coef
    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx

    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2

    theta1 = math.atan2((y1p - cyp) / ry, (x1p - cxp) / rx)
    theta2 = math.atan2((-y1p - cyp) / ry, (-x1p - cxp) / rx)
    delta = theta2 - theta1
    if sweep and delta < 0:
        delta += 2 * math.pi
    elif not sweep and delta > 0:
        delta -= 2 * math.pi

    count = min(_MAX_SUBARCS, max(1, math.ceil(abs(delta) / _MAX_SUBARC - EPSILON)))
    step = delta / count
    kappa = 4 / 3 * math.tan(step / 4)

    def to_frame(u: float, v: float) -> tuple[float, float]:
        # unit circle → ellipse → rotation → translation
        ex, ey = rx * u, ry * v
        return cx + cos_phi * ex - sin_phi * ey, cy + sin_phi * ex + cos_phi * ey

    cubics: list[Cubic] = []
    t1 = theta1
    for _ in range(count):
        t2 = t1 + step
        cos1, sin1 = math.cos(t1), math.sin(t1)
        cos2, sin2 = math.cos(t2), math.sin(t2)
        c1 = to_frame(cos1 - kappa * sin1, sin1 + kappa * cos1)
        c2 = to_frame(cos2 + kappa * sin2, sin2 - kappa * cos2)
        end = to_frame(cos2, sin2)
        cubics.append((c1[0], c1[1], c2[0], c2[1], end[0], end[1]))
        t1 = t2

    # land exactly on the requested end point
    last = cubics[-1]
    cubics[-1] = (last[0], last[1], last[2], last[3], x2, y2)
    logger.debug("Arc split into %d cubics (sweep %.3f rad)", count, delta)
    return cubics
