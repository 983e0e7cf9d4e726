"""Math helpers — tolerances, root finding. No engine imports."""

from __future__ import annotations

import math

# Coordinates closer than this are treated as equal.
EPSILON = 1e-9


def almost_equal(a: float, b: float, tolerance: float = EPSILON) -> bool:
    return abs(a - b) <= tolerance


def points_equal(
    p: tuple[float, float], q: tuple[float, float], tolerance: float = EPSILON
) -> bool:
    return almost_equal(p[0], q[0], tolerance) and almost_equal(p[1], q[1], tolerance)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def quadratic_roots(a: float, b: float, c: float, tolerance: float = EPSILON) -> list[float]:
    """Real roots of a·t² + b·t + c = 0.

    Falls back to the linear equation when ``a`` vanishes; returns no roots for
    the constant case, including 0 = 0.
    """
    if abs(a) <= tolerance:
        if abs(b) <= tolerance:
            return []
        return [-c / b]
    disc = b * b - 4 * a * c
    if disc < 0:
        # tangent roots can dip just below zero
        if disc > -tolerance:
            return [-b / (2 * a)]
        return []
    sq = math.sqrt(disc)
    # numerically stable form, avoids cancellation between -b and sq
    q = -0.5 * (b + math.copysign(sq, b))
    if q == 0:
        return [0.0]
    return sorted({q / a, c / q})
