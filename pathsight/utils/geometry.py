"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

Point = tuple[float, float]


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over an Nx2 ring. Positive = clockwise on a y-down canvas.

    The ring is closed implicitly (last point back to first).
    """
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def distance(p: Point, q: Point) -> float:
    return math.hypot(q[0] - p[0], q[1] - p[1])


def lerp(p: Point, q: Point, t: float) -> Point:
    return p[0] + (q[0] - p[0]) * t, p[1] + (q[1] - p[1]) * t


def reflect(point: Point, center: Point) -> Point:
    """Mirror ``point`` through ``center``."""
    return 2 * center[0] - point[0], 2 * center[1] - point[1]


def cubic_points(
    p0: Point, p1: Point, p2: Point, p3: Point, t: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Evaluate a cubic bezier at every parameter in ``t``. Returns Nx2."""
    ctrl = np.array([p0, p1, p2, p3], dtype=np.float64)
    t = np.asarray(t, dtype=np.float64)[:, None]
    mt = 1.0 - t
    return (
        mt**3 * ctrl[0]
        + 3 * mt**2 * t * ctrl[1]
        + 3 * mt * t**2 * ctrl[2]
        + t**3 * ctrl[3]
    )


def cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    mt = 1.0 - t
    a, b, c, d = mt**3, 3 * mt**2 * t, 3 * mt * t**2, t**3
    return (
        a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
        a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
    )


def cubic_speed(
    p0: Point, p1: Point, p2: Point, p3: Point, t: NDArray[np.float64]
) -> NDArray[np.float64]:
    """|B'(t)| for every parameter in ``t``."""
    ctrl = np.array([p0, p1, p2, p3], dtype=np.float64)
    d0 = 3 * (ctrl[1] - ctrl[0])
    d1 = 3 * (ctrl[2] - ctrl[1])
    d2 = 3 * (ctrl[3] - ctrl[2])
    t = np.asarray(t, dtype=np.float64)[:, None]
    mt = 1.0 - t
    deriv = mt**2 * d0 + 2 * mt * t * d1 + t**2 * d2
    return np.sqrt(np.sum(deriv**2, axis=1))
