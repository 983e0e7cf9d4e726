"""Bounding boxes from the curve form of a path."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pathsight.engine.config import DEFAULT_CONFIG, GeometryConfig
from pathsight.engine.curve import Bezier, contours
from pathsight.models.segment import Path
from pathsight.utils.geometry import Point, cubic_point
from pathsight.utils.math_helpers import quadratic_roots

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    x2: float
    y2: float

    @property
    def width(self) -> float:
        return self.x2 - self.x

    @property
    def height(self) -> float:
        return self.y2 - self.y

    @property
    def cx(self) -> float:
        return self.x + self.width / 2

    @property
    def cy(self) -> float:
        return self.y + self.height / 2

    @property
    def center(self) -> Point:
        return self.cx, self.cy

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.x, self.y, self.x2, self.y2

    def to_dict(self) -> dict[str, float]:
        return {
            "x": self.x,
            "y": self.y,
            "x2": self.x2,
            "y2": self.y2,
            "width": self.width,
            "height": self.height,
            "cx": self.cx,
            "cy": self.cy,
        }


def _axis_roots(a: float, b: float, c: float, d: float, epsilon: float) -> list[float]:
    # derivative of the cubic bernstein polynomial along one axis
    qa = 3 * (-a + 3 * b - 3 * c + d)
    qb = 6 * (a - 2 * b + c)
    qc = 3 * (b - a)
    return [t for t in quadratic_roots(qa, qb, qc, epsilon) if 0 < t < 1]


def bezier_extrema(piece: Bezier, epsilon: float = DEFAULT_CONFIG.epsilon) -> list[Point]:
    """End points of a cubic plus its interior turning points."""
    p0, p1, p2, p3 = piece
    ts = _axis_roots(p0[0], p1[0], p2[0], p3[0], epsilon)
    ts += _axis_roots(p0[1], p1[1], p2[1], p3[1], epsilon)
    return [p0, p3] + [cubic_point(p0, p1, p2, p3, t) for t in ts]


def bounding_box(path: Path, config: GeometryConfig | None = None) -> BoundingBox:
    """Tight axis-aligned box around every point the path draws.

    Lone movetos count as points so a path such as ``M5 5`` has a zero-size
    box at (5, 5).
    """
    config = config or DEFAULT_CONFIG
    points: list[Point] = []
    for contour in contours(path):
        points.append(contour.start)
        for piece in contour.pieces:
            points.extend(bezier_extrema(piece, config.epsilon))

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    box = BoundingBox(min(xs), min(ys), max(xs), max(ys))
    logger.debug("Bounding box over %d points: %s", len(points), box.as_tuple())
    return box
