"""Curve conversion — any path → moveto, cubic and close only.

Lines become straight cubics (control points at thirds, so the parameter
stays linear), quadratics are degree-raised, arcs go through
``arc_to_cubic``. A close path whose previous segment already ends on the
subpath start adds nothing and is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pathsight.engine.arc import Cubic, arc_to_cubic, line_to_cubic
from pathsight.engine.forms import is_curve
from pathsight.engine.normalize import Step, normalized_steps
from pathsight.engine.registry import converter
from pathsight.models.segment import (
    ArcTo,
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    Path,
    QuadTo,
    Segment,
)
from pathsight.utils.geometry import Point
from pathsight.utils.math_helpers import EPSILON, points_equal


def quad_to_cubic(x1: float, y1: float, qx: float, qy: float, x2: float, y2: float) -> Cubic:
    """Exact cubic form of a quadratic: controls 2/3 of the way to ``q``."""
    return (
        x1 + 2 / 3 * (qx - x1),
        y1 + 2 / 3 * (qy - y1),
        x2 + 2 / 3 * (qx - x2),
        y2 + 2 / 3 * (qy - y2),
        x2,
        y2,
    )


def step_to_cubics(step: Step) -> list[CubicTo]:
    """Cubic replacement for one normalized drawing segment."""
    seg = step.segment
    x1, y1 = step.start
    if isinstance(seg, CubicTo):
        return [seg]
    if isinstance(seg, LineTo):
        return [CubicTo(*line_to_cubic(x1, y1, seg.x, seg.y))]
    if isinstance(seg, QuadTo):
        return [CubicTo(*quad_to_cubic(x1, y1, seg.x1, seg.y1, seg.x, seg.y))]
    if isinstance(seg, ArcTo):
        cubics = arc_to_cubic(
            x1, y1, seg.rx, seg.ry, seg.angle, seg.large_arc, seg.sweep, seg.x, seg.y
        )
        return [CubicTo(*c) for c in cubics]
    raise TypeError(f"{seg.letter!r} is not a drawing segment")


@converter(name="curve", description="Only moveto, cubic bezier and close path segments")
def to_curve(path: Path) -> Path:
    if is_curve(path):
        return path

    out: list[Segment] = []
    for step in normalized_steps(path):
        seg = step.segment
        if isinstance(seg, MoveTo):
            out.append(seg)
        elif isinstance(seg, ClosePath):
            prev = out[-1]
            if isinstance(prev, CubicTo) and points_equal((prev.x, prev.y), step.subpath_start):
                continue
            out.append(seg)
        else:
            out.extend(step_to_cubics(step))
    return Path(tuple(out))


@converter(name="fix", description="Drop close path segments that add no closing line")
def fix_path(path: Path) -> Path:
    """Remove redundant close paths without converting anything else."""
    out: list[Segment] = []
    for seg, step in zip(path, normalized_steps(path)):
        if isinstance(seg, ClosePath):
            drawn = not isinstance(out[-1], (MoveTo, ClosePath))
            if drawn and points_equal(step.start, step.subpath_start):
                continue
        out.append(seg)
    return Path(tuple(out))


Bezier = tuple[Point, Point, Point, Point]


@dataclass
class Contour:
    """One continuous run of cubics in curve form."""

    start: Point
    pieces: list[Bezier] = field(default_factory=list)
    closed: bool = False


def is_straight(piece: Bezier, tolerance: float = EPSILON) -> bool:
    """True for the straight cubics made by ``line_to_cubic``."""
    p0, p1, p2, p3 = piece
    third = line_to_cubic(p0[0], p0[1], p3[0], p3[1])
    return points_equal(p1, (third[0], third[1]), tolerance) and points_equal(
        p2, (third[2], third[3]), tolerance
    )


def contours(path: Path) -> list[Contour]:
    """Split the curve form of ``path`` into contours of bezier pieces.

    A close path ends its contour with a straight closing piece when the pen
    is not already back at the start; drawing after a close path opens a new
    contour at the same start point. A second close in a row adds nothing.
    """
    result: list[Contour] = []
    current: Contour | None = None
    x = y = 0.0
    for seg in to_curve(path):
        if isinstance(seg, MoveTo):
            x, y = seg.x, seg.y
            current = Contour(start=(x, y))
            result.append(current)
        elif isinstance(seg, ClosePath):
            if current is None:
                # repeated close: the pen already sits on the subpath start
                continue
            start = current.start
            if not points_equal((x, y), start):
                current.pieces.append(((x, y), *_thirds((x, y), start), start))
            current.closed = True
            x, y = start
            current = None
        elif isinstance(seg, CubicTo):
            if current is None:
                current = Contour(start=(x, y))
                result.append(current)
            current.pieces.append(((x, y), (seg.x1, seg.y1), (seg.x2, seg.y2), (seg.x, seg.y)))
            x, y = seg.x, seg.y
    return result


def _thirds(p: Point, q: Point) -> tuple[Point, Point]:
    c = line_to_cubic(p[0], p[1], q[0], q[1])
    return (c[0], c[1]), (c[2], c[3])
