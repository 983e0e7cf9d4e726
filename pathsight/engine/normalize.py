"""Normalization — absolute coordinates, shorthand commands expanded.

S / T get their implied control point by reflecting the previous segment's
last control point through the current point; when the previous segment is
not of the same family the current point itself is used. H / V become full
lines. The output only holds M, L, C, Q, A and Z.
"""

from __future__ import annotations

from dataclasses import dataclass

from pathsight.engine.forms import is_normalized
from pathsight.engine.registry import converter
from pathsight.models.segment import (
    ClosePath,
    CubicTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    Path,
    QuadTo,
    Segment,
    SmoothCubicTo,
    SmoothQuadTo,
    VerticalLineTo,
)
from pathsight.utils.geometry import Point, reflect


@dataclass(frozen=True)
class Step:
    """One segment seen in absolute and normalized form, with its context."""

    # absolute form of the segment as written (H, S, T ... kept)
    source: Segment
    # normalized counterpart (M, L, C, Q, A, Z)
    segment: Segment
    # running point before the segment
    start: Point
    # moveto point of the enclosing subpath
    subpath_start: Point

    @property
    def end(self) -> Point:
        if isinstance(self.segment, ClosePath):
            return self.subpath_start
        return self.segment.x, self.segment.y  # type: ignore[attr-defined]


class Pen:
    """Drawing state a renderer keeps while reading segments one by one."""

    def __init__(self) -> None:
        self.x = self.y = 0.0
        self.mx = self.my = 0.0
        # last control point of the previous segment, per bezier family
        self.last_cubic: Point | None = None
        self.last_quad: Point | None = None

    @property
    def point(self) -> Point:
        return self.x, self.y

    def cubic_reflection(self) -> Point:
        """First control point an S drawn now would get."""
        return reflect(self.last_cubic, self.point) if self.last_cubic else self.point

    def quad_reflection(self) -> Point:
        """Control point a T drawn now would get."""
        return reflect(self.last_quad, self.point) if self.last_quad else self.point

    def step(self, seg: Segment) -> Step:
        """Read one segment, absolute or relative, and advance."""
        if seg.relative and not isinstance(seg, ClosePath):
            seg = seg.shifted(self.x, self.y, relative=False)
        elif isinstance(seg, ClosePath):
            seg = ClosePath()

        current = self.point
        cubic_ctrl: Point | None = None
        quad_ctrl: Point | None = None

        if isinstance(seg, MoveTo):
            self.mx, self.my = seg.x, seg.y
            normal: Segment = seg
        elif isinstance(seg, HorizontalLineTo):
            normal = LineTo(seg.x, self.y)
        elif isinstance(seg, VerticalLineTo):
            normal = LineTo(self.x, seg.y)
        elif isinstance(seg, SmoothCubicTo):
            c1 = self.cubic_reflection()
            normal = CubicTo(c1[0], c1[1], seg.x2, seg.y2, seg.x, seg.y)
            cubic_ctrl = (seg.x2, seg.y2)
        elif isinstance(seg, CubicTo):
            normal = seg
            cubic_ctrl = (seg.x2, seg.y2)
        elif isinstance(seg, SmoothQuadTo):
            ctrl = self.quad_reflection()
            normal = QuadTo(ctrl[0], ctrl[1], seg.x, seg.y)
            quad_ctrl = ctrl
        elif isinstance(seg, QuadTo):
            normal = seg
            quad_ctrl = (seg.x1, seg.y1)
        else:
            # LineTo, ArcTo and ClosePath are already normal
            normal = seg

        step = Step(source=seg, segment=normal, start=current, subpath_start=(self.mx, self.my))
        self.x, self.y = step.end
        self.last_cubic, self.last_quad = cubic_ctrl, quad_ctrl
        return step


def normalized_steps(path: Path) -> list[Step]:
    """Walk a path, pairing each absolute segment with its normalized form."""
    pen = Pen()
    return [pen.step(seg) for seg in path]


@converter(name="normalize", description="Absolute coordinates with shorthand commands expanded")
def normalize(path: Path) -> Path:
    if is_normalized(path):
        return path
    return Path(tuple(step.segment for step in normalized_steps(path)))
