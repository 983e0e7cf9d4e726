"""Reverse the drawing order of every subpath.

Works on the normalized form. Each subpath restarts at its old end point
and walks its segments backwards: cubic control points swap, arcs flip
their sweep flag. A closed subpath stays closed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pathsight.engine.normalize import Step, normalized_steps
from pathsight.engine.registry import converter
from pathsight.models.segment import ArcTo, ClosePath, CubicTo, LineTo, MoveTo, Path, QuadTo, Segment
from pathsight.utils.geometry import Point

logger = logging.getLogger(__name__)


@dataclass
class Subpath:
    start: Point
    steps: list[Step] = field(default_factory=list)
    closed: bool = False

    def segments(self) -> list[Segment]:
        out: list[Segment] = [MoveTo(*self.start)]
        out.extend(step.segment for step in self.steps)
        if self.closed:
            out.append(ClosePath())
        return out

    def reversed_segments(self) -> list[Segment]:
        if not self.steps:
            return self.segments()
        last = self.steps[-1].end
        out: list[Segment] = [MoveTo(*last)]
        out.extend(_backwards(step) for step in reversed(self.steps))
        if self.closed:
            out.append(ClosePath())
        return out


def _backwards(step: Step) -> Segment:
    seg = step.segment
    x, y = step.start
    if isinstance(seg, LineTo):
        return LineTo(x, y)
    if isinstance(seg, CubicTo):
        return CubicTo(seg.x2, seg.y2, seg.x1, seg.y1, x, y)
    if isinstance(seg, QuadTo):
        return QuadTo(seg.x1, seg.y1, x, y)
    if isinstance(seg, ArcTo):
        return ArcTo(seg.rx, seg.ry, seg.angle, seg.large_arc, 1 - seg.sweep, x, y)
    raise TypeError(f"{seg.letter!r} is not a drawing segment")


def subpaths(path: Path) -> list[Subpath]:
    """Group the normalized form by subpath.

    Drawing after a close path without a moveto opens a new subpath at the
    start point of the one just closed.
    """
    result: list[Subpath] = []
    current: Subpath | None = None
    for step in normalized_steps(path):
        seg = step.segment
        if isinstance(seg, MoveTo):
            current = Subpath(start=(seg.x, seg.y))
            result.append(current)
        elif isinstance(seg, ClosePath):
            if current is None:
                current = Subpath(start=step.subpath_start)
                result.append(current)
            current.closed = True
            current = None
        else:
            if current is None:
                current = Subpath(start=step.start)
                result.append(current)
            current.steps.append(step)
    return result


@converter(name="reverse", options={"only_subpaths"}, description="Reverse the drawing direction")
def reverse(path: Path, only_subpaths: bool = False) -> Path:
    """Reverse every subpath; ``only_subpaths`` leaves the first one as drawn."""
    out: list[Segment] = []
    for index, subpath in enumerate(subpaths(path)):
        if only_subpaths and index == 0:
            out.extend(subpath.segments())
        else:
            out.extend(subpath.reversed_segments())
    logger.debug("Reversed %d segments (only_subpaths=%s)", len(path), only_subpaths)
    return Path(tuple(out))
