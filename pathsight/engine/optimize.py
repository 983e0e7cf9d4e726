"""Optimizer — shortest text encoding for every segment.

For each segment the candidates are, in order of preference: relative
shorthand, relative, absolute shorthand, absolute, and the segment as it
was given. The shortest once rounded wins; ties go to the earlier one.

Relative values are computed from the point a reader of the *emitted* text
would be at, not from the exact geometry, so rounding errors do not add up
along the path. Shorthand is offered only when the implied control point
(or the unchanged coordinate for H / V) matches within half a unit of the
last kept decimal.
"""

from __future__ import annotations

import logging

from pathsight.engine.normalize import Pen, normalized_steps
from pathsight.engine.registry import converter
from pathsight.models.segment import (
    ClosePath,
    CubicTo,
    HorizontalLineTo,
    LineTo,
    Path,
    QuadTo,
    Segment,
    SmoothCubicTo,
    SmoothQuadTo,
    VerticalLineTo,
)
from pathsight.svg.serializer import format_segment, round_segment
from pathsight.utils.math_helpers import EPSILON, almost_equal, points_equal

logger = logging.getLogger(__name__)


def _tolerance(precision: int | bool | None) -> float:
    if precision is None or precision is False or precision < 0:
        return EPSILON
    return 0.5 * 10 ** -int(precision)


def _shorthand(target: Segment, pen: Pen, tolerance: float) -> Segment | None:
    """Absolute shorthand drawing ``target`` from where ``pen`` is, if any."""
    if isinstance(target, LineTo):
        if almost_equal(target.y, pen.y, tolerance):
            return HorizontalLineTo(target.x)
        if almost_equal(target.x, pen.x, tolerance):
            return VerticalLineTo(target.y)
    elif isinstance(target, CubicTo):
        if points_equal((target.x1, target.y1), pen.cubic_reflection(), tolerance):
            return SmoothCubicTo(target.x2, target.y2, target.x, target.y)
    elif isinstance(target, QuadTo):
        if points_equal((target.x1, target.y1), pen.quad_reflection(), tolerance):
            return SmoothQuadTo(target.x, target.y)
    return None


def _candidates(
    index: int, source: Segment, target: Segment, pen: Pen, precision: int | bool | None
) -> list[Segment]:
    if isinstance(target, ClosePath):
        return [ClosePath(relative=True)]
    if index == 0:
        return [round_segment(target, precision)]

    absolute = round_segment(target, precision)
    tolerance = _tolerance(precision)
    options: list[Segment] = []

    short = _shorthand(absolute, pen, tolerance)
    if short is not None:
        options.append(round_segment(short.shifted(-pen.x, -pen.y, relative=True), precision))
    options.append(round_segment(absolute.shifted(-pen.x, -pen.y, relative=True), precision))
    if short is not None:
        options.append(short)
    options.append(absolute)
    options.append(round_segment(source, precision))
    return options


@converter(name="optimize", options={"precision"}, description="Shortest mix of absolute, relative and shorthand")
def optimize(path: Path, precision: int | bool | None = 4) -> Path:
    out: list[Segment] = []
    pen = Pen()
    for index, (source, step) in enumerate(zip(path, normalized_steps(path))):
        options = _candidates(index, source, step.segment, pen, precision)
        best = min(options, key=lambda seg: len(format_segment(seg, precision)))
        pen.step(best)
        out.append(best)

    logger.debug("Optimized %d segments at precision %s", len(out), precision)
    return Path(tuple(out))
