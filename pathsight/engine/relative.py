"""Absolute → relative coordinate rewriting."""

from __future__ import annotations

from pathsight.engine.forms import is_relative
from pathsight.engine.registry import converter
from pathsight.models.segment import ClosePath, MoveTo, Path, Segment


@converter(name="relative", description="Rewrite every segment after the first moveto relatively")
def to_relative(path: Path) -> Path:
    """Subtract the running point from every absolute coordinate.

    The leading moveto stays absolute (it is relative to the origin either
    way); segments that are already relative are passed through untouched.
    """
    if is_relative(path):
        return path

    x = y = mx = my = 0.0
    out: list[Segment] = []
    for index, seg in enumerate(path):
        if isinstance(seg, ClosePath):
            out.append(ClosePath(relative=True))
            x, y = mx, my
            continue

        absolute = seg.shifted(x, y, relative=False) if seg.relative else seg
        if index == 0:
            out.append(absolute)
        elif seg.relative:
            out.append(seg)
        else:
            out.append(seg.shifted(-x, -y, relative=True))

        x, y = absolute.end(x, y)
        if isinstance(absolute, MoveTo):
            mx, my = x, y
    return Path(tuple(out))
