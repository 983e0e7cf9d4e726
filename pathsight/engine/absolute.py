"""Relative → absolute coordinate resolution."""

from __future__ import annotations

from pathsight.engine.forms import is_absolute
from pathsight.engine.registry import converter
from pathsight.models.segment import ClosePath, MoveTo, Path, Segment


@converter(name="absolute", description="Rewrite every segment with absolute coordinates")
def to_absolute(path: Path) -> Path:
    """Add the running point to every relative coordinate.

    A close path sends the running point back to the start of its subpath.
    Command kinds are kept as they are (H stays H, S stays S).
    """
    if is_absolute(path):
        return path

    x = y = mx = my = 0.0
    out: list[Segment] = []
    for seg in path:
        if isinstance(seg, ClosePath):
            out.append(ClosePath())
            x, y = mx, my
            continue
        absolute = seg.shifted(x, y, relative=False) if seg.relative else seg
        x, y = absolute.end(x, y)
        if isinstance(absolute, MoveTo):
            mx, my = x, y
        out.append(absolute)
    return Path(tuple(out))
