"""Split a path into one absolute path per subpath."""

from __future__ import annotations

from pathsight.engine.absolute import to_absolute
from pathsight.models.segment import ClosePath, MoveTo, Path, Segment


def split(path: Path) -> tuple[Path, ...]:
    """Cut before every moveto, and after a close path that is followed by drawing.

    Segments keep their command kind; only coordinates become absolute. A
    subpath opened implicitly after a close path gets an explicit moveto.
    """
    pieces: list[list[Segment]] = []
    current: list[Segment] = []
    mx = my = 0.0
    for seg in to_absolute(path):
        if isinstance(seg, MoveTo):
            if current:
                pieces.append(current)
            current = [seg]
            mx, my = seg.x, seg.y
        elif not current:
            current = [MoveTo(mx, my), seg]
        else:
            current.append(seg)
        if isinstance(seg, ClosePath):
            pieces.append(current)
            current = []
    if current:
        pieces.append(current)
    return tuple(Path(tuple(piece)) for piece in pieces)
