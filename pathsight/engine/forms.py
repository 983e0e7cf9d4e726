"""Form predicates — structural properties of a Path, computed on demand.

A path can satisfy several at once; a curve-only path is also normalized and
absolute. The converters use them to skip work they would not change.
"""

from __future__ import annotations

from pathsight.models.segment import ArcTo, ClosePath, CubicTo, LineTo, MoveTo, Path, QuadTo

_NORMALIZED_TYPES = (MoveTo, LineTo, CubicTo, QuadTo, ArcTo, ClosePath)
_CURVE_TYPES = (MoveTo, CubicTo, ClosePath)


def is_absolute(path: Path) -> bool:
    return not any(seg.relative for seg in path)


def is_relative(path: Path) -> bool:
    """Every segment after the leading moveto is relative."""
    return all(seg.relative for seg in path[1:])


def is_normalized(path: Path) -> bool:
    return all(isinstance(seg, _NORMALIZED_TYPES) and not seg.relative for seg in path)


def is_curve(path: Path) -> bool:
    return all(isinstance(seg, _CURVE_TYPES) and not seg.relative for seg in path)
