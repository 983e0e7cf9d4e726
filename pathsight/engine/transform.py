"""Apply 2D / 3D transforms to a path.

Arcs are replaced by cubics first: an elliptical arc has no general image
under skew or perspective. Smooth commands are expanded for the same reason.
Every remaining point is projected through the matrix; lines are written as
H or V when the projected end still lies on the running point's row or
column, otherwise as L.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pathsight.engine.absolute import to_absolute
from pathsight.engine.arc import arc_to_cubic
from pathsight.engine.bbox import bounding_box
from pathsight.engine.matrix import (
    as_descriptor,
    as_matrix,
    check_invertible,
    is_identity,
    project_point,
)
from pathsight.engine.normalize import normalized_steps
from pathsight.models.segment import (
    ArcTo,
    ClosePath,
    CubicTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    Path,
    QuadTo,
    Segment,
    VerticalLineTo,
)
from pathsight.models.transform import TransformDescriptor
from pathsight.utils.math_helpers import almost_equal

logger = logging.getLogger(__name__)

Origin = tuple[float, float, float]


def _origin(value: Any) -> Origin:
    if value is None:
        return 0.0, 0.0, 0.0
    values = [float(v) for v in value]
    if len(values) == 2:
        values.append(0.0)
    return values[0], values[1], values[2]


def transform(path: Path, value: Any = None, origin: Any = None) -> Path:
    """Transform ``path`` by a descriptor, a mapping or a 3x3 / 4x4 matrix.

    ``origin`` applies to matrices and to descriptors that carry no origin of
    their own. Nothing to do (no value, an empty descriptor, or an identity
    matrix) returns the absolute form of the path.
    """
    if value is None:
        return to_absolute(path)
    if isinstance(value, (TransformDescriptor, Mapping)):
        descriptor = as_descriptor(value)
        if descriptor.is_empty:
            return to_absolute(path)
        if descriptor.origin is not None:
            origin = descriptor.origin
        value = descriptor

    m = as_matrix(value)
    if is_identity(m):
        return to_absolute(path)
    check_invertible(m)
    center = _origin(origin)

    def project(x: float, y: float) -> tuple[float, float]:
        return project_point(m, x, y, center)

    out: list[Segment] = []
    x = y = mx = my = 0.0
    for step in normalized_steps(path):
        seg = step.segment
        if isinstance(seg, MoveTo):
            x, y = mx, my = project(seg.x, seg.y)
            out.append(MoveTo(x, y))
        elif isinstance(seg, ClosePath):
            out.append(ClosePath())
            x, y = mx, my
        elif isinstance(seg, LineTo):
            lx, ly = project(seg.x, seg.y)
            if almost_equal(ly, y):
                out.append(HorizontalLineTo(lx))
            elif almost_equal(lx, x):
                out.append(VerticalLineTo(ly))
            else:
                out.append(LineTo(lx, ly))
            x, y = lx, ly
        elif isinstance(seg, CubicTo):
            c1, c2, end = project(seg.x1, seg.y1), project(seg.x2, seg.y2), project(seg.x, seg.y)
            out.append(CubicTo(*c1, *c2, *end))
            x, y = end
        elif isinstance(seg, QuadTo):
            c1, end = project(seg.x1, seg.y1), project(seg.x, seg.y)
            out.append(QuadTo(*c1, *end))
            x, y = end
        elif isinstance(seg, ArcTo):
            sx, sy = step.start
            for c in arc_to_cubic(sx, sy, seg.rx, seg.ry, seg.angle, seg.large_arc, seg.sweep, seg.x, seg.y):
                c1, c2, end = project(c[0], c[1]), project(c[2], c[3]), project(c[4], c[5])
                out.append(CubicTo(*c1, *c2, *end))
                x, y = end

    logger.debug("Transformed %d segments into %d", len(path), len(out))
    return Path(tuple(out))


def flip_x(path: Path) -> Path:
    """Mirror horizontally around the bounding-box center."""
    box = bounding_box(path)
    return transform(path, {"rotate": [0, 180, 0], "origin": [box.cx, box.cy, 0]})


def flip_y(path: Path) -> Path:
    """Mirror vertically around the bounding-box center."""
    box = bounding_box(path)
    return transform(path, {"rotate": [180, 0, 0], "origin": [box.cx, box.cy, 0]})
