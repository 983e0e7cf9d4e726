"""4x4 transform matrices (numpy) built from transform descriptors.

Column-vector convention: a point is transformed as ``M @ [x, y, z, 1]``.
Composition post-multiplies in the order ``matrix, translate, rotate, skew,
scale``, so scale is applied to the point first.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

import numpy as np
import pydantic
from numpy.typing import NDArray

from pathsight.exceptions import GeometryError, ValidationError
from pathsight.models.transform import TransformDescriptor
from pathsight.utils.geometry import Point

logger = logging.getLogger(__name__)

Matrix = NDArray[np.float64]

# Determinants below this are treated as singular
_SINGULAR = 1e-12


def translation(x: float, y: float, z: float = 0.0) -> Matrix:
    m = np.eye(4)
    m[:3, 3] = (x, y, z)
    return m


def rotation(rx: float, ry: float, rz: float) -> Matrix:
    """Rotation in degrees, post-multiplied as z, then y, then x."""
    ax, ay, az = (math.radians(v) for v in (rx, ry, rz))
    cx, sx = math.cos(ax), math.sin(ax)
    cy, sy = math.cos(ay), math.sin(ay)
    cz, sz = math.cos(az), math.sin(az)
    mx = np.array([[1, 0, 0, 0], [0, cx, -sx, 0], [0, sx, cx, 0], [0, 0, 0, 1]], dtype=float)
    my = np.array([[cy, 0, sy, 0], [0, 1, 0, 0], [-sy, 0, cy, 0], [0, 0, 0, 1]], dtype=float)
    mz = np.array([[cz, -sz, 0, 0], [sz, cz, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]], dtype=float)
    return mz @ my @ mx


def skewing(sx: float, sy: float) -> Matrix:
    m = np.eye(4)
    m[0, 1] = math.tan(math.radians(sx))
    m[1, 0] = math.tan(math.radians(sy))
    return m


def scaling(x: float, y: float, z: float = 1.0) -> Matrix:
    return np.diag([x, y, z, 1.0])


def from_values(values: list[float]) -> Matrix:
    """6 values are a 2D affine ``a b c d e f``; 16 are column-major 3D."""
    if len(values) == 6:
        a, b, c, d, e, f = values
        return np.array(
            [[a, c, 0, e], [b, d, 0, f], [0, 0, 1, 0], [0, 0, 0, 1]], dtype=float
        )
    if len(values) == 16:
        return np.array(values, dtype=float).reshape(4, 4).T
    raise ValidationError(f"a matrix takes 6 or 16 values, got {len(values)}")


def as_descriptor(value: TransformDescriptor | Mapping[str, Any]) -> TransformDescriptor:
    if isinstance(value, TransformDescriptor):
        return value
    try:
        return TransformDescriptor.model_validate(dict(value))
    except pydantic.ValidationError as exc:
        raise ValidationError(f"invalid transform: {exc.errors()[0]['msg']}") from exc


def compose_matrix(descriptor: TransformDescriptor | Mapping[str, Any]) -> Matrix:
    d = as_descriptor(descriptor)
    m = np.eye(4)
    if d.matrix is not None:
        m = m @ from_values(d.matrix)
    if d.translate is not None:
        m = m @ translation(*d.translate)
    if d.rotate is not None:
        m = m @ rotation(*d.rotate)
    if d.skew is not None:
        m = m @ skewing(*d.skew)
    if d.scale is not None:
        m = m @ scaling(*d.scale)
    return m


def as_matrix(value: Any) -> Matrix:
    """Accept a descriptor, a mapping, or a 3x3 / 4x4 array."""
    if isinstance(value, (TransformDescriptor, Mapping)):
        return compose_matrix(value)
    m = np.asarray(value, dtype=float)
    if m.shape == (4, 4):
        return m
    if m.shape == (3, 3):
        # 2D homogeneous matrix, z passes through
        out = np.eye(4)
        out[np.ix_([0, 1, 3], [0, 1, 3])] = m
        return out
    raise ValidationError(f"expected a 3x3 or 4x4 matrix, got shape {m.shape}")


def is_identity(m: Matrix) -> bool:
    return bool(np.allclose(m, np.eye(4)))


def check_invertible(m: Matrix) -> None:
    det = float(np.linalg.det(m))
    if abs(det) < _SINGULAR:
        raise GeometryError(f"transform matrix is singular (det={det:g})")


def project_point(
    m: Matrix, x: float, y: float, origin: tuple[float, float, float] = (0.0, 0.0, 0.0)
) -> Point:
    """Project (x, y) through ``m`` around ``origin``.

    The point is moved so the origin sits at (0, 0), transformed, divided by w
    and moved back. A non-zero origin z places the viewer at that distance:
    x and y are scaled by ``|oz| / |z - oz|``, so parts turned away from the
    viewer shrink.
    """
    ox, oy, oz = origin
    v = m @ np.array([x - ox, y - oy, 0.0, 1.0])
    w = v[3]
    if abs(w) < _SINGULAR:
        raise GeometryError(f"point ({x:g}, {y:g}) projects to infinity (w=0)")
    px, py, pz = v[0] / w, v[1] / w, v[2] / w
    depth = pz - oz
    factor = abs(oz) / abs(depth) if oz and depth else 1.0
    return float(px * factor + ox), float(py * factor + oy)
