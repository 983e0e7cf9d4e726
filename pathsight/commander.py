"""PathCommander — chainable wrapper around one path.

    PathCommander("M0 0L10 0L10 10Z").to_relative().optimize()
    str(PathCommander(d).transform({"rotate": 45}))

Conversions replace the held path and return the commander; measurements
return plain values. Rounding for ``str()`` and the transform origin default
to the application settings.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pathsight.config import settings
from pathsight.engine import (
    fix_path,
    normalize,
    optimize,
    reverse,
    to_absolute,
    to_curve,
    to_relative,
)
from pathsight.engine.area import DrawDirection, draw_direction, path_area
from pathsight.engine.bbox import BoundingBox, bounding_box
from pathsight.engine.length import path_length, point_at_length
from pathsight.engine.matrix import as_descriptor
from pathsight.engine.split import split
from pathsight.engine.transform import flip_x, flip_y, transform
from pathsight.models.segment import Path
from pathsight.models.transform import TransformDescriptor
from pathsight.svg.parser import ensure_path
from pathsight.svg.serializer import round_path, serialize
from pathsight.utils.geometry import Point

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class PathCommander:
    def __init__(
        self,
        path: str | Path,
        precision: int | bool | None = _UNSET,
        origin: list[float] | tuple[float, ...] | None = _UNSET,
    ) -> None:
        self.segments: Path = ensure_path(path)
        self.precision = settings.precision if precision is _UNSET else precision
        self.origin = settings.default_origin if origin is _UNSET else origin

    def __str__(self) -> str:
        return serialize(self.segments, self.precision)

    def __repr__(self) -> str:
        return f"PathCommander({str(self)!r})"

    # -- conversions --------------------------------------------------------

    def _replace(self, path: Path) -> PathCommander:
        self.segments = path
        return self

    def to_absolute(self) -> PathCommander:
        return self._replace(to_absolute(self.segments))

    def to_relative(self) -> PathCommander:
        return self._replace(to_relative(self.segments))

    def normalize(self) -> PathCommander:
        return self._replace(normalize(self.segments))

    def to_curve(self) -> PathCommander:
        return self._replace(to_curve(self.segments))

    def fix(self) -> PathCommander:
        return self._replace(fix_path(self.segments))

    def optimize(self) -> PathCommander:
        return self._replace(optimize(self.segments, self.precision))

    def round(self) -> PathCommander:
        return self._replace(round_path(self.segments, self.precision))

    def reverse(self, only_subpaths: bool = False) -> PathCommander:
        return self._replace(reverse(self.segments, only_subpaths))

    def transform(self, descriptor: Any = None) -> PathCommander:
        """Apply a transform; without an origin it turns around ``self.origin``.

        When neither is set the origin is the center of the bounding box.
        """
        if descriptor is None:
            return self._replace(transform(self.segments, None))
        origin = self.origin
        if isinstance(descriptor, (Mapping, TransformDescriptor)):
            descriptor = as_descriptor(descriptor)
            origin = descriptor.origin or origin
        if origin is None:
            box = bounding_box(self.segments)
            origin = [box.cx, box.cy, 0.0]
        logger.debug("Transform around origin %s", origin)
        return self._replace(transform(self.segments, descriptor, origin))

    def flip_x(self) -> PathCommander:
        return self._replace(flip_x(self.segments))

    def flip_y(self) -> PathCommander:
        return self._replace(flip_y(self.segments))

    # -- measurements -------------------------------------------------------

    def bbox(self) -> BoundingBox:
        return bounding_box(self.segments)

    def length(self) -> float:
        return path_length(self.segments)

    def point_at_length(self, length: float) -> Point:
        return point_at_length(self.segments, length)

    def area(self) -> float:
        return path_area(self.segments)

    def draw_direction(self) -> DrawDirection:
        return draw_direction(self.segments)

    def split(self) -> tuple[Path, ...]:
        return split(self.segments)
