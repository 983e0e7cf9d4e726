"""PathSight — SVG path data parsing, conversion, geometry and transforms."""

from pathsight.commander import PathCommander
from pathsight.engine import (
    fix_path,
    get_registry,
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
from pathsight.engine.split import split
from pathsight.engine.transform import flip_x, flip_y, transform
from pathsight.exceptions import GeometryError, ParseError, PathError, ValidationError
from pathsight.models.segment import Path, Segment
from pathsight.models.transform import TransformDescriptor
from pathsight.svg.parser import is_valid_path, parse
from pathsight.svg.serializer import round_path, serialize

__all__ = [
    "PathCommander",
    "Path",
    "Segment",
    "TransformDescriptor",
    "BoundingBox",
    "DrawDirection",
    "PathError",
    "ParseError",
    "ValidationError",
    "GeometryError",
    "parse",
    "is_valid_path",
    "serialize",
    "round_path",
    "to_absolute",
    "to_relative",
    "normalize",
    "to_curve",
    "fix_path",
    "optimize",
    "reverse",
    "split",
    "transform",
    "flip_x",
    "flip_y",
    "bounding_box",
    "path_length",
    "point_at_length",
    "path_area",
    "draw_direction",
    "get_registry",
]
