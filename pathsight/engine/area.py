"""Signed area and draw direction.

Each contour is flattened by sampling its cubics and measured with the
shoelace formula. Coordinates follow the SVG canvas (y grows downwards), so
a positive area means the path is drawn clockwise on screen.
"""

from __future__ import annotations

import logging
from enum import Enum

import numpy as np

from pathsight.engine.config import DEFAULT_CONFIG, GeometryConfig
from pathsight.engine.curve import Contour, contours
from pathsight.models.segment import Path
from pathsight.utils.geometry import cubic_points, signed_area

logger = logging.getLogger(__name__)


class DrawDirection(str, Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter-clockwise"


def contour_area(contour: Contour, config: GeometryConfig | None = None) -> float:
    """Signed area of one contour, closed implicitly back to its start."""
    config = config or DEFAULT_CONFIG
    if not contour.pieces:
        return 0.0
    # drop t = 0 so shared end points are not repeated
    ts = np.linspace(0.0, 1.0, config.area_samples + 1)[1:]
    rings = [np.array([contour.start], dtype=np.float64)]
    rings += [cubic_points(*piece, ts) for piece in contour.pieces]
    return signed_area(np.vstack(rings))


def path_area(path: Path, config: GeometryConfig | None = None) -> float:
    """Sum of the signed areas of every subpath."""
    total = sum(contour_area(contour, config) for contour in contours(path))
    logger.debug("Path area %.6f", total)
    return total


def draw_direction(path: Path, config: GeometryConfig | None = None) -> DrawDirection:
    if path_area(path, config) >= 0:
        return DrawDirection.CLOCKWISE
    return DrawDirection.COUNTER_CLOCKWISE
