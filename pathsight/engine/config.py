"""Geometry configuration — numeric tunables for measuring curves."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeometryConfig:
    """Controls sampling and solver precision of the geometry engine."""

    # Gauss-Legendre points used to integrate the speed of a cubic
    quadrature_order: int = 24

    # Samples per cubic when flattening for the shoelace area
    area_samples: int = 64

    # Bisection for point-at-length stops at this parameter interval
    bisection_tolerance: float = 1e-9
    max_bisection_steps: int = 64

    # Coordinates closer than this compare equal
    epsilon: float = 1e-9


DEFAULT_CONFIG = GeometryConfig()
