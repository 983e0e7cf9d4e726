"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathsight.models.segment import Path
from pathsight.svg.parser import parse


# Sample path data

LINE = "M0 0L10 0"

SQUARE = "M0 0L10 0L10 10L0 10Z"

# Same square, relative with shorthand lines
SQUARE_RELATIVE = "m0 0h10v10h-10z"

# Circle of radius 10 centered on (10, 10), drawn clockwise on screen
CIRCLE = "M0 10A10 10 0 1 1 20 10A10 10 0 1 1 0 10Z"

# Upper half of a circle of radius 10 centered on (10, 0)
SEMICIRCLE = "M0 0A10 10 0 0 1 20 0"

SMOOTH_CUBIC = "M0 0C0 10 10 10 10 0S20 -10 20 0"

SMOOTH_QUAD = "M0 0Q5 5 10 0T20 0T30 0"

WAVE = "M10 10C20 40 60 -20 80 30Q100 60 120 30"

# Every command kind, both cases, two subpaths
ALL_COMMANDS = (
    "M10 10h20v20H10V10z"
    "m5 5c1 1 2 2 3 3s4 4 5 5q1 1 2 2t3 3a5 5 0 0 1 10 0l-5 5"
    "C40 40 50 50 60 40S70 30 80 40Q90 50 100 40T120 40A10 5 30 1 0 140 60L150 70Z"
)

# Lucide-style icon outline
HOME = (
    "M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10"
    "v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"
)

SAMPLE_PATHS = [LINE, SQUARE, SQUARE_RELATIVE, CIRCLE, SEMICIRCLE, SMOOTH_CUBIC, SMOOTH_QUAD, WAVE, ALL_COMMANDS, HOME]


@pytest.fixture
def square() -> Path:
    return parse(SQUARE)


@pytest.fixture
def circle() -> Path:
    return parse(CIRCLE)


@pytest.fixture(params=SAMPLE_PATHS)
def sample_path(request) -> Path:
    return parse(request.param)
