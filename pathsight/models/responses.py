"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    converters_registered: int = 0


class ErrorResponse(BaseModel):
    type: str
    message: str
    position: int | None = None


class PathResponse(BaseModel):
    path: str
    segments: list[list[Any]] = Field(default_factory=list)


class ConvertResponse(PathResponse):
    form: str


class BoundingBoxModel(BaseModel):
    x: float
    y: float
    x2: float
    y2: float
    width: float
    height: float
    cx: float
    cy: float


class MeasureResponse(BaseModel):
    bbox: BoundingBoxModel
    length: float
    area: float
    direction: str


class PointResponse(BaseModel):
    x: float
    y: float


class SplitResponse(BaseModel):
    paths: list[str] = Field(default_factory=list)
