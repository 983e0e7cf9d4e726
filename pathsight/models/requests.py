"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathsight.models.transform import TransformDescriptor


class PathRequest(BaseModel):
    path: str = Field(..., description="Path data, as in the d attribute")
    precision: int | None = Field(
        default=None,
        description="Decimals in the returned text (server default if unset, negative disables rounding)",
    )


class ConvertRequest(PathRequest):
    form: str = Field(..., description="Converter name, e.g. absolute, relative, curve, optimize")
    only_subpaths: bool = Field(default=False, description="reverse: keep the first subpath as drawn")


class PointRequest(PathRequest):
    length: float = Field(..., description="Distance along the path")


class TransformRequest(PathRequest):
    transform: TransformDescriptor = Field(default_factory=TransformDescriptor)
