"""Transform descriptor — the declarative form of a path transform.

Every field is optional and defaults to identity. Short forms are expanded
on validation so the matrix code only ever sees full-length lists:

    translate: 5        -> [5, 0, 0]      [5, 6] -> [5, 6, 0]
    rotate:    30       -> [0, 0, 30]     (degrees, about the z axis)
    skew:      15       -> [15, 0]        (skewX, skewY in degrees)
    scale:     2        -> [2, 2, 1]      [2, 3] -> [2, 3, 1]
    origin:    [x, y]   -> [x, y, 0]
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

Number = float | int


def _expand(value: Any, name: str, sizes: tuple[int, ...], pad: list[float]) -> list[float] | None:
    if value is None:
        return None
    values = list(value)
    if len(values) not in sizes:
        raise ValueError(f"{name} takes {' or '.join(map(str, sizes))} values, got {len(values)}")
    return [float(v) for v in values] + pad[len(values):]


class TransformDescriptor(BaseModel):
    model_config = ConfigDict(extra="forbid")

    translate: Number | list[Number] | None = None
    rotate: Number | list[Number] | None = None
    skew: Number | list[Number] | None = None
    scale: Number | list[Number] | None = None
    # 6 values (a, b, c, d, e, f) or 16 values in column-major order
    matrix: list[Number] | None = None
    origin: list[Number] | None = None

    @field_validator("translate", mode="before")
    @classmethod
    def _translate(cls, v: Any) -> Any:
        if isinstance(v, (int, float)):
            return [float(v), 0.0, 0.0]
        return _expand(v, "translate", (1, 2, 3), [0.0, 0.0, 0.0])

    @field_validator("rotate", mode="before")
    @classmethod
    def _rotate(cls, v: Any) -> Any:
        if isinstance(v, (int, float)):
            return [0.0, 0.0, float(v)]
        return _expand(v, "rotate", (2, 3), [0.0, 0.0, 0.0])

    @field_validator("skew", mode="before")
    @classmethod
    def _skew(cls, v: Any) -> Any:
        if isinstance(v, (int, float)):
            return [float(v), 0.0]
        return _expand(v, "skew", (1, 2), [0.0, 0.0])

    @field_validator("scale", mode="before")
    @classmethod
    def _scale(cls, v: Any) -> Any:
        if isinstance(v, (int, float)):
            return [float(v), float(v), 1.0]
        if v is not None and len(v) == 1:
            return [float(v[0]), float(v[0]), 1.0]
        return _expand(v, "scale", (2, 3), [1.0, 1.0, 1.0])

    @field_validator("matrix", mode="before")
    @classmethod
    def _matrix(cls, v: Any) -> Any:
        return _expand(v, "matrix", (6, 16), [])

    @field_validator("origin", mode="before")
    @classmethod
    def _origin(cls, v: Any) -> Any:
        return _expand(v, "origin", (2, 3), [0.0, 0.0, 0.0])

    @property
    def is_empty(self) -> bool:
        return all(
            getattr(self, name) is None
            for name in ("translate", "rotate", "skew", "scale", "matrix")
        )
