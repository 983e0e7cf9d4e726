"""Segment sum type and the Path sequence.

Every path command is its own frozen dataclass carrying exactly the
parameters of that command, in wire order. ``relative`` is keyword-only and
picks the lowercase letter.

    Path((MoveTo(0, 0), LineTo(10, 0), ClosePath()))
    Segment.from_params("c", [1, 1, 2, 2, 3, 3])  # CubicTo(..., relative=True)
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar

from pathsight.exceptions import ValidationError

# Number of parameters following each command letter
ARITY: dict[str, int] = {
    "a": 7,
    "c": 6,
    "h": 1,
    "l": 2,
    "m": 2,
    "q": 4,
    "s": 4,
    "t": 2,
    "v": 1,
    "z": 0,
}


@dataclass(frozen=True)
class Segment:
    """One drawing instruction. Subclasses define the payload."""

    command: ClassVar[str] = ""
    # Which coordinate axis each parameter lives on ("" = not a coordinate)
    axes: ClassVar[tuple[str, ...]] = ()

    relative: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        for value in self.params:
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValidationError(f"{self.letter}: parameter {value!r} is not a number")
            if not math.isfinite(value):
                raise ValidationError(f"{self.letter}: parameter {value!r} is not finite")

    @property
    def letter(self) -> str:
        return self.command.lower() if self.relative else self.command

    @property
    def params(self) -> tuple[float, ...]:
        return tuple(getattr(self, f.name) for f in fields(self) if f.name != "relative")

    def with_params(self, values: Iterable[float], relative: bool | None = None) -> Segment:
        """Same command, new values."""
        rel = self.relative if relative is None else relative
        return type(self)(*values, relative=rel)

    def shifted(self, dx: float, dy: float, relative: bool) -> Segment:
        """Add (dx, dy) to every coordinate parameter and set the mode."""
        values = []
        for value, axis in zip(self.params, self.axes):
            if axis == "x":
                value = value + dx
            elif axis == "y":
                value = value + dy
            values.append(value)
        return self.with_params(values, relative)

    def end(self, x: float, y: float) -> tuple[float, float]:
        """End point of this segment when drawn from (x, y)."""
        ex, ey = self.x, self.y  # type: ignore[attr-defined]
        if self.relative:
            return x + ex, y + ey
        return ex, ey

    @staticmethod
    def from_params(letter: str, values: Sequence[float]) -> Segment:
        """Build a segment from a command letter and its flat parameter list."""
        cls = SEGMENT_TYPES.get(letter.upper())
        if cls is None or len(letter) != 1:
            raise ValidationError(f"{letter!r} is not a path command")
        expected = ARITY[letter.lower()]
        if len(values) != expected:
            raise ValidationError(
                f"{letter}: expected {expected} parameters, got {len(values)}"
            )
        return cls(*values, relative=letter.islower())


@dataclass(frozen=True)
class MoveTo(Segment):
    command: ClassVar[str] = "M"
    axes: ClassVar[tuple[str, ...]] = ("x", "y")

    x: float
    y: float


@dataclass(frozen=True)
class LineTo(Segment):
    command: ClassVar[str] = "L"
    axes: ClassVar[tuple[str, ...]] = ("x", "y")

    x: float
    y: float


@dataclass(frozen=True)
class HorizontalLineTo(Segment):
    command: ClassVar[str] = "H"
    axes: ClassVar[tuple[str, ...]] = ("x",)

    x: float

    def end(self, x: float, y: float) -> tuple[float, float]:
        return (x + self.x if self.relative else self.x), y


@dataclass(frozen=True)
class VerticalLineTo(Segment):
    command: ClassVar[str] = "V"
    axes: ClassVar[tuple[str, ...]] = ("y",)

    y: float

    def end(self, x: float, y: float) -> tuple[float, float]:
        return x, (y + self.y if self.relative else self.y)


@dataclass(frozen=True)
class CubicTo(Segment):
    command: ClassVar[str] = "C"
    axes: ClassVar[tuple[str, ...]] = ("x", "y", "x", "y", "x", "y")

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True)
class SmoothCubicTo(Segment):
    command: ClassVar[str] = "S"
    axes: ClassVar[tuple[str, ...]] = ("x", "y", "x", "y")

    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True)
class QuadTo(Segment):
    command: ClassVar[str] = "Q"
    axes: ClassVar[tuple[str, ...]] = ("x", "y", "x", "y")

    x1: float
    y1: float
    x: float
    y: float


@dataclass(frozen=True)
class SmoothQuadTo(Segment):
    command: ClassVar[str] = "T"
    axes: ClassVar[tuple[str, ...]] = ("x", "y")

    x: float
    y: float


@dataclass(frozen=True)
class ArcTo(Segment):
    command: ClassVar[str] = "A"
    axes: ClassVar[tuple[str, ...]] = ("", "", "", "", "", "x", "y")

    rx: float
    ry: float
    angle: float
    large_arc: int
    sweep: int
    x: float
    y: float

    def __post_init__(self) -> None:
        for name in ("large_arc", "sweep"):
            flag = getattr(self, name)
            if flag not in (0, 1):
                raise ValidationError(f"{self.letter}: {name} flag must be 0 or 1, got {flag!r}")
            # bools and 1.0 are accepted but stored as plain ints
            object.__setattr__(self, name, int(flag))
        super().__post_init__()


@dataclass(frozen=True)
class ClosePath(Segment):
    command: ClassVar[str] = "Z"

    def end(self, x: float, y: float) -> tuple[float, float]:
        raise ValidationError("close path ends at the subpath start, which it does not know")


SEGMENT_TYPES: dict[str, type[Segment]] = {
    cls.command: cls
    for cls in (
        MoveTo,
        LineTo,
        HorizontalLineTo,
        VerticalLineTo,
        CubicTo,
        SmoothCubicTo,
        QuadTo,
        SmoothQuadTo,
        ArcTo,
        ClosePath,
    )
}


@dataclass(frozen=True)
class Path(Sequence[Segment]):
    """Immutable segment sequence: one or more subpaths, each opened by M."""

    segments: tuple[Segment, ...]

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        if not segments:
            raise ValidationError("a path needs at least one segment")
        for seg in segments:
            if not isinstance(seg, Segment):
                raise ValidationError(f"{seg!r} is not a Segment")
        if not isinstance(segments[0], MoveTo):
            raise ValidationError(f"path must start with a moveto, not {segments[0].letter!r}")
        object.__setattr__(self, "segments", segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, index: Any) -> Any:
        return self.segments[index]

    def __str__(self) -> str:
        from pathsight.svg.serializer import serialize

        return serialize(self, None)

    def to_list(self) -> list[list[Any]]:
        """Plain nested lists, e.g. ``[["M", 0, 0], ["L", 10, 0]]``."""
        return [[seg.letter, *seg.params] for seg in self.segments]

    @classmethod
    def from_list(cls, items: Iterable[Sequence[Any]]) -> Path:
        segments = []
        for item in items:
            if not item:
                raise ValidationError("empty segment entry")
            letter, *values = item
            segments.append(Segment.from_params(str(letter), values))
        return cls(tuple(segments))
