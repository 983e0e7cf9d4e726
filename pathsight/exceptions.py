"""Error taxonomy for path parsing, validation and geometry."""

from __future__ import annotations


class PathError(Exception):
    """Base class for every error raised by pathsight."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseError(PathError, ValueError):
    """Path text does not follow the path data grammar."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} (at index {position})")
        self.message = message
        self.position = position


class ValidationError(PathError, ValueError):
    """A Path or Segment built by hand breaks the segment invariants."""


class GeometryError(PathError, ArithmeticError):
    """A transform cannot be applied (singular matrix, point at infinity)."""
