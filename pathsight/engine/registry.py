"""Converter registry — every Path → Path conversion registers itself by name.

Usage:
    @converter(name="absolute", description="Rewrite every segment in absolute form")
    def to_absolute(path: Path) -> Path:
        ...

Adding a conversion = one decorated function. The HTTP layer looks
conversions up by name and forwards only the options each one declares.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from pathsight.models.segment import Path

logger = logging.getLogger(__name__)


@dataclass
class ConverterSpec:
    name: str
    fn: Callable[..., "Path"]
    # Keyword options the function accepts beyond the path itself
    options: set[str] = field(default_factory=set)
    description: str = ""


class ConverterRegistry:
    """Name → converter lookup."""

    def __init__(self) -> None:
        self._converters: dict[str, ConverterSpec] = {}

    def register(self, spec: ConverterSpec) -> None:
        if spec.name in self._converters:
            raise ValueError(f"Duplicate converter name: {spec.name}")
        self._converters[spec.name] = spec
        logger.debug("Registered converter %s", spec.name)

    def get(self, name: str) -> ConverterSpec:
        try:
            return self._converters[name]
        except KeyError:
            raise KeyError(f"Unknown converter {name!r}, expected one of {self.names()}") from None

    def names(self) -> list[str]:
        return sorted(self._converters)

    def all(self) -> list[ConverterSpec]:
        return [self._converters[name] for name in self.names()]

    def run(self, name: str, path: "Path", **options: Any) -> "Path":
        """Apply a converter, dropping options it does not declare or that are None."""
        spec = self.get(name)
        kwargs = {k: v for k, v in options.items() if k in spec.options and v is not None}
        return spec.fn(path, **kwargs)

    @property
    def count(self) -> int:
        return len(self._converters)


# Module-level singleton
_registry = ConverterRegistry()


def get_registry() -> ConverterRegistry:
    return _registry


def converter(
    *,
    name: str,
    options: set[str] | None = None,
    description: str = "",
):
    """Decorator to register a Path → Path conversion."""

    def decorator(fn: Callable[..., "Path"]):
        _registry.register(
            ConverterSpec(name=name, fn=fn, options=options or set(), description=description)
        )
        return fn

    return decorator
