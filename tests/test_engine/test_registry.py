"""Tests for the converter registry."""

import pytest

from tests.conftest import SQUARE

from pathsight.engine import get_registry
from pathsight.engine.registry import ConverterRegistry, ConverterSpec
from pathsight.models.segment import Path
from pathsight.svg.parser import parse


def _identity(path: Path) -> Path:
    return path


def _with_option(path: Path, flag: bool = False) -> Path:
    return parse("M1 1") if flag else path


def test_register_and_get():
    reg = ConverterRegistry()
    spec = ConverterSpec(name="noop", fn=_identity)
    reg.register(spec)
    assert reg.get("noop") is spec
    assert reg.count == 1


def test_duplicate_name():
    reg = ConverterRegistry()
    reg.register(ConverterSpec(name="noop", fn=_identity))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(ConverterSpec(name="noop", fn=_identity))


def test_unknown_name():
    reg = ConverterRegistry()
    with pytest.raises(KeyError, match="missing"):
        reg.get("missing")


def test_run_forwards_declared_options_only():
    reg = ConverterRegistry()
    reg.register(ConverterSpec(name="opt", fn=_with_option, options={"flag"}))
    path = parse(SQUARE)
    assert reg.run("opt", path, flag=True, precision=3) == parse("M1 1")
    # None means "not given"
    assert reg.run("opt", path, flag=None) is path


def test_builtin_converters_registered():
    assert get_registry().names() == [
        "absolute",
        "curve",
        "fix",
        "normalize",
        "optimize",
        "relative",
        "reverse",
    ]
    assert all(spec.description for spec in get_registry().all())


def test_run_builtin():
    path = get_registry().run("optimize", parse(SQUARE), precision=2, only_subpaths=True)
    assert str(path) == "M0 0h10v10H0z"
