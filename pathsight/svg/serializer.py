"""Path → compact ``d`` attribute text."""

from __future__ import annotations

from pathsight.models.segment import ArcTo, Path, Segment

# Parameter slots holding the large-arc and sweep flags
_FLAG_SLOTS = (3, 4)


def _enabled(precision: int | bool | None) -> bool:
    # None, False and negative values all mean full precision
    return precision is not None and precision is not False and precision >= 0


def round_value(value: float, precision: int | bool | None) -> float:
    if not _enabled(precision):
        return value
    rounded = round(value, int(precision))
    # no negative zero
    return rounded + 0.0


def round_segment(seg: Segment, precision: int | bool | None) -> Segment:
    if not _enabled(precision):
        return seg
    return seg.with_params(round_value(v, precision) for v in seg.params)


def round_path(path: Path, precision: int | bool | None = 4) -> Path:
    """Round every parameter to ``precision`` decimals.

    None, False or a negative ``precision`` keeps the values as they are.
    """
    if not _enabled(precision):
        return path
    return Path(tuple(round_segment(seg, precision) for seg in path))


def format_number(value: float, precision: int | bool | None = 4) -> str:
    """Shortest text for ``value``: ``0.50`` -> ``.5``, ``-0.5`` -> ``-.5``, ``-0`` -> ``0``."""
    if _enabled(precision):
        value = round_value(value, precision)
        text = f"{value:.{int(precision)}f}"
    else:
        value = float(value)
        text = repr(value)
    if "e" not in text and "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", "", "-"):
        return "0"
    if text.startswith("0."):
        text = text[1:]
    elif text.startswith("-0."):
        text = "-" + text[2:]
    return text


def _format_values(seg: Segment, precision: int | bool | None) -> list[str]:
    if isinstance(seg, ArcTo):
        return [
            str(int(v)) if i in _FLAG_SLOTS else format_number(v, precision)
            for i, v in enumerate(seg.params)
        ]
    return [format_number(v, precision) for v in seg.params]


def format_segment(seg: Segment, precision: int | bool | None = 4) -> str:
    """Command letter followed by its values, separators only where needed."""
    out = [seg.letter]
    previous = ""
    is_arc = isinstance(seg, ArcTo)
    for index, text in enumerate(_format_values(seg, precision)):
        if index:
            glued = (
                text.startswith("-")
                or (text.startswith(".") and ("." in previous or "e" in previous))
                or (is_arc and index - 1 in _FLAG_SLOTS)
            )
            if not glued:
                out.append(" ")
        out.append(text)
        previous = text
    return "".join(out)


def serialize(path: Path, precision: int | bool | None = 4) -> str:
    """Write ``path`` as path data. Every segment repeats its command letter."""
    return "".join(format_segment(seg, precision) for seg in path)
