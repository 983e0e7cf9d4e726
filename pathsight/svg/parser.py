"""Path data scanner — ``d`` attribute text → Path.

One left-to-right pass, no backtracking. The cursor keeps the current index,
the values of the segment being accumulated and the first error met; a
segment is finalized on the next command letter, at end of input, or not at
all once an error is recorded.
"""

from __future__ import annotations

import logging
import math

from pathsight.exceptions import ParseError
from pathsight.models.segment import ARITY, ClosePath, Path, Segment

logger = logging.getLogger(__name__)

_COMMANDS = frozenset("MmLlHhVvCcSsQqTtAaZz")
_DIGITS = frozenset("0123456789")
_NUMBER_START = _DIGITS | {"+", "-", "."}
# SVG whitespace plus the Unicode space separators browsers accept
_SPACES = frozenset(
    " \t\n\r\f\v\u00a0\u1680\u180e"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u202f\u205f\u3000\ufeff"
)
# Parameter slots holding the large-arc and sweep flags
_FLAG_SLOTS = (3, 4)


class PathParser:
    """Scanning cursor over one path string."""

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"path text must be str, not {type(text).__name__}")
        self.text = text
        self.max = len(text)
        self.index = 0
        self.segments: list[Segment] = []
        self.data: list[float] = []
        self.param: float = 0.0
        self.segment_start = 0
        self.error: ParseError | None = None

    def peek(self) -> str:
        return self.text[self.index] if self.index < self.max else ""

    def advance(self, count: int = 1) -> None:
        self.index += count

    def skip_spaces(self) -> None:
        while self.index < self.max and self.text[self.index] in _SPACES:
            self.index += 1

    def fail(self, message: str, position: int | None = None) -> None:
        # the first error wins, later ones are consequences
        if self.error is None:
            self.error = ParseError(message, self.index if position is None else position)

    def scan(self) -> PathParser:
        self.skip_spaces()
        if self.index >= self.max:
            self.fail("path is empty")
            return self
        if self.peek() not in ("M", "m"):
            self.fail(f"path must start with a moveto, found {self.peek()!r}")
            return self
        while self.index < self.max and self.error is None:
            self.scan_segment()
        return self

    def scan_segment(self) -> None:
        command = self.peek()
        if command not in _COMMANDS:
            self.fail(f"{command!r} is not a path command")
            return

        self.segment_start = self.index
        self.advance()
        self.skip_spaces()
        self.data = []

        arity = ARITY[command.lower()]
        if arity == 0:
            self.finalize(command)
            return

        is_arc = command in ("A", "a")
        while True:
            for slot in range(arity):
                if is_arc and slot in _FLAG_SLOTS:
                    self.scan_flag()
                else:
                    self.scan_param()
                if self.error is not None:
                    return
                self.data.append(self.param)
                self.skip_spaces()
                if self.peek() == ",":
                    self.advance()
                    self.skip_spaces()
            # another numeral repeats the command implicitly
            if self.peek() == "" or self.peek() not in _NUMBER_START:
                break

        self.finalize(command)

    def scan_param(self) -> None:
        text, start = self.text, self.index
        i = start
        if i >= self.max:
            self.fail("expected a number, reached end of path")
            return
        if text[i] in ("+", "-"):
            i += 1

        has_digits = False
        while i < self.max and text[i] in _DIGITS:
            i += 1
            has_digits = True
        if i < self.max and text[i] == ".":
            i += 1
            while i < self.max and text[i] in _DIGITS:
                i += 1
                has_digits = True
        if not has_digits:
            found = text[start:i + 1] or text[start]
            self.fail(f"expected a number, found {found!r}", start)
            return

        if i < self.max and text[i] in ("e", "E"):
            j = i + 1
            if j < self.max and text[j] in ("+", "-"):
                j += 1
            if j >= self.max or text[j] not in _DIGITS:
                self.fail(f"malformed exponent in {text[start:j + 1]!r}", start)
                return
            while j < self.max and text[j] in _DIGITS:
                j += 1
            i = j

        value = float(text[start:i])
        if not math.isfinite(value):
            self.fail(f"number {text[start:i]!r} is out of range", start)
            return
        self.param = value
        self.index = i

    def scan_flag(self) -> None:
        ch = self.peek()
        if ch not in ("0", "1"):
            found = repr(ch) if ch else "end of path"
            self.fail(f"arc flag must be 0 or 1, found {found}")
            return
        self.param = int(ch)
        self.advance()

    def finalize(self, command: str) -> None:
        arity = ARITY[command.lower()]
        if arity == 0:
            self.segments.append(ClosePath(relative=command.islower()))
            return
        letter = command
        for i in range(0, len(self.data), arity):
            self.segments.append(Segment.from_params(letter, self.data[i:i + arity]))
            # extra moveto pairs are implicit lineto commands
            if letter == "M":
                letter = "L"
            elif letter == "m":
                letter = "l"


def scan(text: str) -> PathParser:
    """Run the scanner; the failure, if any, is left on ``parser.error``."""
    return PathParser(text).scan()


def parse(text: str) -> Path:
    """Parse path text into a Path. Raises ParseError on invalid input."""
    parser = scan(text)
    if parser.error is not None:
        logger.debug("Rejected path: %s", parser.error)
        raise parser.error
    path = Path(tuple(parser.segments))
    logger.debug("Parsed path: %d segments from %d chars", len(path), parser.max)
    return path


def is_valid_path(text: str) -> bool:
    return scan(text).error is None


def ensure_path(value: str | Path) -> Path:
    """Accept either path text or an already built Path."""
    if isinstance(value, Path):
        return value
    return parse(value)
