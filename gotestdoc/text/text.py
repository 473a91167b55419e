from bisect import bisect_right
from dataclasses import dataclass
import re
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def from_int(value: int) -> "TextSize":
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, represented by TextSize offsets.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> "TextRange":
        """Create a TextRange from start and end TextSizes."""
        return TextRange(start.value, end.value)

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        """Get the start offset as a TextSize."""
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        """Get the end offset as a TextSize."""
        return TextSize(self._end)

    def is_empty(self) -> bool:
        """Check if the range is empty."""
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        return TextRange(min(self._start, other._start), max(self._end, other._end))

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start.value : range.end.value]


@dataclass(frozen=True, slots=True, order=True)
class LinePosition:
    """1-based line and column of a character in source text.

    Columns count characters, not bytes.
    """

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class LineSpan:
    """One source line without its line break."""

    number: int
    start: int
    end: int


class LineIndex:
    """Maps offsets to line/column positions for one source text."""

    def __init__(self, source: str) -> None:
        self._lines = split_lines(source)
        self._starts = [line.start for line in self._lines]

    @property
    def lines(self) -> tuple[LineSpan, ...]:
        return self._lines

    def line_of(self, offset: TextSize) -> LineSpan:
        index = max(bisect_right(self._starts, offset.value) - 1, 0)
        return self._lines[index]

    def position(self, offset: TextSize) -> LinePosition:
        line = self.line_of(offset)
        return LinePosition(line=line.number, column=offset.value - line.start + 1)


def split_lines(source: str) -> tuple[LineSpan, ...]:
    """Split text into line spans on `\\n`, `\\r\\n` and `\\r`.

    The text after the last line break is always a line, so empty text has one empty line.
    """
    lines: list[LineSpan] = []
    offset = 0
    for number, match in enumerate(_LINE_BREAK.finditer(source), start=1):
        lines.append(LineSpan(number=number, start=offset, end=match.start()))
        offset = match.end()
    lines.append(LineSpan(number=len(lines) + 1, start=offset, end=len(source)))
    return tuple(lines)


_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")
