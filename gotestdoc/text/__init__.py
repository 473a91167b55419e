"""Text offsets, ranges and line/column positions."""

from gotestdoc.text.text import (
    LineIndex,
    LinePosition,
    LineSpan,
    TextRange,
    TextSize,
    slice_text_range,
    split_lines,
)

__all__ = [
    "LineIndex",
    "LinePosition",
    "LineSpan",
    "TextRange",
    "TextSize",
    "slice_text_range",
    "split_lines",
]
