"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from gotestdoc.text import LinePosition, TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the scanner and the convention rules."""

    code: str
    message: str
    range: TextRange
    position: LinePosition
    function_name: str | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
