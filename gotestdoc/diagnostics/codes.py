"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from gotestdoc.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SCAN_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_UNTERMINATED_BLOCK_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    severity="error",
    category="scanner",
)

SCAN_UNTERMINATED_RAW_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_UNTERMINATED_RAW_STRING",
    message="Unterminated raw string literal.",
    hint="Close the string with a backquote.",
    severity="error",
    category="scanner",
)

SCAN_UNBALANCED_BRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_UNBALANCED_BRACE",
    message="Closing brace without a matching opening brace.",
    hint="Remove the extra `}` or add the missing `{`.",
    severity="error",
    category="scanner",
)

SCAN_UNCLOSED_BRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_UNCLOSED_BRACE",
    message="Opening bracket is never closed.",
    hint="Add the missing `}`, `)` or `]`.",
    severity="error",
    category="scanner",
)

TESTDOC_MISSING_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TESTDOC_MISSING_COMMENT",
    message="Test function has no leading comment.",
    severity="error",
    category="lint/testdoc",
)

TESTDOC_WRONG_SUBJECT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TESTDOC_WRONG_SUBJECT",
    message="Leading comment does not document this test function.",
    severity="error",
    category="lint/testdoc",
)

TESTDOC_MALFORMED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TESTDOC_MALFORMED_COMMENT",
    message="Leading comment does not follow the test documentation pattern.",
    severity="error",
    category="lint/testdoc",
)
