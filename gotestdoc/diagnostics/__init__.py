"""Diagnostics."""

from gotestdoc.diagnostics.codes import (
    SCAN_UNBALANCED_BRACE,
    SCAN_UNCLOSED_BRACE,
    SCAN_UNTERMINATED_BLOCK_COMMENT,
    SCAN_UNTERMINATED_RAW_STRING,
    TESTDOC_MALFORMED_COMMENT,
    TESTDOC_MISSING_COMMENT,
    TESTDOC_WRONG_SUBJECT,
    DiagnosticSpec,
)
from gotestdoc.diagnostics.diagnostic import Diagnostic, Severity
from gotestdoc.diagnostics.report import (
    format_diagnostic,
    has_errors,
    sort_diagnostics,
)

__all__ = [
    "SCAN_UNBALANCED_BRACE",
    "SCAN_UNCLOSED_BRACE",
    "SCAN_UNTERMINATED_BLOCK_COMMENT",
    "SCAN_UNTERMINATED_RAW_STRING",
    "TESTDOC_MALFORMED_COMMENT",
    "TESTDOC_MISSING_COMMENT",
    "TESTDOC_WRONG_SUBJECT",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "format_diagnostic",
    "has_errors",
    "sort_diagnostics",
]
