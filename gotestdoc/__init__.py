"""Go test comment convention checker."""

from gotestdoc.diagnostics import Diagnostic
from gotestdoc.lint import TestCommentConventionRule, ViolationKind, classify_comment, run_lint
from gotestdoc.options import DEFAULT_OPTIONS, STRICT_OPTIONS, ConventionOptions, ConventionProfile
from gotestdoc.pipeline import (
    CheckRunResult,
    DiagnosticRecord,
    FileCheckResult,
    SourceUnit,
    check_source,
    check_sources,
)
from gotestdoc.scanner import ParseError, TestDeclaration, scan_test_declarations

__all__ = [
    "DEFAULT_OPTIONS",
    "STRICT_OPTIONS",
    "CheckRunResult",
    "ConventionOptions",
    "ConventionProfile",
    "Diagnostic",
    "DiagnosticRecord",
    "FileCheckResult",
    "ParseError",
    "SourceUnit",
    "TestCommentConventionRule",
    "TestDeclaration",
    "ViolationKind",
    "check_source",
    "check_sources",
    "classify_comment",
    "run_lint",
    "scan_test_declarations",
]
