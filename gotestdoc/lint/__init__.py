"""Convention lint rules and runner."""

from gotestdoc.lint.rules import (
    LintConfidence,
    LintDomain,
    LintRule,
    TestCommentConventionRule,
    ViolationKind,
    classify_comment,
    default_lint_rules,
    validate_lint_rules,
)
from gotestdoc.lint.runner import run_lint

__all__ = [
    "LintConfidence",
    "LintDomain",
    "LintRule",
    "TestCommentConventionRule",
    "ViolationKind",
    "classify_comment",
    "default_lint_rules",
    "run_lint",
    "validate_lint_rules",
]
