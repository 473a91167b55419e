"""Lint runner over the scanned declarations of one source text."""

from __future__ import annotations

from collections.abc import Sequence

from gotestdoc.diagnostics import Diagnostic, sort_diagnostics
from gotestdoc.lint.rules import (
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from gotestdoc.options import DEFAULT_OPTIONS, ConventionOptions
from gotestdoc.pipeline.results import LintRunResult
from gotestdoc.scanner import TestDeclaration, scan_test_declarations


def run_lint(
    text: str,
    options: ConventionOptions | None = None,
    *,
    declarations: Sequence[TestDeclaration] | None = None,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Run lint diagnostics from a single scan of `text`.

    Raises `ParseError` when `text` cannot be scanned.
    """
    resolved_declarations = _resolve_declarations(text, options=options, declarations=declarations)
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules(options)
    validate_lint_rules(resolved_rules)

    diagnostics: list[Diagnostic] = []
    for rule in resolved_rules:
        diagnostics.extend(rule.run(resolved_declarations, text))

    return LintRunResult(
        source_text=text,
        declarations=resolved_declarations,
        diagnostics=sort_diagnostics(diagnostics),
    )


def _resolve_declarations(
    text: str,
    *,
    options: ConventionOptions | None,
    declarations: Sequence[TestDeclaration] | None,
) -> tuple[TestDeclaration, ...]:
    if declarations is not None:
        if options is not None:
            raise ValueError("Pass either declarations or options, not both")
        return tuple(declarations)
    return scan_test_declarations(text, options=options if options is not None else DEFAULT_OPTIONS)
