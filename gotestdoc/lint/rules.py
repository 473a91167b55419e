"""Lint rules and rule contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Literal, Protocol, TypeAlias

from gotestdoc.diagnostics import (
    TESTDOC_MALFORMED_COMMENT,
    TESTDOC_MISSING_COMMENT,
    TESTDOC_WRONG_SUBJECT,
    Diagnostic,
    DiagnosticSpec,
)
from gotestdoc.lint.comments import (
    doc_text,
    first_word,
    matches_template,
    mentions_word,
    render_template,
)
from gotestdoc.options import DEFAULT_OPTIONS, DEFAULT_TEMPLATE, ConventionOptions
from gotestdoc.scanner import TestDeclaration

LintDomain: TypeAlias = Literal["convention", "style"]
LintConfidence: TypeAlias = Literal["policy", "heuristic"]


class ViolationKind(StrEnum):
    MISSING = "missing"
    WRONG_SUBJECT = "wrong_subject"
    MALFORMED = "malformed"

    @property
    def spec(self) -> DiagnosticSpec:
        return _SPECS[self]


_SPECS: dict[ViolationKind, DiagnosticSpec] = {
    ViolationKind.MISSING: TESTDOC_MISSING_COMMENT,
    ViolationKind.WRONG_SUBJECT: TESTDOC_WRONG_SUBJECT,
    ViolationKind.MALFORMED: TESTDOC_MALFORMED_COMMENT,
}


class LintRule(Protocol):
    """Rule contract over the declarations of one source unit."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def domain(self) -> LintDomain: ...

    @property
    def confidence(self) -> LintConfidence: ...

    def run(self, declarations: Sequence[TestDeclaration], text: str) -> list[Diagnostic]: ...


def classify_comment(
    declaration: TestDeclaration,
    options: ConventionOptions = DEFAULT_OPTIONS,
) -> ViolationKind | None:
    """Return the violation for a declaration's leading comment, or `None` if it conforms.

    Anything that mentions the function (or its subject) without the expected shape is
    malformed; a comment that mentions neither is about something else.
    """
    if declaration.leading_comment is None:
        return ViolationKind.MISSING

    text = doc_text(declaration.leading_comment, skip_directives=options.skip_directives)
    if not text:
        return ViolationKind.MALFORMED

    name = declaration.name
    subject = declaration.subject
    if first_word(text) == name:
        if any(matches_template(text, template, name=name, subject=subject) for template in options.templates):
            return None
        if options.accept_subject_mention and (not subject or mentions_word(text[len(name) :], subject)):
            return None
        return ViolationKind.MALFORMED

    if mentions_word(text, name, ignore_case=True) or mentions_word(text, subject, ignore_case=True):
        return ViolationKind.MALFORMED
    return ViolationKind.WRONG_SUBJECT


@dataclass(frozen=True, slots=True)
class TestCommentConventionRule:
    """Each test function must be documented by a comment naming it and its subject."""

    __test__ = False  # keep pytest from collecting this as a test class

    options: ConventionOptions = DEFAULT_OPTIONS
    code: str = "TESTDOC_COMMENT_CONVENTION"
    name: str = "testCommentConvention"
    category: str = "lint/testdoc"
    domain: LintDomain = "convention"
    confidence: LintConfidence = "policy"

    def check(self, declaration: TestDeclaration) -> Diagnostic | None:
        kind = classify_comment(declaration, self.options)
        if kind is None:
            return None
        spec = kind.spec
        return Diagnostic(
            code=spec.code,
            message=f"{spec.message} {self._detail(kind, declaration)}",
            range=declaration.range,
            position=declaration.position,
            function_name=declaration.name,
            severity=spec.severity,
            hint=f"Document it as `// {self._expected(declaration)}`.",
            category=spec.category,
        )

    def run(self, declarations: Sequence[TestDeclaration], text: str) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for declaration in declarations:
            diagnostic = self.check(declaration)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return diagnostics

    def _expected(self, declaration: TestDeclaration) -> str:
        template = self.options.templates[0] if self.options.templates else DEFAULT_TEMPLATE
        return render_template(template, name=declaration.name, subject=declaration.subject)

    def _detail(self, kind: ViolationKind, declaration: TestDeclaration) -> str:
        name = declaration.name
        if kind == ViolationKind.MISSING:
            return f"`{name}` needs a comment directly above its declaration."
        text = doc_text(declaration.leading_comment or (), skip_directives=self.options.skip_directives)
        if kind == ViolationKind.WRONG_SUBJECT:
            found = first_word(text)
            if found != name and self.options.is_test_name(found):
                return f"It starts with `{found}` but documents `{name}`."
            return f"It mentions neither `{name}` nor `{declaration.subject}`."
        if not text:
            return f"The comment above `{name}` has no documentation text."
        return f"Expected `{self._expected(declaration)}`, found `{text}`."


def default_lint_rules(options: ConventionOptions | None = None) -> tuple[LintRule, ...]:
    rules: list[LintRule] = [
        TestCommentConventionRule(options=options if options is not None else DEFAULT_OPTIONS),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    allowed_domains = {"convention", "style"}
    allowed_confidence = {"policy", "heuristic"}
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid domain `{rule.domain}`; expected convention/style."
            )
        if rule.confidence not in allowed_confidence:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid confidence `{rule.confidence}`; expected policy/heuristic."
            )
        if not rule.code.startswith("TESTDOC_"):
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid code `{rule.code}`; expected `TESTDOC_` prefix."
            )
