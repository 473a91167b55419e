"""Pipeline input and run result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from gotestdoc.diagnostics import Diagnostic, has_errors
from gotestdoc.scanner import ParseError, TestDeclaration


@dataclass(frozen=True, slots=True)
class SourceUnit:
    """One `(file_path, source_text)` pair supplied by the caller."""

    file_path: str
    source_text: str


@dataclass(frozen=True, slots=True)
class DiagnosticRecord:
    """Flat per-file output row for reporters."""

    file_path: str
    function_name: str
    line: int
    column: int
    message: str
    code: str

    @staticmethod
    def from_diagnostic(file_path: str, diagnostic: Diagnostic) -> "DiagnosticRecord":
        return DiagnosticRecord(
            file_path=file_path,
            function_name=diagnostic.function_name or "",
            line=diagnostic.position.line,
            column=diagnostic.position.column,
            message=diagnostic.message,
            code=diagnostic.code,
        )


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules over the declarations of one source text."""

    source_text: str
    declarations: tuple[TestDeclaration, ...]
    diagnostics: list[Diagnostic]


@dataclass(frozen=True, slots=True)
class FileCheckResult:
    """Outcome for one source unit: diagnostics, a parse error, or skipped by cancellation."""

    file_path: str
    declarations: tuple[TestDeclaration, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()
    parse_error: ParseError | None = None
    skipped: bool = False

    @property
    def is_clean(self) -> bool:
        return not self.diagnostics and self.parse_error is None and not self.skipped

    def records(self) -> tuple[DiagnosticRecord, ...]:
        return tuple(DiagnosticRecord.from_diagnostic(self.file_path, d) for d in self.diagnostics)


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of checking many source units, in input order."""

    files: tuple[FileCheckResult, ...]
    cancelled: bool = False

    @property
    def diagnostic_count(self) -> int:
        return sum(len(result.diagnostics) for result in self.files)

    @property
    def parse_errors(self) -> tuple[FileCheckResult, ...]:
        return tuple(result for result in self.files if result.parse_error is not None)

    @property
    def skipped(self) -> tuple[FileCheckResult, ...]:
        return tuple(result for result in self.files if result.skipped)

    @property
    def has_errors(self) -> bool:
        return bool(self.parse_errors) or any(has_errors(result.diagnostics) for result in self.files)

    def records(self) -> tuple[DiagnosticRecord, ...]:
        return tuple(record for result in self.files for record in result.records())
