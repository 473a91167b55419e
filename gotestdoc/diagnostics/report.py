"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from gotestdoc.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.range.start.value,
            diagnostic.range.end.value,
            diagnostic.code,
            diagnostic.message,
        ),
    )


def format_diagnostic(diagnostic: Diagnostic, *, source_path: str | None = None) -> str:
    """Render `path:line:column: message [CODE]` for terminal output."""
    location = str(diagnostic.position)
    if source_path is not None:
        location = f"{source_path}:{location}"
    return f"{location}: {diagnostic.message} [{diagnostic.code}]"
