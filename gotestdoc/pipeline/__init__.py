"""Run result carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING

from gotestdoc.options import ConventionOptions
from gotestdoc.pipeline.results import (
    CheckRunResult,
    DiagnosticRecord,
    FileCheckResult,
    LintRunResult,
    SourceUnit,
)

if TYPE_CHECKING:
    import threading

    from gotestdoc.lint.rules import LintRule


def check_source(
    unit: SourceUnit | tuple[str, str],
    options: ConventionOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> FileCheckResult:
    from gotestdoc.pipeline.entrypoints import check_source as _check_source

    return _check_source(unit, options, rules=rules)


def check_sources(
    units: Iterable[SourceUnit | tuple[str, str]],
    options: ConventionOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
    max_workers: int = 1,
    cancel_event: threading.Event | None = None,
    on_result: Callable[[FileCheckResult], None] | None = None,
) -> CheckRunResult:
    from gotestdoc.pipeline.entrypoints import check_sources as _check_sources

    return _check_sources(
        units,
        options,
        rules=rules,
        max_workers=max_workers,
        cancel_event=cancel_event,
        on_result=on_result,
    )


__all__ = [
    "CheckRunResult",
    "DiagnosticRecord",
    "FileCheckResult",
    "LintRunResult",
    "SourceUnit",
    "check_source",
    "check_sources",
]
