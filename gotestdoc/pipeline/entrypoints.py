"""Per-file and multi-file check entrypoints over the scan + lint lifecycle."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
import logging
import threading
from typing import TypeAlias

from gotestdoc.lint import LintRule, run_lint
from gotestdoc.options import ConventionOptions
from gotestdoc.pipeline.results import CheckRunResult, FileCheckResult, SourceUnit
from gotestdoc.scanner import ParseError

logger = logging.getLogger(__name__)

UnitLike: TypeAlias = SourceUnit | tuple[str, str]


def check_source(
    unit: UnitLike,
    options: ConventionOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> FileCheckResult:
    """Check one source unit; a parse error is captured on the result, not raised."""
    resolved = _as_unit(unit)
    try:
        result = run_lint(resolved.source_text, options, rules=rules)
    except ParseError as exc:
        logger.debug("%s: cannot scan source: %s", resolved.file_path, exc)
        return FileCheckResult(file_path=resolved.file_path, parse_error=exc)

    return FileCheckResult(
        file_path=resolved.file_path,
        declarations=result.declarations,
        diagnostics=tuple(result.diagnostics),
    )


def check_sources(
    units: Iterable[UnitLike],
    options: ConventionOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
    max_workers: int = 1,
    cancel_event: threading.Event | None = None,
    on_result: Callable[[FileCheckResult], None] | None = None,
) -> CheckRunResult:
    """Check many source units, optionally on a thread pool.

    Results keep input order. Cancellation is checked before each unit starts; units not
    started once `cancel_event` is set are returned as skipped.
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")
    resolved_units = [_as_unit(unit) for unit in units]
    resolved_rules = tuple(rules) if rules is not None else None

    def check(unit: SourceUnit) -> FileCheckResult:
        if cancel_event is not None and cancel_event.is_set():
            return FileCheckResult(file_path=unit.file_path, skipped=True)
        return check_source(unit, options, rules=resolved_rules)

    results: list[FileCheckResult] = []
    if max_workers == 1:
        for unit in resolved_units:
            results.append(_notify(check(unit), on_result))
    else:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="gotestdoc") as executor:
            futures = [executor.submit(check, unit) for unit in resolved_units]
            try:
                for future in futures:
                    results.append(_notify(future.result(), on_result))
            except BaseException:
                executor.shutdown(wait=False, cancel_futures=True)
                raise

    skipped = sum(1 for result in results if result.skipped)
    if skipped:
        logger.info("cancelled: skipped %d of %d file(s)", skipped, len(results))
    return CheckRunResult(files=tuple(results), cancelled=skipped > 0)


def _notify(
    result: FileCheckResult,
    on_result: Callable[[FileCheckResult], None] | None,
) -> FileCheckResult:
    if on_result is not None:
        on_result(result)
    return result


def _as_unit(unit: UnitLike) -> SourceUnit:
    if isinstance(unit, SourceUnit):
        return unit
    file_path, source_text = unit
    return SourceUnit(file_path=file_path, source_text=source_text)
