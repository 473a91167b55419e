"""Command-line entrypoint: check Go test files for test comment conventions."""

from __future__ import annotations

import argparse
from dataclasses import asdict
import json
import logging
from pathlib import Path
import sys
import threading
from typing import Final

from tqdm import tqdm

from gotestdoc.diagnostics import format_diagnostic
from gotestdoc.loader import collect_test_files, read_source_unit
from gotestdoc.options import ConventionOptions, ConventionProfile
from gotestdoc.pipeline import CheckRunResult, SourceUnit, check_sources

logger = logging.getLogger("gotestdoc")

EXIT_OK: Final[int] = 0
EXIT_VIOLATIONS: Final[int] = 1
EXIT_ERRORS: Final[int] = 2
EXIT_INTERRUPTED: Final[int] = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gotestdoc",
        description="Check that every Go test function is documented by a comment naming it and its subject.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[Path(".")],
        help="Files or directories to check (default: current directory)",
    )
    parser.add_argument(
        "--profile",
        choices=[profile.value for profile in ConventionProfile],
        default=ConventionProfile.DEFAULT.value,
        help="Rule profile; `strict` only accepts the configured templates (default: default)",
    )
    parser.add_argument("--prefix", default=None, help="Test function prefix (default: Test)")
    parser.add_argument(
        "--template",
        action="append",
        default=None,
        help="Accepted comment template using {name} and {subject}; repeatable",
    )
    parser.add_argument(
        "--allow-lowercase-subject",
        action="store_true",
        help="Treat names like `Testfoo` as tests too",
    )
    parser.add_argument(
        "--keep-directives",
        action="store_true",
        help="Check `//go:` and `//nolint:` style directive lines as documentation text",
    )
    parser.add_argument("--jobs", "-j", type=int, default=1, help="Worker threads (default: 1)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Stop starting new files after this many seconds; unchecked files are reported as skipped",
    )
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the tqdm progress bar",
    )
    parser.add_argument("--verbose", "-v", action="count", default=0, help="Increase log verbosity")
    return parser


def build_options(args: argparse.Namespace) -> ConventionOptions:
    base = ConventionOptions.for_profile(ConventionProfile(args.profile))
    return ConventionOptions(
        prefix=args.prefix if args.prefix is not None else base.prefix,
        templates=tuple(args.template) if args.template else base.templates,
        accept_subject_mention=base.accept_subject_mention,
        require_uppercase_subject=not args.allow_lowercase_subject,
        skip_directives=not args.keep_directives,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        options = build_options(args)
    except ValueError as exc:
        parser.error(str(exc))
    if args.jobs < 1:
        parser.error("--jobs must be at least 1")

    try:
        paths = collect_test_files(args.paths)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return EXIT_ERRORS

    units, read_failures = _read_units(paths)
    logger.debug("checking %d file(s) with %d worker(s)", len(units), args.jobs)

    cancel_event = threading.Event()
    timer = threading.Timer(args.timeout, cancel_event.set) if args.timeout is not None else None
    progress = tqdm(
        total=len(units),
        desc="gotestdoc",
        unit="file",
        disable=args.no_progress or not sys.stderr.isatty(),
    )
    try:
        if timer is not None:
            timer.start()
        run = check_sources(
            units,
            options,
            max_workers=args.jobs,
            cancel_event=cancel_event,
            on_result=lambda _: progress.update(1),
        )
    except KeyboardInterrupt:
        cancel_event.set()
        logger.error("interrupted")
        return EXIT_INTERRUPTED
    finally:
        if timer is not None:
            timer.cancel()
        progress.close()

    if args.format == "json":
        _print_json(run, read_failures)
    else:
        _print_text(run, read_failures)

    if run.parse_errors or run.cancelled or read_failures:
        return EXIT_ERRORS
    if run.diagnostic_count:
        return EXIT_VIOLATIONS
    return EXIT_OK


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s [%(name)s] %(message)s")


def _read_units(paths: list[Path]) -> tuple[list[SourceUnit], list[tuple[str, str]]]:
    units: list[SourceUnit] = []
    failures: list[tuple[str, str]] = []
    for path in paths:
        try:
            units.append(read_source_unit(path))
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("%s: cannot read file: %s", path, exc)
            failures.append((str(path), str(exc)))
    return units, failures


def _print_text(run: CheckRunResult, read_failures: list[tuple[str, str]]) -> None:
    for result in run.files:
        if result.parse_error is not None:
            print(format_diagnostic(result.parse_error.diagnostic, source_path=result.file_path), file=sys.stderr)
            continue
        for diagnostic in result.diagnostics:
            print(format_diagnostic(diagnostic, source_path=result.file_path))

    checked = len(run.files) - len(run.skipped)
    summary = f"checked {checked} file(s): {run.diagnostic_count} violation(s)"
    if run.parse_errors:
        summary += f", {len(run.parse_errors)} unparsable"
    if read_failures:
        summary += f", {len(read_failures)} unreadable"
    if run.skipped:
        summary += f", {len(run.skipped)} skipped"
    print(summary, file=sys.stderr)


def _print_json(run: CheckRunResult, read_failures: list[tuple[str, str]]) -> None:
    payload = {
        "diagnostics": [asdict(record) for record in run.records()],
        "errors": [
            {
                "file_path": result.file_path,
                "line": result.parse_error.diagnostic.position.line,
                "column": result.parse_error.diagnostic.position.column,
                "message": result.parse_error.diagnostic.message,
                "code": result.parse_error.diagnostic.code,
            }
            for result in run.parse_errors
            if result.parse_error is not None
        ]
        + [{"file_path": path, "message": message, "code": "READ_ERROR"} for path, message in read_failures],
        "skipped": [result.file_path for result in run.skipped],
    }
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    sys.exit(main())
