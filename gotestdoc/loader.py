"""Filesystem helpers that turn paths into source units."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Final

from gotestdoc.pipeline.results import SourceUnit

TEST_FILE_SUFFIX: Final[str] = "_test.go"
IGNORED_DIRS: Final[frozenset[str]] = frozenset({"vendor", "testdata"})


def collect_test_files(
    paths: Iterable[str | Path],
    *,
    suffix: str = TEST_FILE_SUFFIX,
) -> list[Path]:
    """Expand files and directories into a sorted, de-duplicated list of test files.

    Files named explicitly are kept whatever their suffix. Directory walks skip
    `vendor/`, `testdata/` and directories starting with `.` or `_`, like `go test ./...`.
    """
    found: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            found.add(path)
            continue
        if not path.is_dir():
            raise FileNotFoundError(f"No such file or directory: {path}")
        for candidate in path.rglob(f"*{suffix}"):
            if candidate.is_file() and not _is_ignored(candidate.relative_to(path)):
                found.add(candidate)
    return sorted(found)


def read_source_unit(path: str | Path) -> SourceUnit:
    """Read one file as UTF-8, dropping a leading BOM.

    Raises `OSError` or `UnicodeDecodeError`; callers decide how to report them.
    """
    file_path = Path(path)
    decoded = file_path.read_bytes().decode("utf-8")
    text = decoded[1:] if decoded.startswith("\ufeff") else decoded
    return SourceUnit(file_path=str(file_path).replace("\\", "/"), source_text=text)


def _is_ignored(relative: Path) -> bool:
    for part in relative.parts[:-1]:
        if part in IGNORED_DIRS or part.startswith((".", "_")):
            return True
    return False
