import json
from pathlib import Path
import shutil

import pytest

from gotestdoc.cli import EXIT_ERRORS, EXIT_OK, EXIT_VIOLATIONS, main
from gotestdoc.loader import collect_test_files, read_source_unit

FIXTURES = Path(__file__).parent / "fixtures"


def write(path: Path, text: str = "package p\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_collect_walks_directories_and_skips_ignored(tmp_path: Path) -> None:
    kept = write(tmp_path / "a_test.go")
    nested = write(tmp_path / "pkg" / "b_test.go")
    write(tmp_path / "pkg" / "b.go")
    write(tmp_path / "vendor" / "dep" / "c_test.go")
    write(tmp_path / "pkg" / "testdata" / "d_test.go")
    write(tmp_path / ".git" / "e_test.go")
    write(tmp_path / "_build" / "f_test.go")

    assert collect_test_files([tmp_path]) == [kept, nested]


def test_collect_keeps_explicit_files_and_deduplicates(tmp_path: Path) -> None:
    helper = write(tmp_path / "helper.go")
    test_file = write(tmp_path / "a_test.go")

    assert collect_test_files([helper, tmp_path, test_file]) == [test_file, helper]


def test_collect_rejects_missing_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="No such file or directory"):
        collect_test_files([tmp_path / "missing"])


def test_read_source_unit_strips_bom(tmp_path: Path) -> None:
    path = tmp_path / "a_test.go"
    path.write_bytes(b"\xef\xbb\xbfpackage p\n")

    unit = read_source_unit(path)

    assert unit.source_text == "package p\n"
    assert unit.file_path.endswith("a_test.go")


def test_cli_valid_fixture_exits_clean(capsys: pytest.CaptureFixture[str]) -> None:
    code = main([str(FIXTURES / "valid"), "--no-progress"])

    captured = capsys.readouterr()
    assert code == EXIT_OK
    assert captured.out == ""
    assert "checked 1 file(s): 0 violation(s)" in captured.err


def test_cli_invalid_fixture_reports_violations(capsys: pytest.CaptureFixture[str]) -> None:
    code = main([str(FIXTURES / "invalid"), "--no-progress"])

    lines = capsys.readouterr().out.splitlines()
    assert code == EXIT_VIOLATIONS
    assert len(lines) == 2
    assert lines[0].endswith("[TESTDOC_WRONG_SUBJECT]")
    assert "bad_test.go:6:1: " in lines[0]
    assert "bad_test.go:14:1: " in lines[1]


def test_cli_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    code = main([str(FIXTURES), "--no-progress", "--format", "json", "--jobs", "2"])

    payload = json.loads(capsys.readouterr().out)
    assert code == EXIT_VIOLATIONS
    assert [(d["function_name"], d["line"], d["column"]) for d in payload["diagnostics"]] == [
        ("TestReadData", 6, 1),
        ("TestWriteData", 14, 1),
    ]
    assert {d["code"] for d in payload["diagnostics"]} == {"TESTDOC_WRONG_SUBJECT"}
    assert payload["errors"] == []
    assert payload["skipped"] == []


def test_cli_parse_error_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    shutil.copy(FIXTURES / "valid" / "good_test.go", tmp_path / "good_test.go")
    write(tmp_path / "broken_test.go", "package p\n\n/* open\nfunc TestA(t *testing.T) {}\n")

    code = main([str(tmp_path), "--no-progress"])

    err = capsys.readouterr().err
    assert code == EXIT_ERRORS
    assert "broken_test.go:3:1: " in err
    assert "[SCAN_UNTERMINATED_BLOCK_COMMENT]" in err
    assert "1 unparsable" in err


def test_cli_missing_path_exits_with_error(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing"), "--no-progress"]) == EXIT_ERRORS


def test_cli_custom_prefix_and_template(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    write(
        tmp_path / "bench_test.go",
        "package p\n\n// BenchmarkParse measures Parse\nfunc BenchmarkParse(b *testing.B) {}\n",
    )

    strict = ["--profile", "strict", "--no-progress", "--prefix", "Benchmark"]
    assert main([str(tmp_path), *strict]) == EXIT_VIOLATIONS
    assert main([str(tmp_path), *strict, "--template", "{name} measures {subject}"]) == EXIT_OK
    capsys.readouterr()


def test_cli_rejects_invalid_template(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path), "--no-progress", "--template", "{name} checks {thing}"])

    assert excinfo.value.code == 2
