from pathlib import Path
import textwrap

from gotestdoc.options import ConventionOptions
from gotestdoc.scanner import ParseError, scan_test_declarations
from gotestdoc.text import LinePosition, slice_text_range

FIXTURES = Path(__file__).parent / "fixtures"


def go(source: str) -> str:
    return textwrap.dedent(source).lstrip()


def test_scans_valid_fixture_in_source_order() -> None:
    text = (FIXTURES / "valid" / "good_test.go").read_text(encoding="utf-8")

    declarations = scan_test_declarations(text)

    assert [d.name for d in declarations] == ["TestReadData", "TestWriteData"]
    assert [d.subject for d in declarations] == ["ReadData", "WriteData"]
    assert [d.position for d in declarations] == [LinePosition(6, 1), LinePosition(14, 1)]
    assert declarations[0].leading_comment == (" TestReadData tests the ReadData function",)
    assert declarations[1].leading_comment == (" TestWriteData tests the WriteData function",)


def test_name_range_covers_identifier() -> None:
    text = (FIXTURES / "invalid" / "bad_test.go").read_text(encoding="utf-8")

    declarations = scan_test_declarations(text)

    assert [slice_text_range(text, d.name_range) for d in declarations] == ["TestReadData", "TestWriteData"]
    assert slice_text_range(text, declarations[0].range) == "func TestReadData"
    assert declarations[0].leading_comment == (" test reads data",)


def test_source_without_test_functions_yields_nothing() -> None:
    text = go(
        """
        package util

        // ReadData reads data.
        func ReadData(name string) ([]byte, error) {
            return nil, nil
        }
        """
    )

    assert scan_test_declarations(text) == ()
    assert scan_test_declarations("") == ()


def test_blank_line_breaks_comment_association() -> None:
    text = go(
        """
        package p

        // TestReadData tests the ReadData function

        func TestReadData(t *testing.T) {}
        """
    )

    (declaration,) = scan_test_declarations(text)

    assert declaration.leading_comment is None
    assert declaration.has_comment is False


def test_multi_line_comment_block_is_collected_in_order() -> None:
    text = go(
        """
        package p

        // Unrelated block.

        // TestReadData tests the ReadData function
        // with an empty file name.
        func TestReadData(t *testing.T) {}
        """
    )

    (declaration,) = scan_test_declarations(text)

    assert declaration.leading_comment == (
        " TestReadData tests the ReadData function",
        " with an empty file name.",
    )
    assert declaration.comment_range is not None
    assert slice_text_range(text, declaration.comment_range).startswith("// TestReadData")


def test_adjacent_declarations_are_independent() -> None:
    text = go(
        """
        package p

        // TestA tests the A function
        func TestA(t *testing.T) {}
        func TestB(t *testing.T) {}
        """
    )

    first, second = scan_test_declarations(text)

    assert first.leading_comment == (" TestA tests the A function",)
    assert second.leading_comment is None


def test_trailing_comment_on_code_line_is_not_leading() -> None:
    text = go(
        """
        package p

        var x = 1 // TestA tests the A function
        func TestA(t *testing.T) {}
        """
    )

    (declaration,) = scan_test_declarations(text)

    assert declaration.leading_comment is None


def test_block_comment_is_not_a_leading_comment() -> None:
    text = go(
        """
        package p

        // TestA tests the A function
        /* separator */
        func TestA(t *testing.T) {}
        """
    )

    (declaration,) = scan_test_declarations(text)

    assert declaration.leading_comment is None


def test_methods_literals_and_nested_functions_are_skipped() -> None:
    text = go(
        """
        package p

        // TestSuite tests the Suite function
        func (s *Suite) TestMethod() {}

        var TestVar = func(t *testing.T) {}

        func helper() {
            f := func TestInner() {}
            _ = f
        }

        // TestReal tests the Real function
        func TestReal(t *testing.T) {}
        """
    )

    assert [d.name for d in scan_test_declarations(text)] == ["TestReal"]


def test_lowercase_after_prefix_is_not_a_test_by_default() -> None:
    text = go(
        """
        package p

        func Testify() {}
        func Test(t *testing.T) {}
        func TestMain(m *testing.M) {}
        func Test_underscore(t *testing.T) {}
        """
    )

    assert [d.name for d in scan_test_declarations(text)] == ["Test", "TestMain", "Test_underscore"]

    lenient = ConventionOptions(require_uppercase_subject=False)
    assert [d.name for d in scan_test_declarations(text, lenient)] == [
        "Testify",
        "Test",
        "TestMain",
        "Test_underscore",
    ]


def test_custom_prefix() -> None:
    text = go(
        """
        package p

        // BenchmarkParse benchmarks the Parse function
        func BenchmarkParse(b *testing.B) {}
        func TestParse(t *testing.T) {}
        """
    )

    (declaration,) = scan_test_declarations(text, ConventionOptions(prefix="Benchmark"))

    assert declaration.name == "BenchmarkParse"
    assert declaration.subject == "Parse"


def test_declaration_position_accounts_for_indentation_and_crlf() -> None:
    text = "package p\r\n\r\n// TestA tests the A function\r\n  func TestA(t *testing.T) {}\r\n"

    (declaration,) = scan_test_declarations(text)

    assert declaration.position == LinePosition(4, 3)
    assert declaration.leading_comment == (" TestA tests the A function",)


def test_declaration_not_starting_its_line_has_no_comment() -> None:
    text = go(
        """
        package p

        // TestB tests the B function
        func TestA(t *testing.T) {}; func TestB(t *testing.T) {}
        """
    )

    first, second = scan_test_declarations(text)

    assert first.leading_comment == (" TestB tests the B function",)
    assert second.leading_comment is None
    assert first.position.line == second.position.line == 4


def test_unterminated_block_comment_raises_parse_error() -> None:
    text = "package p\n\n/* open\nfunc TestA(t *testing.T) {}\n"

    try:
        scan_test_declarations(text)
    except ParseError as exc:
        assert exc.diagnostic.code == "SCAN_UNTERMINATED_BLOCK_COMMENT"
        assert exc.diagnostic.position == LinePosition(3, 1)
        assert "3:1" in str(exc)
    else:
        raise AssertionError("Expected ParseError for unterminated block comment")


def test_unbalanced_closing_brace_raises_parse_error() -> None:
    text = go(
        """
        package p

        func TestA(t *testing.T) {
        }
        }
        """
    )

    try:
        scan_test_declarations(text)
    except ParseError as exc:
        assert exc.diagnostic.code == "SCAN_UNBALANCED_BRACE"
        assert exc.diagnostic.position == LinePosition(5, 1)
    else:
        raise AssertionError("Expected ParseError for unbalanced brace")


def test_parse_error_is_a_value_error() -> None:
    assert issubclass(ParseError, ValueError)


def test_unclosed_brace_raises_parse_error_at_innermost_opener() -> None:
    text = "package p\n\nfunc TestA(t *testing.T) {\n\tif x {\n}\n\nfunc TestB(t *testing.T) {}\n"

    try:
        scan_test_declarations(text)
    except ParseError as exc:
        assert exc.diagnostic.code == "SCAN_UNCLOSED_BRACE"
        assert exc.diagnostic.position == LinePosition(3, 26)
    else:
        raise AssertionError("Expected ParseError for unclosed brace")


def test_unclosed_paren_raises_parse_error() -> None:
    text = 'package p\n\nimport (\n\t"testing"\n\nfunc TestA(t *testing.T) {}\n'

    try:
        scan_test_declarations(text)
    except ParseError as exc:
        assert exc.diagnostic.code == "SCAN_UNCLOSED_BRACE"
        assert exc.diagnostic.position == LinePosition(3, 8)
    else:
        raise AssertionError("Expected ParseError for unclosed parenthesis")
