"""Locate top-level test function declarations and their leading comments."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from gotestdoc.diagnostics import SCAN_UNBALANCED_BRACE, SCAN_UNCLOSED_BRACE, Diagnostic, DiagnosticSpec
from gotestdoc.lexer import Lexer, Token, TokenKind
from gotestdoc.options import DEFAULT_OPTIONS, ConventionOptions
from gotestdoc.scanner.errors import ParseError
from gotestdoc.text import LineIndex, LinePosition, TextRange, slice_text_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TestDeclaration:
    """One test function found by the scanner.

    `leading_comment` holds the text of each `//` line directly above the declaration
    (markers removed, order preserved), or `None` when no adjacent comment exists.
    """

    __test__ = False  # keep pytest from collecting this as a test class

    name: str
    subject: str
    position: LinePosition
    range: TextRange
    name_range: TextRange
    leading_comment: tuple[str, ...] | None = None
    comment_range: TextRange | None = None

    @property
    def has_comment(self) -> bool:
        return self.leading_comment is not None


@dataclass(slots=True)
class _LineContent:
    comment: Token | None = None
    has_code: bool = False


def scan_test_declarations(
    text: str,
    options: ConventionOptions | None = None,
) -> tuple[TestDeclaration, ...]:
    """Scan one source unit and return its test declarations in source order.

    Raises `ParseError` when the unit cannot be tokenized structurally.
    """
    resolved = options if options is not None else DEFAULT_OPTIONS
    lexer = Lexer(text)
    tokens = lexer.lex()
    if lexer.diagnostics:
        raise ParseError(lexer.diagnostics[0])

    line_index = LineIndex(text)
    contents = _classify_lines(tokens, line_index)

    declarations: list[TestDeclaration] = []
    for func_token, name_token in _top_level_functions(tokens, line_index):
        name = slice_text_range(text, name_token.range)
        if not resolved.is_test_name(name):
            continue
        leading = _leading_comment(text, func_token, line_index, contents)
        declarations.append(
            TestDeclaration(
                name=name,
                subject=resolved.subject_of(name),
                position=line_index.position(func_token.range.start),
                range=func_token.range.cover(name_token.range),
                name_range=name_token.range,
                leading_comment=None if leading is None else leading[0],
                comment_range=None if leading is None else leading[1],
            )
        )

    logger.debug("scanned %d test declaration(s) from %d token(s)", len(declarations), len(tokens))
    return tuple(declarations)


def _classify_lines(tokens: list[Token], line_index: LineIndex) -> list[_LineContent]:
    contents = [_LineContent() for _ in line_index.lines]
    for token in tokens:
        if token.kind in (TokenKind.EOF, TokenKind.NEWLINE, TokenKind.WHITESPACE):
            continue
        first = line_index.line_of(token.range.start).number
        last = line_index.line_of(token.range.end).number if not token.range.is_empty() else first
        if token.kind == TokenKind.LINE_COMMENT:
            contents[first - 1].comment = token
            continue
        # Block comments, raw strings and code all break comment adjacency
        # on every line they touch.
        for number in range(first, last + 1):
            contents[number - 1].has_code = True
    return contents


def _top_level_functions(
    tokens: list[Token],
    line_index: LineIndex,
) -> list[tuple[Token, Token]]:
    significant = [token for token in tokens if not token.kind.is_trivia and token.kind != TokenKind.EOF]
    functions: list[tuple[Token, Token]] = []
    open_braces: list[Token] = []
    open_groups: list[Token] = []
    for index, token in enumerate(significant):
        if token.kind == TokenKind.LBRACE:
            open_braces.append(token)
        elif token.kind == TokenKind.RBRACE:
            if not open_braces:
                raise ParseError(_scanner_diagnostic(SCAN_UNBALANCED_BRACE, token, line_index))
            open_braces.pop()
        elif token.kind in (TokenKind.LPAREN, TokenKind.LBRACKET):
            open_groups.append(token)
        elif token.kind in (TokenKind.RPAREN, TokenKind.RBRACKET):
            if open_groups:
                open_groups.pop()
        elif token.kind == TokenKind.FUNC_KW and not open_braces and not open_groups:
            following = significant[index + 1] if index + 1 < len(significant) else None
            # `func (r T) Name` is a method and `func(` a literal; neither is a test.
            if following is not None and following.kind == TokenKind.IDENTIFIER:
                functions.append((token, following))

    unclosed = open_braces + open_groups
    if unclosed:
        innermost = max(unclosed, key=lambda token: token.range.start)
        raise ParseError(_scanner_diagnostic(SCAN_UNCLOSED_BRACE, innermost, line_index))
    return functions


def _leading_comment(
    text: str,
    func_token: Token,
    line_index: LineIndex,
    contents: list[_LineContent],
) -> tuple[tuple[str, ...], TextRange] | None:
    line = line_index.line_of(func_token.range.start)
    if text[line.start : func_token.range.start.value].strip():
        return None

    comments: list[Token] = []
    number = line.number - 1
    while number >= 1:
        content = contents[number - 1]
        if content.comment is None or content.has_code:
            break
        comments.append(content.comment)
        number -= 1
    if not comments:
        return None

    comments.reverse()
    lines = tuple(slice_text_range(text, comment.range)[2:].rstrip() for comment in comments)
    return lines, comments[0].range.cover(comments[-1].range)


def _scanner_diagnostic(spec: DiagnosticSpec, token: Token, line_index: LineIndex) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=spec.message,
        range=token.range,
        position=line_index.position(token.range.start),
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )
