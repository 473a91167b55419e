"""Lexer."""

from gotestdoc.diagnostics import Diagnostic, DiagnosticSpec
from gotestdoc.diagnostics.codes import (
    SCAN_UNTERMINATED_BLOCK_COMMENT,
    SCAN_UNTERMINATED_RAW_STRING,
)
from gotestdoc.lexer.tokens import GO_KEYWORDS, Token, TokenFlags, TokenKind
from gotestdoc.text import LineIndex, TextRange, TextSize, slice_text_range

_SINGLE_CHAR_KINDS: dict[str, TokenKind] = {
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_OPERATOR_CHARS = frozenset("+-*/%&|^<>=!:~")


class Lexer:
    """Lossless Go lexer that emits trivia and non-trivia tokens.

    Only the structure needed to find declarations and comments is modelled:
    operators collapse into a single `OPERATOR` kind and no semicolons are inserted.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._after_newline = False
        self._current_start = TextSize.from_int(0)
        self._current_flags = TokenFlags.NONE
        self._diagnostics: list[Diagnostic] = []
        self._line_index: LineIndex | None = None

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def next_token(self) -> Token:
        self._current_start = TextSize.from_int(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(self._current_start), self._current_flags)

        kind = self._lex_token()
        self._current_flags |= TokenFlags.PRECEDING_LINE_BREAK if self._after_newline else TokenFlags.NONE

        if not kind.is_trivia:
            self._after_newline = False

        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch == "\r" or ch == "\n" or ch == "\t" or ch == " " or ch == "\f" or ch == "\v":
            return self._consume_newline_or_whitespaces()

        if ch == "/" and self._peek_char() == "/":
            return self._lex_line_comment()

        if ch == "/" and self._peek_char() == "*":
            return self._lex_block_comment()

        if ch == '"':
            return self._lex_quoted('"', TokenKind.STRING)

        if ch == "'":
            return self._lex_quoted("'", TokenKind.RUNE)

        if ch == "`":
            return self._lex_raw_string()

        if ch.isdigit() or (ch == "." and self._peek_char().isdigit()):
            return self._lex_number()

        if ch.isalpha() or ch == "_":
            return self._lex_identifier()

        kind = _SINGLE_CHAR_KINDS.get(ch)
        if kind is not None:
            self._advance(1)
            return kind

        if ch in _OPERATOR_CHARS:
            self._advance(1)
            while not self.is_eof and self._current_char() in _OPERATOR_CHARS:
                self._advance(1)
            return TokenKind.OPERATOR

        # Fallback: preserve bytes as SKIPPED for recovery.
        self._advance(1)
        return TokenKind.SKIPPED

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        return TokenKind.LINE_COMMENT

    def _lex_block_comment(self) -> TokenKind:
        self._advance(2)
        while not self.is_eof:
            if self._current_char() == "*" and self._peek_char() == "/":
                self._advance(2)
                return TokenKind.BLOCK_COMMENT
            self._advance(1)
        self._report(SCAN_UNTERMINATED_BLOCK_COMMENT)
        return TokenKind.BLOCK_COMMENT

    def _lex_quoted(self, quote: str, kind: TokenKind) -> TokenKind:
        # Interpreted strings and runes end at the line break when unterminated;
        # the rest of the file still lexes normally.
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == quote:
                self._advance(1)
                break
            if ch == "\\":
                self._current_flags |= TokenFlags.HAS_ESCAPE
                self._advance(1)
                if not self.is_eof and self._current_char() not in "\r\n":
                    self._advance(1)
                continue
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        return kind

    def _lex_raw_string(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof:
            if self._current_char() == "`":
                self._advance(1)
                return TokenKind.RAW_STRING
            self._advance(1)
        self._report(SCAN_UNTERMINATED_RAW_STRING)
        return TokenKind.RAW_STRING

    def _lex_number(self) -> TokenKind:
        is_float = False
        is_hex = self._current_char() == "0" and self._peek_char() in "xX"
        while not self.is_eof:
            ch = self._current_char()
            if ch == ".":
                is_float = True
                self._advance(1)
                continue
            if ch in "eEpP" and not (is_hex and ch in "eE"):
                is_float = True
                self._advance(1)
                if self._current_char() in "+-":
                    self._advance(1)
                continue
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            break
        return TokenKind.FLOAT if is_float else TokenKind.INT

    def _lex_identifier(self) -> TokenKind:
        start = self._position
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            break
        word = self._source[start : self._position]
        if word == "func":
            return TokenKind.FUNC_KW
        if word in GO_KEYWORDS:
            return TokenKind.KEYWORD
        return TokenKind.IDENTIFIER

    def _consume_newline_or_whitespaces(self) -> TokenKind:
        if self._consume_newline():
            self._after_newline = True
            return TokenKind.NEWLINE
        self._consume_whitespaces()
        return TokenKind.WHITESPACE

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t" or ch == "\f" or ch == "\v":
                self._advance(1)
                continue
            break

    def _consume_newline(self) -> bool:
        if self._current_char() == "\n":
            self._advance(1)
            return True
        if self._current_char() == "\r":
            if self._peek_char() == "\n":
                self._advance(2)
            else:
                self._advance(1)
            return True
        return False

    def _report(self, spec: DiagnosticSpec) -> None:
        if self._line_index is None:
            self._line_index = LineIndex(self._source)
        self._diagnostics.append(
            Diagnostic(
                code=spec.code,
                message=spec.message,
                range=self.current_range,
                position=self._line_index.position(self._current_start),
                severity=spec.severity,
                hint=spec.hint,
                category=spec.category,
            )
        )

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def token_text(
    source: str,
    token: Token,
    null_char_on_eof: bool = False,
) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return "\0" if null_char_on_eof else ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<14} range={tok.range.as_tuple()} flags={tok.flags} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} at {d.position} message={d.message}")
