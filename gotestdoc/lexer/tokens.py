"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final

from gotestdoc.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    LINE_COMMENT = 12  # // ...
    BLOCK_COMMENT = 13  # /* ... */
    SKIPPED = 14  # bytes the lexer does not understand, preserved

    # -------------------------
    # Keywords / identifiers / literals
    # -------------------------
    FUNC_KW = 20
    KEYWORD = 21
    IDENTIFIER = 22
    STRING = 23  # "interpreted"
    RAW_STRING = 24  # `raw`
    RUNE = 25  # 'r'
    INT = 26
    FLOAT = 27

    # -------------------------
    # Punctuation / operators
    # -------------------------
    SEMICOLON = 40  # ;
    COMMA = 41  # ,
    DOT = 42  # .
    OPERATOR = 43  # any other operator character

    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]
    LPAREN = 64  # (
    RPAREN = 65  # )

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.NEWLINE,
            TokenKind.LINE_COMMENT,
            TokenKind.BLOCK_COMMENT,
            TokenKind.SKIPPED,
        )

    @property
    def is_comment(self) -> bool:
        return self in (TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT)


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0  # NEWLINE before
    HAS_ESCAPE = 1 << 1


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def has_preceding_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)


GO_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)
