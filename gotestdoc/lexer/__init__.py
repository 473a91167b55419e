"""Lexer."""

from gotestdoc.lexer.lexer import Lexer, dump_tokens, token_text
from gotestdoc.lexer.tokens import (
    GO_KEYWORDS,
    Token,
    TokenFlags,
    TokenKind,
)

__all__ = [
    "GO_KEYWORDS",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "token_text",
]
