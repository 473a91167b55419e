#!/usr/bin/env python
"""Dump the Go lexer token stream and scanned test declarations for one file."""

from __future__ import annotations

import argparse
from pathlib import Path

from gotestdoc.lexer import Lexer, dump_tokens
from gotestdoc.loader import read_source_unit
from gotestdoc.scanner import ParseError, scan_test_declarations


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump tokens and test declarations for a Go file")
    parser.add_argument("path", type=Path)
    parser.add_argument("--no-tokens", action="store_true", help="Only print declarations")
    args = parser.parse_args()

    unit = read_source_unit(args.path)
    lexer = Lexer(unit.source_text)
    tokens = lexer.lex()
    if not args.no_tokens:
        dump_tokens(tokens, unit.source_text, lexer.diagnostics)

    try:
        declarations = scan_test_declarations(unit.source_text)
    except ParseError as exc:
        print(f"\n{unit.file_path}: {exc}")
        return 1

    print(f"\n{len(declarations)} test declaration(s):")
    for declaration in declarations:
        comment = " | ".join(declaration.leading_comment) if declaration.leading_comment else "<none>"
        print(f"- {declaration.name} at {declaration.position} subject={declaration.subject!r} comment={comment!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
