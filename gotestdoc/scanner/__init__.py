"""Declaration scanner (test functions + adjacent comment blocks)."""

from gotestdoc.scanner.declarations import TestDeclaration, scan_test_declarations
from gotestdoc.scanner.errors import ParseError

__all__ = [
    "ParseError",
    "TestDeclaration",
    "scan_test_declarations",
]
