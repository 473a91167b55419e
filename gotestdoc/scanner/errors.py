"""Scanner errors."""

from gotestdoc.diagnostics import Diagnostic


class ParseError(ValueError):
    """Raised when a source unit cannot be tokenized well enough to find declarations."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(f"{diagnostic.position}: {diagnostic.message}")
        self.diagnostic = diagnostic
