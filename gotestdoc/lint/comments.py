"""Doc-comment text helpers used by the convention rule."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
import re
from string import Formatter

# Same directive shapes `go/ast` drops from doc text: `//line `, `//extern `,
# `//export ` and tool directives such as `//go:build` or `//nolint:errcheck`.
_DIRECTIVE = re.compile(r"^(?:line |extern |export |[a-z0-9]+:[a-z0-9])")
_WORD_CHARS = r"A-Za-z0-9_"


def is_directive(line: str) -> bool:
    return _DIRECTIVE.match(line) is not None


def doc_text(lines: Sequence[str], *, skip_directives: bool = True) -> str:
    """Join comment lines into one whitespace-normalized string."""
    kept = [line for line in lines if not (skip_directives and is_directive(line))]
    return " ".join(" ".join(kept).split())


def first_word(text: str) -> str:
    words = text.split(maxsplit=1)
    return words[0] if words else ""


def mentions_word(text: str, word: str, *, ignore_case: bool = False) -> bool:
    if not word:
        return False
    flags = re.IGNORECASE if ignore_case else 0
    pattern = rf"(?<![{_WORD_CHARS}]){re.escape(word)}(?![{_WORD_CHARS}])"
    return re.search(pattern, text, flags) is not None


def render_template(template: str, *, name: str, subject: str) -> str:
    values = {"name": name, "subject": subject}
    return "".join(
        literal + (values[field] if field is not None else "")
        for literal, field, _, _ in Formatter().parse(template)
    )


def matches_template(text: str, template: str, *, name: str, subject: str) -> bool:
    """True when `text` opens with the rendered template as a full sentence or clause.

    Whitespace inside the template matches any run of whitespace; the match must end at
    the end of the text, a period, or whitespace.
    """
    return _template_pattern(template, name, subject).match(text) is not None


@lru_cache(maxsize=256)
def _template_pattern(template: str, name: str, subject: str) -> re.Pattern[str]:
    parts: list[str] = []
    values = {"name": name, "subject": subject}
    for literal, field, _, _ in Formatter().parse(template):
        parts.extend(r"\s+" if chunk.isspace() else re.escape(chunk) for chunk in re.split(r"(\s+)", literal) if chunk)
        if field is not None:
            parts.append(re.escape(values[field]))
    return re.compile("".join(parts) + r"(?:$|[.\s])")
