"""Rule configuration and named profiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from string import Formatter
from typing import Final

DEFAULT_PREFIX: Final[str] = "Test"
DEFAULT_TEMPLATE: Final[str] = "{name} tests the {subject} function"

_PLACEHOLDERS = frozenset({"name", "subject"})


class ConventionProfile(StrEnum):
    """Named rule profiles selectable from the command line."""

    DEFAULT = "default"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class ConventionOptions:
    """Injectable configuration for scanning and checking test comments.

    `templates` use `{name}` and `{subject}` placeholders. With `accept_subject_mention`
    a comment that starts with the function name and repeats the subject anywhere is
    conformant even when it matches no template.
    """

    prefix: str = DEFAULT_PREFIX
    templates: tuple[str, ...] = (DEFAULT_TEMPLATE,)
    accept_subject_mention: bool = True
    require_uppercase_subject: bool = True
    skip_directives: bool = True

    def __post_init__(self) -> None:
        validate_options(self)

    @staticmethod
    def for_profile(profile: ConventionProfile) -> "ConventionOptions":
        if profile == ConventionProfile.STRICT:
            return ConventionOptions(accept_subject_mention=False)
        return ConventionOptions()

    def subject_of(self, name: str) -> str:
        return name[len(self.prefix) :]

    def is_test_name(self, name: str) -> bool:
        """Mirror `go test` discovery: `TestFoo` and `Test` count, `Testfoo` does not."""
        if not name.startswith(self.prefix):
            return False
        subject = self.subject_of(name)
        if not subject or not self.require_uppercase_subject:
            return True
        return not subject[0].islower()


def validate_options(options: ConventionOptions) -> None:
    if not options.prefix or not options.prefix.isidentifier():
        raise ValueError(f"Test prefix `{options.prefix}` must be a non-empty identifier.")
    if not options.templates and not options.accept_subject_mention:
        raise ValueError("At least one template is required when subject mentions are not accepted.")
    for template in options.templates:
        fields = _template_fields(template)
        unknown = fields - _PLACEHOLDERS
        if unknown:
            raise ValueError(
                f"Template `{template}` uses unknown placeholder(s) {sorted(unknown)}; "
                "expected `{name}` and `{subject}`."
            )
        if not template.startswith("{name}"):
            raise ValueError(f"Template `{template}` must start with `{{name}}`.")


def _template_fields(template: str) -> set[str]:
    try:
        parsed = list(Formatter().parse(template))
    except ValueError as exc:
        raise ValueError(f"Template `{template}` is not a valid format string: {exc}") from exc
    return {field for _, field, _, _ in parsed if field is not None}


DEFAULT_OPTIONS: Final[ConventionOptions] = ConventionOptions()
STRICT_OPTIONS: Final[ConventionOptions] = ConventionOptions.for_profile(ConventionProfile.STRICT)
