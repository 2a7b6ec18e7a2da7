"""String helpers: case conversion, validation, sanitization and formatting.

Every helper takes a single ``str`` and raises
:class:`~utilkit.errors.InvalidInputTypeError` for anything else.
"""

from utilkit.strings.brackets import are_brackets_balanced
from utilkit.strings.casing import (
    camel_case,
    capitalize_first_letter,
    kebab_case,
    lower_case,
    pascal_case,
    snake_case,
    title_case,
    uncapitalize_first_letter,
    upper_case,
)
from utilkit.strings.formatting import slugify, to_human_readable
from utilkit.strings.sanitize import (
    escape_html,
    normalize_whitespace,
    strip_html,
    strip_non_alphanumeric,
)
from utilkit.strings.validation import is_valid_email, is_valid_url, is_valid_uuid

__all__ = [
    "are_brackets_balanced",
    "camel_case",
    "capitalize_first_letter",
    "escape_html",
    "is_valid_email",
    "is_valid_url",
    "is_valid_uuid",
    "kebab_case",
    "lower_case",
    "normalize_whitespace",
    "pascal_case",
    "slugify",
    "snake_case",
    "strip_html",
    "strip_non_alphanumeric",
    "title_case",
    "to_human_readable",
    "uncapitalize_first_letter",
    "upper_case",
]
