"""Sanitizers that strip or escape unwanted characters."""

import re

from utilkit.guards import ensure_string

WHITESPACE_RUN_PATTERN = re.compile(r"\s+")
HTML_TAG_PATTERN = re.compile(r"<[^>]*>")
NON_ALPHANUMERIC_PATTERN = re.compile(r"[^a-zA-Z0-9 ]")

# "&" must come first so later replacements are not escaped twice.
HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run into a single space and trim the ends."""
    return WHITESPACE_RUN_PATTERN.sub(" ", ensure_string(text)).strip()


def strip_html(text: str) -> str:
    """Remove anything that looks like an HTML tag.

    Each ``<`` up to the next ``>`` is dropped. This is a textual filter, not
    an HTML parser: an unterminated ``<`` is kept and nested markup is not
    understood.
    """
    return HTML_TAG_PATTERN.sub("", ensure_string(text))


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` as HTML entities.

    Example:
        >>> escape_html("<a href='x'>")
        '&lt;a href=&#39;x&#39;&gt;'
    """
    escaped = ensure_string(text)
    for char, entity in HTML_ESCAPES:
        escaped = escaped.replace(char, entity)
    return escaped


def strip_non_alphanumeric(text: str) -> str:
    """Keep only ASCII letters, digits and spaces, then trim the ends."""
    return NON_ALPHANUMERIC_PATTERN.sub("", ensure_string(text)).strip()
