"""Formatting helpers producing slugs and human-readable labels."""

import re

from utilkit.guards import ensure_string

SLUG_SEPARATOR_PATTERN = re.compile(r"[\s-]+")
SLUG_DISALLOWED_PATTERN = re.compile(r"[^\w-]+", re.ASCII)
CAMEL_BOUNDARY_PATTERN = re.compile(r"([a-z])([A-Z])")
IDENTIFIER_SEPARATOR_PATTERN = re.compile(r"[_-]")
WHITESPACE_RUN_PATTERN = re.compile(r"\s+")


def slugify(text: str) -> str:
    """Turn ``text`` into a URL slug.

    The text is lowercased and trimmed, runs of whitespace and hyphens become
    a single hyphen, and any character other than ASCII letters, digits,
    underscores and hyphens is dropped.

    Example:
        >>> slugify("  Hello, World -- again ")
        'hello-world-again'
    """
    slug = ensure_string(text).lower().strip()
    slug = SLUG_SEPARATOR_PATTERN.sub("-", slug)
    return SLUG_DISALLOWED_PATTERN.sub("", slug)


def to_human_readable(text: str) -> str:
    """Turn an identifier such as ``userName`` or ``user_name`` into ``user Name``.

    A space is inserted at each lowercase-to-uppercase boundary, underscores
    and hyphens become spaces, and the result has single spaces and no
    leading or trailing whitespace. Letter case is otherwise preserved.
    """
    readable = CAMEL_BOUNDARY_PATTERN.sub(r"\1 \2", ensure_string(text))
    readable = IDENTIFIER_SEPARATOR_PATTERN.sub(" ", readable)
    return WHITESPACE_RUN_PATTERN.sub(" ", readable).strip()
