"""Case conversion helpers.

Word-based conversions lowercase the input and split it on the single ASCII
space character only; tabs, newlines and runs of spaces are not treated as
one separator. Consecutive spaces therefore produce empty words, which pass
through every conversion untouched.
"""

from utilkit.guards import ensure_string

WORD_SEPARATOR = " "


def _words(text: str) -> list[str]:
    return ensure_string(text).lower().split(WORD_SEPARATOR)


def _upper_first(word: str) -> str:
    # Slicing keeps the empty word empty.
    return word[:1].upper() + word[1:]


def _lower_first(word: str) -> str:
    return word[:1].lower() + word[1:]


def title_case(text: str) -> str:
    """Convert ``text`` to Title Case.

    Example:
        >>> title_case("hello WORLD")
        'Hello World'
    """
    return WORD_SEPARATOR.join(_upper_first(word) for word in _words(text))


def camel_case(text: str) -> str:
    """Convert ``text`` to camelCase.

    Example:
        >>> camel_case("Hello world")
        'helloWorld'
    """
    first, *rest = _words(text)
    return first + "".join(_upper_first(word) for word in rest)


def snake_case(text: str) -> str:
    """Convert ``text`` to snake_case."""
    return "_".join(_words(text))


def kebab_case(text: str) -> str:
    """Convert ``text`` to kebab-case."""
    return "-".join(_words(text))


def pascal_case(text: str) -> str:
    """Convert ``text`` to PascalCase."""
    return "".join(_upper_first(word) for word in _words(text))


def upper_case(text: str) -> str:
    """Return ``text`` with every character uppercased."""
    return ensure_string(text).upper()


def lower_case(text: str) -> str:
    """Return ``text`` with every character lowercased."""
    return ensure_string(text).lower()


def capitalize_first_letter(text: str) -> str:
    """Uppercase the first character of ``text``, leaving the rest unchanged.

    Unlike :meth:`str.capitalize`, the remainder of the string is not lowered.
    An empty string is returned as-is.
    """
    return _upper_first(ensure_string(text))


def uncapitalize_first_letter(text: str) -> str:
    """Lowercase the first character of ``text``, leaving the rest unchanged."""
    return _lower_first(ensure_string(text))
