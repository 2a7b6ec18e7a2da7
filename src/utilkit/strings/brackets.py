"""Bracket balance checking."""

from utilkit.guards import ensure_string

BRACKET_PAIRS = {
    "(": ")",
    "{": "}",
    "[": "]",
    "<": ">",
    "'": "'",
    '"': '"',
    "`": "`",
}
CLOSERS = frozenset(BRACKET_PAIRS.values())
# Quotes open and close with the same character.
SYMMETRIC = frozenset(opener for opener, closer in BRACKET_PAIRS.items() if opener == closer)


def are_brackets_balanced(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed in the right order.

    Recognised pairs are ``()``, ``{}``, ``[]`` and ``<>`` plus the quote
    characters ``'``, ``"`` and the backtick. A quote closes when it matches
    the most recently opened, still unclosed delimiter and opens a new one
    otherwise.
    Quotes are therefore only checked for parity, not for true nesting, so
    ``"it's"`` is unbalanced. All other characters are ignored.

    Example:
        >>> are_brackets_balanced("(a[b]{c})")
        True
        >>> are_brackets_balanced("(a[b)]")
        False
    """
    stack: list[str] = []
    for char in ensure_string(text):
        if char in SYMMETRIC and stack and stack[-1] == char:
            stack.pop()
        elif char in BRACKET_PAIRS:
            stack.append(BRACKET_PAIRS[char])
        elif char in CLOSERS:
            if not stack or stack.pop() != char:
                return False
    return not stack
