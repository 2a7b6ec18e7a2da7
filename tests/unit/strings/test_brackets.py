"""Unit tests for utilkit.strings.brackets module."""

import pytest

from utilkit.strings.brackets import are_brackets_balanced


@pytest.mark.parametrize(
    "text",
    [
        "",
        "no brackets at all",
        "(a[b]{c})",
        "<div>{[()]}</div>",
        "'quoted'",
        "\"a\" and `b`",
        "f('x')",
    ],
)
def test_balanced(text):
    """Properly nested pairs are balanced."""
    assert are_brackets_balanced(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "(a[b)]",
        "(",
        ")",
        "())",
        "{[}",
        "a > b",
        "it's",
        "\"unterminated",
    ],
)
def test_unbalanced(text):
    """Mismatched, unopened and unclosed delimiters are unbalanced."""
    assert are_brackets_balanced(text) is False


def test_quotes_are_checked_for_parity_only():
    """Two apostrophes balance each other wherever they appear."""
    assert are_brackets_balanced("it's Bob's") is True
    assert are_brackets_balanced("it's Bob's car's") is False
