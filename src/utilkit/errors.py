"""Error definitions shared by the string and array helpers."""

from typing import Any

# ============================================================================
#                               Base error
# ============================================================================


class UtilkitError(Exception):
    """Base class for all utilkit errors."""


# ============================================================================
#                           Argument validation errors
# ============================================================================


class InvalidInputTypeError(UtilkitError, TypeError):
    """Raised when an argument does not have the expected type.

    Attributes:
        expected (str): Human-readable name of the expected shape
            (e.g. "string", "array").
        actual (str): Name of the type that was actually received.
    """

    def __init__(self, message: str, *, expected: str, actual: Any) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = type(actual).__name__


class InvalidArgumentValueError(UtilkitError, ValueError):
    """Raised when a well-typed auxiliary argument has an unusable value.

    Attributes:
        argument (str): Name of the offending argument.
        value (Any): The rejected value.
    """

    def __init__(self, message: str, *, argument: str, value: Any) -> None:
        super().__init__(message)
        self.argument = argument
        self.value = value
