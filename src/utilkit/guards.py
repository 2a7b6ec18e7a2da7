"""Argument guards shared by the string and array helpers.

Every public helper validates its primary argument before doing any work.
The guards here raise :class:`~utilkit.errors.InvalidInputTypeError` with the
messages callers rely on, and log the rejection at DEBUG level.
"""

import logging
from numbers import Real
from typing import Any

from utilkit.errors import InvalidInputTypeError

logger = logging.getLogger(__name__)

STRING_TYPE_MESSAGE = "Input must be a string"
ARRAY_TYPE_MESSAGE = "Input must be an array"

# Only real ordered containers count as arrays; str/bytes are sequences too
# but are never treated as arrays of characters.
ARRAY_TYPES = (list, tuple)


def is_array(value: Any) -> bool:
    """Return True if ``value`` is accepted wherever an array is expected."""
    return isinstance(value, ARRAY_TYPES)


def is_integer(value: Any) -> bool:
    """Return True for ``int`` values other than ``bool``."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    """Return True for real numbers other than ``bool``."""
    return isinstance(value, Real) and not isinstance(value, bool)


def ensure_string(value: Any) -> str:
    """Return ``value`` unchanged if it is a ``str``.

    Raises:
        InvalidInputTypeError: If ``value`` is not a ``str``.
    """
    if not isinstance(value, str):
        logger.debug("Rejected %s where a string was expected", type(value).__name__)
        raise InvalidInputTypeError(STRING_TYPE_MESSAGE, expected="string", actual=value)
    return value


def ensure_array(value: Any, message: str = ARRAY_TYPE_MESSAGE) -> list | tuple:
    """Return ``value`` unchanged if it is a list or tuple.

    Args:
        value: The candidate array.
        message: Error message to use on rejection.

    Raises:
        InvalidInputTypeError: If ``value`` is not a list or tuple.
    """
    if not is_array(value):
        logger.debug("Rejected %s where an array was expected", type(value).__name__)
        raise InvalidInputTypeError(message, expected="array", actual=value)
    return value
