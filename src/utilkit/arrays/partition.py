"""Partitioning helpers."""

from collections.abc import Sequence
from typing import TypeVar

from utilkit.errors import InvalidArgumentValueError, InvalidInputTypeError
from utilkit.guards import ensure_array, is_integer

T = TypeVar("T")


def chunk_array(seq: Sequence[T], size: int) -> list[list[T]]:
    """Split ``seq`` into consecutive chunks of ``size`` items.

    The last chunk holds whatever is left over and may be shorter.

    Args:
        seq: The list or tuple to split.
        size: Number of items per chunk. Must be an ``int``; floats such as
            ``2.0`` are rejected rather than truncated.

    Returns:
        A new list of new lists.

    Raises:
        InvalidInputTypeError: If ``size`` is not an integer or ``seq`` is not an array.
        InvalidArgumentValueError: If ``size`` is zero or negative.

    Example:
        >>> chunk_array([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    if not is_integer(size):
        raise InvalidInputTypeError("Size must be a number", expected="int", actual=size)
    if size <= 0:
        raise InvalidArgumentValueError(
            "Size must be greater than 0", argument="size", value=size
        )
    items = ensure_array(seq)
    return [list(items[start : start + size]) for start in range(0, len(items), size)]
