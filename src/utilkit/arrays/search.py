"""Predicate-based search helpers."""

# pylint: disable=redefined-builtin

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from utilkit.guards import ensure_array
from utilkit.sentinels import NOT_FOUND

T = TypeVar("T")

Predicate = Callable[[T], bool]


def find(seq: Sequence[T], predicate: Predicate[T], default: Any = NOT_FOUND) -> Any:
    """Return the first item of ``seq`` for which ``predicate`` is true.

    Args:
        seq: The list or tuple to scan, in order.
        predicate: Called with each item until it returns a truthy value.
        default: Returned when nothing matches. Defaults to ``NOT_FOUND``,
            which cannot be confused with a ``None`` item.

    Returns:
        The first matching item, or ``default``.
    """
    for item in ensure_array(seq):
        if predicate(item):
            return item
    return default


def find_index(seq: Sequence[T], predicate: Predicate[T]) -> int:
    """Return the index of the first item matching ``predicate``, or ``-1``."""
    for index, item in enumerate(ensure_array(seq)):
        if predicate(item):
            return index
    return -1


def filter(seq: Sequence[T], predicate: Predicate[T]) -> list[T]:
    """Return a new list of the items of ``seq`` matching ``predicate``."""
    return [item for item in ensure_array(seq) if predicate(item)]
