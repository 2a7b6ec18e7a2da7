"""Grouping, flattening and compaction helpers."""

from collections.abc import Callable, Hashable, Sequence
from typing import Any, TypeVar

from utilkit.guards import ensure_array, is_array

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(seq: Sequence[T], key_fn: Callable[[T], K]) -> dict[K, list[T]]:
    """Group the items of ``seq`` by the key ``key_fn`` derives from each item.

    Keys appear in the order they are first produced and every group keeps the
    original relative order of its items.

    Example:
        >>> group_by(["apple", "avocado", "banana"], lambda word: word[0])
        {'a': ['apple', 'avocado'], 'b': ['banana']}
    """
    groups: dict[K, list[T]] = {}
    for item in ensure_array(seq):
        groups.setdefault(key_fn(item), []).append(item)
    return groups


def flatten_array(seq: Sequence[Sequence[T] | T]) -> list[T]:
    """Flatten one level of nesting.

    Nested lists and tuples are spliced into the result; any other element
    is kept as a single item. Deeper levels are left untouched.

    Example:
        >>> flatten_array([[1, 2], [3, [4]], 5])
        [1, 2, 3, [4], 5]
    """
    result: list[Any] = []
    for item in ensure_array(seq):
        if is_array(item):
            result.extend(item)
        else:
            result.append(item)
    return result


def compact_array(seq: Sequence[T | None]) -> list[T]:
    """Return ``seq`` without its ``None`` items.

    Other falsy values such as ``0``, ``""`` and ``False`` are kept.
    """
    return [item for item in ensure_array(seq) if item is not None]
