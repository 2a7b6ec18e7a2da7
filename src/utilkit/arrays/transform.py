"""Element-wise transforms and folds."""

# pylint: disable=redefined-builtin

from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any, TypeVar

from utilkit.guards import ensure_array, is_array, is_integer

T = TypeVar("T")
U = TypeVar("U")


def map(seq: Sequence[T], mapper: Callable[[T], U]) -> list[U]:
    """Return a new list with ``mapper`` applied to every item of ``seq``."""
    return [mapper(item) for item in ensure_array(seq)]


def reduce(seq: Sequence[T], reducer: Callable[[U, T], U], initial: U) -> U:
    """Fold ``seq`` from left to right.

    The accumulator starts at ``initial`` and is replaced by
    ``reducer(accumulator, item)`` for each item in turn. An empty ``seq``
    returns ``initial``.

    Example:
        >>> reduce([1, 2, 3], lambda total, item: total + item, 10)
        16
    """
    accumulator = initial
    for item in ensure_array(seq):
        accumulator = reducer(accumulator, item)
    return accumulator


def _pluck_one(item: Any, key: Hashable) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    if is_array(item) and is_integer(key):
        return item[key] if 0 <= key < len(item) else None
    if isinstance(key, str):
        return getattr(item, key, None)
    return None


def pluck(seq: Sequence[Any], key: Hashable) -> list[Any]:
    """Extract ``key`` from every item of ``seq``.

    Mappings are indexed by ``key``, lists and tuples by an integer position,
    and other objects are read through the attribute named ``key``. Items
    lacking the key contribute ``None``, so the result always has the same
    length as ``seq``.

    Example:
        >>> pluck([{"id": 1}, {"id": 2}, {}], "id")
        [1, 2, None]
    """
    return [_pluck_one(item, key) for item in ensure_array(seq)]
