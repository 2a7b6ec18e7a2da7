"""Set-like helpers: deduplication and intersection.

Membership follows the same rules for both helpers. Primitive values
(``None``, numbers, strings and bytes) compare by value, with ``True``/``False``
kept apart from ``1``/``0`` and every NaN equal to every other NaN. Any other
object (lists, dicts, tuples, instances) compares by identity, so two equal
but distinct lists are both kept. This also means unhashable elements are
fine.
"""

import math
from collections.abc import Hashable, Sequence
from typing import Any, TypeVar

from utilkit.guards import ensure_array

T = TypeVar("T")

BOTH_ARRAYS_MESSAGE = "Both inputs must be arrays"
VALUE_TYPES = (type(None), int, float, complex, str, bytes)

_IDENTITY = object()
_NAN = object()


def _membership_key(item: Any) -> Hashable:
    if isinstance(item, bool):
        return (bool, item)
    if isinstance(item, float) and math.isnan(item):
        return _NAN
    if isinstance(item, VALUE_TYPES):
        return item
    return (_IDENTITY, id(item))


def unique_array(seq: Sequence[T]) -> list[T]:
    """Return the items of ``seq`` without duplicates, in first-seen order.

    Example:
        >>> unique_array([1, 2, 2, 3, 1])
        [1, 2, 3]
    """
    seen: set[Hashable] = set()
    result: list[T] = []
    for item in ensure_array(seq):
        key = _membership_key(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def intersection(first: Sequence[T], second: Sequence[Any]) -> list[T]:
    """Return the items of ``first`` that also occur in ``second``.

    Order and duplicates come from ``first``; ``second`` only acts as a
    membership set.

    Raises:
        InvalidInputTypeError: If either argument is not an array.

    Example:
        >>> intersection([1, 2, 2, 3], [2, 3, 4])
        [2, 2, 3]
    """
    ensure_array(first, BOTH_ARRAYS_MESSAGE)
    ensure_array(second, BOTH_ARRAYS_MESSAGE)
    present = {_membership_key(item) for item in second}
    return [item for item in first if _membership_key(item) in present]
