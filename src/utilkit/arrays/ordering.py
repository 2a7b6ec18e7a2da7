"""Reordering helpers: shuffle and swap."""

import logging
import math
import random
from collections.abc import Sequence
from typing import TypeVar

from utilkit.errors import InvalidArgumentValueError, InvalidInputTypeError
from utilkit.guards import ensure_array, is_integer, is_number

logger = logging.getLogger(__name__)

T = TypeVar("T")


def seeded_random(value: float) -> float:
    """Map ``value`` to a pseudo-random fraction in ``[0, 1)``.

    Uses the fractional part of ``sin(value) * 10000``. This is a weak,
    non-cryptographic generator kept because seeded shuffles must reproduce
    the same permutation for the same seed and input length. Negative
    fractions are wrapped into ``[0, 1)``.
    """
    fraction = math.fmod(math.sin(value) * 10000, 1.0)
    return fraction + 1.0 if fraction < 0 else fraction


def shuffle(seq: Sequence[T], seed: float | None = None) -> list[T]:
    """Return a shuffled copy of ``seq`` (Fisher-Yates, last index down to 1).

    Args:
        seq: The list or tuple to shuffle; it is not modified.
        seed: When given, step ``i`` draws from ``seeded_random(seed + i)``
            so the permutation is reproducible. When omitted, the module's
            global :mod:`random` source is used.

    Raises:
        InvalidInputTypeError: If ``seq`` is not an array or ``seed`` is not a number.
        InvalidArgumentValueError: If ``seed`` is NaN or infinite.
    """
    shuffled = list(ensure_array(seq))
    if seed is None:
        logger.debug("Shuffling %d items with the global random source", len(shuffled))
        for i in range(len(shuffled) - 1, 0, -1):
            j = random.randrange(i + 1)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    if not is_number(seed):
        raise InvalidInputTypeError("Seed must be a number", expected="number", actual=seed)
    if not math.isfinite(seed):
        raise InvalidArgumentValueError("Seed must be finite", argument="seed", value=seed)

    logger.debug("Shuffling %d items with seed %r", len(shuffled), seed)
    for i in range(len(shuffled) - 1, 0, -1):
        # Rounding can push a draw just below 1.0 up to 1.0; clamp to stay in [0, i].
        j = min(math.floor(seeded_random(seed + i) * (i + 1)), i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def swap(seq: Sequence[T], index1: int, index2: int) -> list[T]:
    """Return a copy of ``seq`` with the items at ``index1`` and ``index2`` exchanged.

    Negative indices are rejected rather than counted from the end.

    Raises:
        InvalidInputTypeError: If ``seq`` is not an array or an index is not an integer.
        InvalidArgumentValueError: If an index falls outside ``[0, len(seq))``.

    Example:
        >>> swap([1, 2, 3], 0, 2)
        [3, 2, 1]
    """
    swapped = list(ensure_array(seq))
    for name, index in (("index1", index1), ("index2", index2)):
        if not is_integer(index):
            raise InvalidInputTypeError(
                "Index must be an integer", expected="int", actual=index
            )
        if not 0 <= index < len(swapped):
            raise InvalidArgumentValueError(
                "Index out of bounds", argument=name, value=index
            )
    swapped[index1], swapped[index2] = swapped[index2], swapped[index1]
    return swapped
