"""Sequence generators."""

# pylint: disable=redefined-builtin

import builtins
import math

from utilkit.errors import InvalidArgumentValueError, InvalidInputTypeError
from utilkit.guards import is_number


def range(start: float, end: float) -> list[float]:
    """Return ``start, start + 1, ...`` up to but excluding ``end``.

    Unlike the builtin, an empty range is an error: ``start`` must be strictly
    less than ``end``. Non-integer bounds are allowed and step by one from
    ``start`` (``range(0.5, 3)`` is ``[0.5, 1.5, 2.5]``).

    The number of values is fixed up front from ``end - start``. Floats above
    2**53 cannot represent every step, so neighbouring values there may
    compare equal.

    Raises:
        InvalidInputTypeError: If a bound is not a number.
        InvalidArgumentValueError: If ``start >= end`` or a bound is NaN or infinite.

    Example:
        >>> range(0, 5)
        [0, 1, 2, 3, 4]
    """
    for bound in (start, end):
        if not is_number(bound):
            raise InvalidInputTypeError(
                "Range bounds must be numbers", expected="number", actual=bound
            )
    if not (math.isfinite(start) and math.isfinite(end)) or not start < end:
        raise InvalidArgumentValueError(
            "Invalid range", argument="range", value=(start, end)
        )

    count = math.ceil(end - start)
    # Rounding in end - start can add one step that lands on or past end.
    return [start + k for k in builtins.range(count) if start + k < end]
