"""The ``NOT_FOUND`` sentinel returned by search helpers on a miss.

``None`` is a legitimate list element, so searches report a miss with a
dedicated marker instead. ``NOT_FOUND`` is falsy and survives pickling as the
same singleton.
"""

from dataclasses import dataclass


def _get_not_found() -> "_NotFoundType":
    # Factory used by pickle to retrieve the one true instance.
    return NOT_FOUND


@dataclass(frozen=True)
class _NotFoundType:
    """Sentinel marking the absence of a matching element."""

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_not_found, ())


# Singleton instance
NOT_FOUND = _NotFoundType()
