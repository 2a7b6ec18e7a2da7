"""Array helpers: partitioning, set-like operations, grouping, search,
transforms, ordering and generation.

"Arrays" are lists and tuples. Every helper returns a new list (or a derived
scalar) and never modifies its arguments. Passing anything else as the
primary argument raises :class:`~utilkit.errors.InvalidInputTypeError`.

``filter``, ``map``, ``range`` and ``reduce`` shadow builtins of the same
name; a ``*`` import of this package replaces them in the importing module.
"""

# pylint: disable=redefined-builtin

from utilkit.arrays.generate import range
from utilkit.arrays.grouping import compact_array, flatten_array, group_by
from utilkit.arrays.ordering import shuffle, swap
from utilkit.arrays.partition import chunk_array
from utilkit.arrays.search import filter, find, find_index
from utilkit.arrays.sets import intersection, unique_array
from utilkit.arrays.transform import map, pluck, reduce
from utilkit.sentinels import NOT_FOUND

__all__ = [
    "NOT_FOUND",
    "chunk_array",
    "compact_array",
    "filter",
    "find",
    "find_index",
    "flatten_array",
    "group_by",
    "intersection",
    "map",
    "pluck",
    "range",
    "reduce",
    "shuffle",
    "swap",
    "unique_array",
]
