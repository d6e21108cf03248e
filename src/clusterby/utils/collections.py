"""Collection utility functions."""

from functools import reduce
from typing import Iterable, TypeVar

_K = TypeVar("_K")
_V = TypeVar("_V")


def group_pairs(pairs: Iterable[tuple[_K, _V]]) -> dict[_K, list[_V]]:
    """Group (key, value) pairs into a dict of lists by key.

    Keys keep the order in which they were first seen, and each list keeps the
    order in which its values appeared. Occurrences of a key do not need to be
    adjacent; they are all merged into the same list.

    Args:
        pairs: An iterable of (key, value) tuples. Keys must be hashable.

    Returns:
        A dict mapping each unique key to a list of its associated values.

    Example:
        >>> group_pairs([("Dog", 1), ("Cat", 2), ("Dog", 3)])
        {'Dog': [1, 3], 'Cat': [2]}
    """

    def accumulate(groups: dict[_K, list[_V]], pair: tuple[_K, _V]) -> dict[_K, list[_V]]:
        key, value = pair
        groups.setdefault(key, []).append(value)
        return groups

    return reduce(accumulate, pairs, {})
