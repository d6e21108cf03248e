"""Eager grouping of projected (key, value) pairs.

This is the counterpart of ``dict``-style group-by: the whole source is read
before any group is returned, so occurrences of a key anywhere in the source end up
in the same group. Use :func:`clusterby.clustered.group_clustered_by` instead when
the source is known to be clustered and should be streamed.

Example:
    >>> animals = [("Dog", "Herbert", 12), ("Cat", "Annie", 3), ("Dog", "Lawrence", 5)]
    >>> group_values_by(lambda a: (a[0], (a[1], a[2])), animals)
    [Group(key='Dog', values=(('Herbert', 12), ('Lawrence', 5))), Group(key='Cat', values=(('Annie', 3),))]
"""

from typing import Callable, Iterable, TypeVar

from clusterby.groups import Group
from clusterby.utils.collections import group_pairs

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def group_values_by(
    projection: Callable[[T], tuple[K, V]],
    source: Iterable[T],
) -> list[Group[K, V]]:
    """Group the values produced by ``projection`` by their key, dropping the key.

    Args:
        projection: Maps each item to a ``(key, value)`` pair. Keys must be hashable.
        source: The items to group. It is consumed completely.

    Returns:
        One group per distinct key, in order of each key's first occurrence. The
        values of each group keep their source order.
    """
    grouped = group_pairs(projection(item) for item in source)
    return [Group(key, tuple(values)) for key, values in grouped.items()]
