"""The result type produced by every grouping function.

A ``Group`` is a plain pair of a key and the values that were grouped under it.
Because it is a named tuple it unpacks like the ``(key, values)`` pairs produced by
``itertools.groupby`` or ``dict.items()``:

    for species, animals in group_clustered_by(lambda a: a.species, animals):
        ...

The values are always stored as a tuple, so a group handed to a consumer can be
kept around indefinitely without being affected by any later grouping work.
"""

from typing import Generic, TypeVar

from typing_extensions import NamedTuple

K = TypeVar("K")
V = TypeVar("V")


class Group(NamedTuple, Generic[K, V]):
    """A key together with the values grouped under it, in source order."""

    key: K
    values: tuple[V, ...]

    @property
    def size(self) -> int:
        """The number of values in the group."""
        return len(self.values)
