"""Lazy group-by for sources that are already clustered by key.

Many real data sets keep records with the same key next to each other: rows read
from a query with ``ORDER BY``, log files written one request at a time, exports
sorted by customer. For such sources a full group-by is wasteful, because it must
read everything before it can produce a single group. The grouper in this module
reads the source once and emits each cluster as soon as the next key shows up, so
it never holds more than one cluster in memory.

Example:
    >>> animals = [("Dog", 12), ("Dog", 5), ("Cat", 3), ("Cat", 6), ("Horse", 16)]
    >>> for species, members in group_clustered_by(lambda a: a[0], animals):
    ...     print(species, [age for _, age in members])
    Dog [12, 5]
    Cat [3, 6]
    Horse [16]

Warning:
    The source must be clustered. Keys are only compared with the key of the
    cluster being accumulated, so a key that reappears after a different key
    starts a new, separate group. This is never detected or reported: checking
    for it would require remembering every key seen so far.
"""

from enum import Enum
from logging import getLogger
from operator import itemgetter
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from typing_extensions import Self

from clusterby.groups import Group

logger = getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

#: Marks the end of the source; never visible outside this module.
_END = object()


class GrouperState(Enum):
    """Lifecycle of a :class:`ClusteredGrouper`."""

    NOT_STARTED = "not_started"
    """Nothing has been read from the source yet."""

    ACCUMULATING = "accumulating"
    """A cluster is buffered and more items may follow."""

    EXHAUSTED = "exhausted"
    """The source ended or raised. No further groups will be produced."""


class ClusteredGrouper(Iterator[Group[K, T]], Generic[T, K]):
    """Iterator that groups adjacent items sharing a key.

    Each call to ``next()`` reads items until the key changes (or the source ends)
    and returns the completed cluster. The item that revealed the key change is
    kept as the start of the next cluster, so the source is read exactly once and
    never more than one item past the cluster being returned.

    Two keys are considered equal when ``new is current or new == current``,
    which is the rule Python containers use. Keys whose equality is not
    reflexive, such as distinct ``float("nan")`` objects, each start a new group.

    Attributes:
        _key: Function computing the key of an item.
        _source: Iterator over the items to group.
        _state: Current lifecycle state.
        _current_key: Key of the cluster being accumulated.
        _buffer: Items of the cluster being accumulated.
        _emitted: Number of groups returned so far.
    """

    _current_key: K

    def __init__(self, key: Callable[[T], K], source: Iterable[T]) -> None:
        self._key = key
        self._source: Iterator[T] = iter(source)
        self._state = GrouperState.NOT_STARTED
        self._buffer: list[T] = []
        self._emitted = 0

    @property
    def state(self) -> GrouperState:
        return self._state

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Group[K, T]:
        if self._state is GrouperState.NOT_STARTED:
            self._start()
        if self._state is GrouperState.EXHAUSTED:
            raise StopIteration
        return self._advance()

    def _start(self) -> None:
        pulled = self._pull()
        if pulled is None:
            logger.debug("Source is empty; no groups to produce")
            self._close()
            return
        self._current_key, first = pulled
        self._buffer = [first]
        self._state = GrouperState.ACCUMULATING

    def _advance(self) -> Group[K, T]:
        while (pulled := self._pull()) is not None:
            key, item = pulled
            if self._is_current_key(key):
                self._buffer.append(item)
                continue
            group = self._emit()
            self._current_key = key
            self._buffer = [item]
            return group

        group = self._emit()
        self._close()
        return group

    def _pull(self) -> tuple[K, T] | None:
        """Read one item and compute its key, or return None at the end of the source.

        Any exception from the source or the key function leaves the grouper
        exhausted before being re-raised. A ``StopIteration`` from the key function
        is re-raised as ``RuntimeError`` so that it cannot pass for the end of the
        groups.
        """
        try:
            item = next(self._source, _END)
            if item is _END:
                return None
            return self._key(item), item  # type: ignore[arg-type]
        except StopIteration as exc:
            self._close()
            raise RuntimeError("key function raised StopIteration") from exc
        except Exception:
            self._close()
            raise

    def _is_current_key(self, key: K) -> bool:
        try:
            return key is self._current_key or bool(key == self._current_key)
        except StopIteration as exc:
            self._close()
            raise RuntimeError("key comparison raised StopIteration") from exc
        except Exception:
            self._close()
            raise

    def _emit(self) -> Group[K, T]:
        group = Group(self._current_key, tuple(self._buffer))
        self._emitted += 1
        logger.debug("Emitting group %r with %d item(s)", group.key, group.size)
        return group

    def _close(self) -> None:
        if self._state is not GrouperState.EXHAUSTED:
            logger.debug("Clustered grouping finished after %d group(s)", self._emitted)
        self._state = GrouperState.EXHAUSTED
        self._buffer = []
        self._source = iter(())


def group_clustered_by(key: Callable[[T], K], source: Iterable[T]) -> ClusteredGrouper[T, K]:
    """Lazily group a clustered source by ``key``.

    Args:
        key: Computes the key of an item. Exceptions propagate to the consumer when
            the offending item is read.
        source: Items in which equal keys are adjacent. May be empty or infinite;
            it is read once, on demand.

    Returns:
        An iterator of :class:`~clusterby.groups.Group`, one per run of equal keys,
        in source order. Each group's values are an immutable snapshot.
    """
    return ClusteredGrouper(key, source)


def group_clustered_values_by(
    projection: Callable[[T], tuple[K, V]],
    source: Iterable[T],
) -> Iterator[Group[K, V]]:
    """Lazily group a clustered source by key, keeping only the projected values.

    This is the streaming counterpart of :func:`clusterby.eager.group_values_by`:
    ``projection`` maps each item to a ``(key, value)`` pair, runs of equal keys are
    grouped, and the key is dropped from the grouped values.

    Non-adjacent occurrences of a key produce separate groups, exactly as in
    :func:`group_clustered_by`. A projection result that is not a pair raises when
    its item is read.
    """
    projected = ((key, value) for key, value in map(projection, source))
    pairs: ClusteredGrouper[tuple[K, V], K] = ClusteredGrouper(itemgetter(0), projected)
    return (Group(group.key, tuple(value for _, value in group.values)) for group in pairs)
