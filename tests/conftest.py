from typing import Iterable, Iterator

import pytest


class PullTracker(Iterator):
    """Iterator wrapper recording how many items have been read from the source."""

    def __init__(self, source: Iterable) -> None:
        self._source = iter(source)
        self.pulled = 0

    def __iter__(self) -> "PullTracker":
        return self

    def __next__(self):
        item = next(self._source)
        self.pulled += 1
        return item


@pytest.fixture
def track_pulls():
    return PullTracker


@pytest.fixture
def clustered_animals() -> list[tuple[str, int]]:
    return [
        ("Dog", 12),
        ("Dog", 5),
        ("Cat", 3),
        ("Cat", 6),
        ("Cat", 9),
        ("Horse", 16),
    ]


@pytest.fixture
def interleaved_animals() -> list[tuple[str, int]]:
    return [("Dog", 1), ("Cat", 2), ("Dog", 3)]
