"""Shared test fixtures."""

from __future__ import annotations

import pytest

from alt_lru.cache import LRUCache


class EvictionRecorder:
    """Eviction callback that remembers every (key, value) it receives."""

    def __init__(self) -> None:
        self.evicted: list[tuple[object, object]] = []

    def __call__(self, key: object, value: object) -> None:
        self.evicted.append((key, value))

    @property
    def keys(self) -> list[object]:
        return [key for key, _ in self.evicted]


@pytest.fixture
def recorder() -> EvictionRecorder:
    return EvictionRecorder()


@pytest.fixture
def cache(recorder: EvictionRecorder) -> LRUCache[int, str]:
    """Capacity-2 cache wired to the eviction recorder."""
    return LRUCache(2, on_evict=recorder)
