"""Thread-safe wrapper around LRUCache."""

from __future__ import annotations

from threading import Lock
from typing import Generic, Hashable, TypeVar, overload

from alt_lru.cache import EvictionCallback, LRUCache
from alt_lru.models import CacheStats

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
D = TypeVar("D")

_MISSING = object()


class SynchronizedLRUCache(Generic[K, V]):
    """LRU cache guarded by a single lock held for each whole operation.

    The eviction callback runs while the lock is held, so it must not call
    back into the same cache.
    """

    def __init__(self, capacity: int, on_evict: EvictionCallback | None = None) -> None:
        self._cache: LRUCache[K, V] = LRUCache(capacity, on_evict=on_evict)
        self._lock = Lock()

    @property
    def capacity(self) -> int:
        return self._cache.capacity

    def size(self) -> int:
        with self._lock:
            return self._cache.size()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __repr__(self) -> str:
        with self._lock:
            return f"SynchronizedLRUCache(capacity={self._cache.capacity}, size={len(self._cache)})"

    @overload
    def get(self, key: K) -> V | None: ...

    @overload
    def get(self, key: K, default: D) -> V | D: ...

    def get(self, key, default=None):
        with self._lock:
            return self._cache.get(key, default)

    @overload
    def peek(self, key: K) -> V | None: ...

    @overload
    def peek(self, key: K, default: D) -> V | D: ...

    def peek(self, key, default=None):
        with self._lock:
            return self._cache.peek(key, default)

    def get_or_put(self, key: K, value: V) -> V:
        """Return the cached value for ``key``, storing ``value`` first if absent.

        The check and the insert happen under one lock acquisition.
        """
        with self._lock:
            cached = self._cache.get(key, _MISSING)
            if cached is not _MISSING:
                return cached  # type: ignore[return-value]
            self._cache.put(key, value)
            return value

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._cache.put(key, value)

    def remove(self, key: K) -> bool:
        with self._lock:
            return self._cache.remove(key)

    def lru_key(self) -> K | None:
        with self._lock:
            return self._cache.lru_key()

    def keys(self) -> list[K]:
        with self._lock:
            return self._cache.keys()

    def items(self) -> list[tuple[K, V]]:
        with self._lock:
            return self._cache.items()

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def stats(self) -> CacheStats:
        with self._lock:
            return self._cache.stats()

    def reset_stats(self) -> None:
        with self._lock:
            self._cache.reset_stats()
