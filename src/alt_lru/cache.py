"""Bounded LRU cache with O(1) get/put/remove.

A dict maps each live key to its node in an intrusive doubly-linked list
ordered from most to least recently used. Reads and writes both count as a
use; the tail is evicted when an insert would exceed capacity.
"""

from __future__ import annotations

import operator
from typing import Callable, Generic, Hashable, TypeVar, overload

from alt_lru.exceptions import InvalidCapacityError
from alt_lru.models import CacheStats
from alt_lru.order_list import Node, OrderList

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
D = TypeVar("D")

EvictionCallback = Callable[[K, V], None]


def validate_capacity(capacity: object) -> int:
    """Return ``capacity`` as an int, raising InvalidCapacityError unless it is >= 1."""
    if isinstance(capacity, bool):
        raise InvalidCapacityError(capacity)
    try:
        value = operator.index(capacity)  # type: ignore[arg-type]
    except TypeError as e:
        raise InvalidCapacityError(capacity) from e
    if value < 1:
        raise InvalidCapacityError(capacity)
    return value


class LRUCache(Generic[K, V]):
    """Least-recently-used cache with a fixed capacity.

    Not internally synchronized; see ``SynchronizedLRUCache`` for concurrent use.

    Args:
        capacity: Maximum number of entries, must be >= 1
        on_evict: Optional hook called with ``(key, value)`` of the victim right
            before it is dropped for capacity. If it raises, the ``put`` that
            triggered it is abandoned and the cache is left unchanged.

    Raises:
        InvalidCapacityError: If ``capacity`` is not a positive integer
    """

    def __init__(self, capacity: int, on_evict: EvictionCallback | None = None) -> None:
        self._capacity = validate_capacity(capacity)
        self._on_evict = on_evict
        self._index: dict[K, Node[K, V]] = {}
        self._order: OrderList[K, V] = OrderList()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._removals = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return len(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={len(self._index)})"

    @overload
    def get(self, key: K) -> V | None: ...

    @overload
    def get(self, key: K, default: D) -> V | D: ...

    def get(self, key, default=None):
        """Return the value for ``key`` and mark it most recently used.

        A missing key returns ``default`` and leaves the ordering untouched.
        """
        node = self._index.get(key)
        if node is None:
            self._misses += 1
            return default
        self._order.move_to_front(node)
        self._hits += 1
        return node.value

    @overload
    def peek(self, key: K) -> V | None: ...

    @overload
    def peek(self, key: K, default: D) -> V | D: ...

    def peek(self, key, default=None):
        """Return the value for ``key`` without touching recency or stats."""
        node = self._index.get(key)
        if node is None:
            return default
        return node.value

    def put(self, key: K, value: V) -> None:
        """Insert or overwrite ``key``, making it most recently used.

        Inserting a new key into a full cache first evicts the least recently
        used entry.
        """
        node = self._index.get(key)
        if node is not None:
            node.value = value
            self._order.move_to_front(node)
            return

        if len(self._index) >= self._capacity:
            self._evict()

        node = Node(key, value)
        self._order.push_front(node)
        self._index[key] = node

    def remove(self, key: K) -> bool:
        """Drop ``key`` if present. Returns whether it existed."""
        node = self._index.pop(key, None)
        if node is None:
            return False
        self._order.unlink(node)
        self._removals += 1
        return True

    def lru_key(self) -> K | None:
        """Key the next eviction would remove, or None when empty."""
        tail = self._order.tail
        return None if tail is None else tail.key

    def keys(self) -> list[K]:
        """Snapshot of keys from most to least recently used."""
        return [node.key for node in self._order]

    def items(self) -> list[tuple[K, V]]:
        """Snapshot of (key, value) pairs from most to least recently used."""
        return [(node.key, node.value) for node in self._order]

    def clear(self) -> None:
        """Drop every entry. Cleared entries are not counted as evictions."""
        self._index.clear()
        self._order.clear()

    def stats(self) -> CacheStats:
        return CacheStats(
            capacity=self._capacity,
            size=len(self._index),
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
            removals=self._removals,
        )

    def reset_stats(self) -> None:
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._removals = 0

    def _evict(self) -> None:
        victim = self._order.tail
        if victim is None:
            return
        if self._on_evict is not None:
            self._on_evict(victim.key, victim.value)
        self._order.unlink(victim)
        del self._index[victim.key]
        self._evictions += 1
