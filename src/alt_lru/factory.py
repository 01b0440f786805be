"""Cache construction from configuration."""

from __future__ import annotations

from alt_lru.cache import EvictionCallback, LRUCache
from alt_lru.config import CacheConfig
from alt_lru.synchronized import SynchronizedLRUCache


def create_cache(
    config: CacheConfig,
    on_evict: EvictionCallback | None = None,
) -> LRUCache | SynchronizedLRUCache:
    """Build the cache variant selected by ``config``.

    Raises:
        InvalidCapacityError: If ``config.capacity`` is below 1
    """
    if config.thread_safe:
        return SynchronizedLRUCache(config.capacity, on_evict=on_evict)
    return LRUCache(config.capacity, on_evict=on_evict)
