"""alt-lru

In-memory key-value cache that evicts the least recently used entry once a
fixed capacity is reached. get, put and remove all run in O(1).

Usage:
    from alt_lru import LRUCache

    cache = LRUCache(2)
    cache.put(1, "A")
"""

from alt_lru.cache import LRUCache
from alt_lru.config import CacheConfig
from alt_lru.exceptions import CacheError, ConfigurationError, InvalidCapacityError, ScriptError
from alt_lru.factory import create_cache
from alt_lru.models import CacheStats
from alt_lru.synchronized import SynchronizedLRUCache

__all__ = [
    "CacheConfig",
    "CacheError",
    "CacheStats",
    "ConfigurationError",
    "InvalidCapacityError",
    "LRUCache",
    "ScriptError",
    "SynchronizedLRUCache",
    "create_cache",
]
__version__ = "0.1.0"
