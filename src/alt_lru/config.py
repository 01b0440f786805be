"""Configuration

Cache settings read from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from alt_lru.exceptions import ConfigurationError

DEFAULT_CAPACITY = 128

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class CacheConfig:
    """Cache construction settings.

    Capacity is validated when the cache is built, not here, so a config
    can be inspected before it is used.
    """

    capacity: int = DEFAULT_CAPACITY
    thread_safe: bool = False

    @classmethod
    def from_env(cls) -> CacheConfig:
        """Load settings from ``ALT_LRU_*`` environment variables."""

        def get_int(key: str, default: int) -> int:
            value = os.getenv(f"ALT_LRU_{key}")
            if value is None or value.strip() == "":
                return default
            try:
                return int(value)
            except ValueError as e:
                raise ConfigurationError(f"ALT_LRU_{key} must be an integer, got {value!r}") from e

        return cls(
            capacity=get_int("CAPACITY", DEFAULT_CAPACITY),
            thread_safe=os.getenv("ALT_LRU_THREAD_SAFE", "").strip().lower() in _TRUE_VALUES,
        )
