"""Data models

Snapshot types returned by the cache for monitoring.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field


class CacheStats(BaseModel):
    """Point-in-time counters for a single cache instance."""

    capacity: int = Field(ge=1)
    size: int = Field(default=0, ge=0)
    hits: int = Field(default=0, ge=0)
    misses: int = Field(default=0, ge=0)
    evictions: int = Field(default=0, ge=0)
    removals: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        if lookups == 0:
            return 0.0
        return self.hits / lookups
