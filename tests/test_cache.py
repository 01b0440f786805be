"""cache.py tests"""

from __future__ import annotations

import pytest

from alt_lru.cache import LRUCache, validate_capacity
from alt_lru.exceptions import CacheError, InvalidCapacityError


class TestConstruction:
    """LRUCache construction tests"""

    @pytest.mark.parametrize("capacity", [0, -1, -100])
    def test_rejects_non_positive_capacity(self, capacity: int) -> None:
        """Capacity below 1 raises InvalidCapacityError"""
        with pytest.raises(InvalidCapacityError) as exc_info:
            LRUCache(capacity)

        assert exc_info.value.capacity == capacity

    @pytest.mark.parametrize("capacity", [1.5, "2", None, True])
    def test_rejects_non_integer_capacity(self, capacity: object) -> None:
        """Non-integer capacities are rejected"""
        with pytest.raises(InvalidCapacityError):
            LRUCache(capacity)  # type: ignore[arg-type]

    def test_invalid_capacity_is_value_error_and_cache_error(self) -> None:
        """InvalidCapacityError can be caught as ValueError or CacheError"""
        with pytest.raises(ValueError):
            LRUCache(0)
        with pytest.raises(CacheError):
            LRUCache(0)

    def test_accessors_on_new_cache(self) -> None:
        """A new cache is empty with the requested capacity"""
        cache: LRUCache[str, int] = LRUCache(5)
        assert cache.capacity == 5
        assert cache.size() == 0
        assert len(cache) == 0
        assert cache.lru_key() is None
        assert repr(cache) == "LRUCache(capacity=5, size=0)"

    def test_validate_capacity_returns_int(self) -> None:
        """validate_capacity returns the capacity as an int"""
        assert validate_capacity(3) == 3


class TestReferenceScenarios:
    """Capacity-2 and capacity-1 reference scenarios"""

    def test_get_refreshes_recency(self, cache: LRUCache[int, str]) -> None:
        """get returns the value and makes the key most recently used"""
        cache.put(1, "A")
        cache.put(2, "B")

        assert cache.get(1) == "A"
        assert cache.keys() == [1, 2]

    def test_insert_at_capacity_evicts_lru(self, cache: LRUCache[int, str], recorder) -> None:
        """A new key at capacity evicts the least recently used key"""
        cache.put(1, "A")
        cache.put(2, "B")
        cache.get(1)

        cache.put(3, "C")

        assert recorder.evicted == [(2, "B")]
        assert cache.items() == [(3, "C"), (1, "A")]
        assert cache.get(2) is None

    def test_overwrite_keeps_size(self, cache: LRUCache[int, str], recorder) -> None:
        """Overwriting an existing key updates the value without changing size"""
        cache.put(1, "A")
        cache.put(3, "C")

        cache.put(1, "Z")

        assert cache.get(1) == "Z"
        assert cache.size() == 2
        assert recorder.evicted == []

    def test_capacity_one_replaces_entry(self) -> None:
        """With capacity 1 every new key replaces the previous one"""
        cache: LRUCache[int, str] = LRUCache(1)
        cache.put(1, "A")
        cache.put(2, "B")

        assert cache.get(1) is None
        assert cache.get(2) == "B"
        assert cache.size() == 1

    def test_capacity_zero_fails(self) -> None:
        """Capacity 0 cannot be constructed"""
        with pytest.raises(InvalidCapacityError):
            LRUCache(0)


class TestGet:
    """get tests"""

    def test_missing_key_returns_default(self, cache: LRUCache[int, str]) -> None:
        """A missing key returns None or the given default"""
        assert cache.get(42) is None
        assert cache.get(42, "fallback") == "fallback"

    def test_missing_key_does_not_change_order(self, cache: LRUCache[int, str]) -> None:
        """A miss leaves the recency order untouched"""
        cache.put(1, "A")
        cache.put(2, "B")

        cache.get(99)

        assert cache.keys() == [2, 1]
        assert cache.lru_key() == 1

    def test_none_value_is_distinguishable_from_missing(self) -> None:
        """A stored None can be told apart from absence via default or membership"""
        cache: LRUCache[str, None] = LRUCache(2)
        cache.put("k", None)
        missing = object()

        assert cache.get("k", missing) is None
        assert cache.get("other", missing) is missing
        assert "k" in cache

    def test_repeated_get_keeps_key_mru(self, cache: LRUCache[int, str]) -> None:
        """Repeated gets of the same key keep it at the head"""
        cache.put(1, "A")
        cache.put(2, "B")

        for _ in range(3):
            cache.get(2)

        assert cache.keys() == [2, 1]
        assert cache.lru_key() == 1


class TestPut:
    """put tests"""

    def test_put_on_head_key_keeps_it_at_head(self, cache: LRUCache[int, str]) -> None:
        """Writing the most recent key again leaves it most recent"""
        cache.put(1, "A")
        cache.put(2, "B")

        cache.put(2, "B2")

        assert cache.keys() == [2, 1]
        assert cache.peek(2) == "B2"

    def test_put_existing_refreshes_recency(self, cache: LRUCache[int, str], recorder) -> None:
        """Overwriting the LRU key saves it from the next eviction"""
        cache.put(1, "A")
        cache.put(2, "B")
        cache.put(1, "A2")

        cache.put(3, "C")

        assert recorder.keys == [2]
        assert 1 in cache

    def test_size_never_exceeds_capacity(self) -> None:
        """Size stays at capacity however many keys are inserted"""
        cache: LRUCache[int, int] = LRUCache(3)
        for i in range(50):
            cache.put(i, i)
            assert cache.size() <= cache.capacity

        assert cache.keys() == [49, 48, 47]

    def test_round_trip(self, cache: LRUCache[int, str]) -> None:
        """put followed by get returns the stored value"""
        cache.put(7, "seven")
        assert cache.get(7) == "seven"


class TestRemove:
    """remove tests"""

    def test_remove_existing(self, cache: LRUCache[int, str]) -> None:
        """Removing a present key returns True and decrements size"""
        cache.put(1, "A")
        cache.put(2, "B")

        assert cache.remove(1) is True
        assert cache.size() == 1
        assert 1 not in cache

    def test_remove_missing(self, cache: LRUCache[int, str]) -> None:
        """Removing a missing key returns False"""
        assert cache.remove(1) is False

    def test_remove_preserves_relative_order(self) -> None:
        """Other entries keep their relative order"""
        cache: LRUCache[str, int] = LRUCache(4)
        for key in ("a", "b", "c", "d"):
            cache.put(key, 0)

        cache.remove("c")

        assert cache.keys() == ["d", "b", "a"]

    def test_remove_does_not_fire_eviction_callback(self, cache: LRUCache[int, str], recorder) -> None:
        """Explicit removal is not an eviction"""
        cache.put(1, "A")
        cache.remove(1)

        assert recorder.evicted == []
        assert cache.stats().evictions == 0
        assert cache.stats().removals == 1

    def test_freed_slot_avoids_eviction(self, cache: LRUCache[int, str], recorder) -> None:
        """A slot freed by remove is reused without evicting"""
        cache.put(1, "A")
        cache.put(2, "B")
        cache.remove(2)

        cache.put(3, "C")

        assert recorder.evicted == []
        assert cache.keys() == [3, 1]


class TestReadOnlyViews:
    """peek, membership and snapshot tests"""

    def test_peek_does_not_promote(self, cache: LRUCache[int, str]) -> None:
        """peek reads the value without refreshing recency"""
        cache.put(1, "A")
        cache.put(2, "B")

        assert cache.peek(1) == "A"
        assert cache.lru_key() == 1
        assert cache.peek(3, "none") == "none"

    def test_contains_does_not_promote(self, cache: LRUCache[int, str]) -> None:
        """Membership checks do not refresh recency"""
        cache.put(1, "A")
        cache.put(2, "B")

        assert 1 in cache
        assert cache.lru_key() == 1

    def test_snapshots_are_copies(self, cache: LRUCache[int, str]) -> None:
        """Mutating a snapshot does not affect the cache"""
        cache.put(1, "A")
        keys = cache.keys()
        keys.append(99)

        assert cache.keys() == [1]

    def test_clear(self, cache: LRUCache[int, str], recorder) -> None:
        """clear empties the cache without counting evictions"""
        cache.put(1, "A")
        cache.put(2, "B")

        cache.clear()

        assert cache.size() == 0
        assert cache.keys() == []
        assert recorder.evicted == []
        cache.put(3, "C")
        assert cache.keys() == [3]


class TestEvictionCallback:
    """on_evict tests"""

    def test_callback_receives_victim(self, cache: LRUCache[int, str], recorder) -> None:
        """The callback gets the evicted key and value"""
        cache.put(1, "A")
        cache.put(2, "B")
        cache.put(3, "C")
        cache.put(4, "D")

        assert recorder.evicted == [(1, "A"), (2, "B")]

    def test_callback_runs_before_removal(self) -> None:
        """The victim is still cached while the callback runs"""
        seen: list[bool] = []
        cache: LRUCache[int, str] = LRUCache(1, on_evict=lambda key, _: seen.append(key in cache))
        cache.put(1, "A")
        cache.put(2, "B")

        assert seen == [True]

    def test_failing_callback_leaves_cache_unchanged(self) -> None:
        """If the callback raises, the put is abandoned"""

        def boom(key: int, value: str) -> None:
            raise RuntimeError("hook failed")

        cache: LRUCache[int, str] = LRUCache(2, on_evict=boom)
        cache.put(1, "A")
        cache.put(2, "B")

        with pytest.raises(RuntimeError, match="hook failed"):
            cache.put(3, "C")

        assert cache.items() == [(2, "B"), (1, "A")]
        assert cache.stats().evictions == 0


class TestStats:
    """stats tests"""

    def test_counts_hits_misses_evictions(self, cache: LRUCache[int, str]) -> None:
        """stats reflects lookups and evictions"""
        cache.put(1, "A")
        cache.get(1)
        cache.get(2)
        cache.put(2, "B")
        cache.put(3, "C")

        stats = cache.stats()

        assert stats.capacity == 2
        assert stats.size == 2
        assert stats.hits == 1
        assert stats.misses == 1
        assert stats.evictions == 1
        assert stats.hit_rate == 0.5

    def test_peek_is_not_counted(self, cache: LRUCache[int, str]) -> None:
        """peek does not count as a hit or a miss"""
        cache.put(1, "A")
        cache.peek(1)
        cache.peek(2)

        assert cache.stats().hits == 0
        assert cache.stats().misses == 0

    def test_reset_stats(self, cache: LRUCache[int, str]) -> None:
        """reset_stats zeroes the counters but keeps entries"""
        cache.put(1, "A")
        cache.get(1)

        cache.reset_stats()

        stats = cache.stats()
        assert stats.hits == 0
        assert stats.size == 1
