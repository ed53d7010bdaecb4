"""Unit tests for DistanceCache.

Tests cover:
- Hits and misses
- Ordered keys (``(a, b)`` and ``(b, a)`` are distinct entries)
- Strings and lists of the same symbols share an entry
- LRU eviction (silent eviction at max_size)
- Instance isolation (separate DistanceCache instances do not share state)
- Unhashable symbols bypass the cache
- Properties (max_size and curr_size return correct values)
"""

from __future__ import annotations

from nw_similarity.cache import DistanceCache


class TestHitsAndMisses:
    def test_miss_returns_none(self) -> None:
        assert DistanceCache().get("a", "b") is None

    def test_hit_returns_stored_distance(self) -> None:
        cache = DistanceCache()
        cache.put("kitten", "sitting", 3)
        assert cache.get("kitten", "sitting") == 3

    def test_zero_distance_is_a_hit(self) -> None:
        cache = DistanceCache()
        cache.put("", "", 0)
        assert cache.get("", "") == 0

    def test_pairs_are_ordered(self) -> None:
        cache = DistanceCache()
        cache.put("kitten", "sitting", 3)
        assert cache.get("sitting", "kitten") is None

    def test_string_and_list_share_entry(self) -> None:
        cache = DistanceCache()
        cache.put("abc", "abd", 1)
        assert cache.get(["a", "b", "c"], ("a", "b", "d")) == 1


class TestLRUEviction:
    def test_oldest_entry_evicted(self) -> None:
        cache = DistanceCache(max_size=2)
        cache.put("a", "b", 1)
        cache.put("c", "d", 1)
        cache.put("e", "f", 1)
        assert cache.get("a", "b") is None
        assert cache.get("c", "d") == 1
        assert cache.get("e", "f") == 1

    def test_recent_access_protects_entry(self) -> None:
        cache = DistanceCache(max_size=2)
        cache.put("a", "b", 1)
        cache.put("c", "d", 1)
        cache.get("a", "b")  # touch
        cache.put("e", "f", 1)
        assert cache.get("a", "b") == 1
        assert cache.get("c", "d") is None

    def test_size_never_exceeds_max(self) -> None:
        cache = DistanceCache(max_size=3)
        for i in range(10):
            cache.put(str(i), "x", i)
        assert cache.curr_size == 3


class TestInstanceIsolation:
    def test_two_caches_do_not_share_entries(self) -> None:
        first = DistanceCache()
        second = DistanceCache()
        first.put("a", "b", 1)
        assert second.get("a", "b") is None


class TestUnhashableSymbols:
    def test_put_is_noop(self) -> None:
        cache = DistanceCache()
        cache.put([[1]], [[2]], 1)
        assert cache.curr_size == 0

    def test_get_is_miss(self) -> None:
        assert DistanceCache().get([[1]], [[2]]) is None


class TestProperties:
    def test_default_max_size(self) -> None:
        assert DistanceCache().max_size == 512

    def test_custom_max_size(self) -> None:
        assert DistanceCache(max_size=8).max_size == 8

    def test_curr_size_tracks_entries(self) -> None:
        cache = DistanceCache()
        assert cache.curr_size == 0
        cache.put("a", "b", 1)
        cache.put("a", "c", 1)
        assert cache.curr_size == 2
