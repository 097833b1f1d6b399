"""
Unit tests for the bounded LRU cache and the memoizing stage wrapper.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from text_metrics.cache import CachedStage, CacheStats, LRUCache


class Counting:
    def __init__(self, fn=str.upper):
        self.fn = fn
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self, key):
        with self._lock:
            self.calls += 1
        return self.fn(key)


class TestLRUCache:
    def test_computes_once_per_key(self):
        cache = LRUCache(4)
        compute = Counting()
        assert cache.get_or_compute("a", compute) == "A"
        assert cache.get_or_compute("a", compute) == "A"
        assert compute.calls == 1

    def test_evicts_least_recently_used(self):
        cache = LRUCache(2)
        compute = Counting()
        cache.get_or_compute("a", compute)
        cache.get_or_compute("b", compute)
        cache.get_or_compute("a", compute)  # a is now most recent
        cache.get_or_compute("c", compute)  # evicts b
        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache
        assert len(cache) == 2

    def test_stats(self):
        cache = LRUCache(1)
        compute = Counting()
        for key in ["a", "a", "b", "a"]:
            cache.get_or_compute(key, compute)
        stats = cache.stats()
        assert stats == CacheStats(capacity=1, size=1, hits=1, misses=3, evictions=2)
        assert stats.hit_rate == pytest.approx(0.25)

    def test_hit_rate_without_lookups(self):
        assert LRUCache(3).stats().hit_rate == 0.0

    def test_eviction_is_counted_not_logged(self, caplog):
        cache = LRUCache(1)
        with caplog.at_level("DEBUG", logger="text_metrics"):
            cache.get_or_compute("a", str.upper)
            cache.get_or_compute("b", str.upper)
        assert cache.stats().evictions == 1
        assert caplog.records == []

    def test_clear(self):
        cache = LRUCache(2)
        cache.get_or_compute("a", str.upper)
        cache.clear()
        assert len(cache) == 0

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_capacity_must_be_positive(self, capacity):
        with pytest.raises(ValueError):
            LRUCache(capacity)

    def test_compute_errors_are_not_cached(self):
        cache = LRUCache(2)

        def boom(key):
            raise RuntimeError(key)

        with pytest.raises(RuntimeError):
            cache.get_or_compute("a", boom)
        assert "a" not in cache
        assert cache.get_or_compute("a", str.upper) == "A"

    def test_concurrent_access_stays_bounded_and_correct(self):
        cache = LRUCache(8)
        compute = Counting()
        keys = [f"k{i % 20}" for i in range(2000)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda k: cache.get_or_compute(k, compute), keys))
        assert results == [k.upper() for k in keys]
        assert len(cache) <= 8
        stats = cache.stats()
        assert stats.hits + stats.misses == len(keys)
        assert compute.calls == stats.misses


class TestCachedStage:
    def test_same_signature_and_result(self):
        compute = Counting(str.lower)
        stage = CachedStage(compute, LRUCache(10))
        assert stage("ABC") == "abc"
        assert stage("ABC") == "abc"
        assert compute.calls == 1

    def test_namespaces_keep_stages_apart_in_one_cache(self):
        cache = LRUCache(10)
        lower = CachedStage(str.lower, cache, namespace="lower")
        upper = CachedStage(str.upper, cache, namespace="upper")
        assert lower("AbC") == "abc"
        assert upper("AbC") == "ABC"
        assert lower("AbC") == "abc"
        assert ("lower", "AbC") in cache
        assert cache.stats().hits == 1

    def test_repr(self):
        stage = CachedStage(str.lower, LRUCache(3))
        assert "LRUCache(capacity=3)" in repr(stage)
