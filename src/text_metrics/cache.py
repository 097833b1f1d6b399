"""Bounded caches for stage outputs.

Simplification and tokenization can cost more than the comparison itself,
and the same strings are often compared again and again (one query against
many records). A cache in front of a stage chain skips that repeated work.

Caching never changes a result: stages are pure, so a cached value equals
a recomputed one.

The LRU cache is *relaxed*: `compute` runs outside the lock, so two threads
missing on the same key at the same moment may both compute it. Both
produce the same value and the later store wins. Exactly-once computation
per key would need per-key locking on top of this.
"""

from __future__ import annotations
import threading
from abc import ABC, abstractmethod
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Hashable


class BoundedCache(ABC):
    """Key/value store with get-or-compute semantics and a size bound."""

    @abstractmethod
    def get_or_compute(self, key: Hashable, compute: Callable[[Hashable], Any]) -> Any:
        ...


@dataclass(frozen=True)
class CacheStats:
    capacity: int
    size: int
    hits: int
    misses: int
    evictions: int

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        if lookups == 0:
            return 0.0
        return self.hits / lookups


class LRUCache(BoundedCache):
    """Thread-safe least-recently-used cache with a fixed capacity."""

    def __init__(self, capacity: int):
        if int(capacity) < 1:
            raise ValueError(f"cache capacity must be >= 1, got {capacity}")
        self.capacity = int(capacity)
        self._data: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get_or_compute(self, key: Hashable, compute: Callable[[Hashable], Any]) -> Any:
        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)
                self._hits += 1
                return self._data[key]
            self._misses += 1

        value = compute(key)

        with self._lock:
            self._data[key] = value
            self._data.move_to_end(key)
            while len(self._data) > self.capacity:
                self._data.popitem(last=False)
                self._evictions += 1
        return value

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._data

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                capacity=self.capacity,
                size=len(self._data),
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
            )

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self.capacity})"


class CachedStage:
    """Memoizing wrapper: same call signature as `fn`, results kept in `cache`.

    With a `namespace`, entries are keyed `(namespace, value)` so several
    stages can share one cache object without reading each other's values.
    """

    def __init__(self, fn: Callable[[Any], Any], cache: BoundedCache, namespace: Hashable = None):
        self.fn = fn
        self.cache = cache
        self.namespace = namespace

    def __call__(self, value: Any) -> Any:
        if self.namespace is None:
            return self.cache.get_or_compute(value, self.fn)
        return self.cache.get_or_compute((self.namespace, value), lambda key: self.fn(key[1]))

    def __repr__(self) -> str:
        return f"CachedStage({self.fn!r}, {self.cache!r})"
