"""Bounded memoization of clustering results."""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable

from ...errors import InvalidArgumentError
from ...models.domain import ClusteringResult

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 50


@dataclass(slots=True)
class CacheStats:
    hits: int
    misses: int
    evictions: int
    size: int
    capacity: int


class ClusterCache:
    """FIFO cache of clustering results keyed by input fingerprint.

    When full, the oldest inserted entry is dropped before a new one is stored.
    Lookups do not refresh an entry's position and entries never expire on
    their own; ``clear()`` empties the cache when the dataset is replaced.
    Instances are not safe for concurrent use.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise InvalidArgumentError(f"cache capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[str, ClusteringResult] = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get_or_compute(self, key: str, compute_fn: Callable[[], ClusteringResult]) -> ClusteringResult:
        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            logger.debug(f"Cluster cache hit ({len(self._entries)}/{self.capacity})")
            return cached

        self.misses += 1
        result = compute_fn()
        if key not in self._entries and len(self._entries) >= self.capacity:
            evicted_key, _ = self._entries.popitem(last=False)
            self.evictions += 1
            logger.debug(f"Cluster cache full, evicted oldest entry ({len(evicted_key)} char key)")
        self._entries[key] = result
        logger.debug(f"Cluster cache miss, stored entry ({len(self._entries)}/{self.capacity})")
        return result

    def clear(self) -> None:
        count = len(self._entries)
        self._entries.clear()
        logger.debug(f"Cluster cache cleared ({count} entries dropped)")

    def stats(self) -> CacheStats:
        return CacheStats(
            hits=self.hits,
            misses=self.misses,
            evictions=self.evictions,
            size=len(self._entries),
            capacity=self.capacity,
        )
