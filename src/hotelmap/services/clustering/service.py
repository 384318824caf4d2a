"""Entry points consumers use to cluster hotels for a viewport."""

from __future__ import annotations

import functools
import logging
import threading
from typing import Optional, Sequence

from ...models.domain import ClusterConfig, ClusteringResult, Hotel, Viewport
from .algorithm import group_by_proximity
from .cache import CacheStats, ClusterCache
from .fingerprint import cache_key
from .policy import should_cluster

logger = logging.getLogger(__name__)


def cluster(
    points: Sequence[Hotel],
    viewport: Viewport,
    config: ClusterConfig,
    cache: Optional[ClusterCache] = None,
) -> ClusteringResult:
    """Cluster ``points`` for ``viewport``.

    Outside the configured zoom range every hotel comes back unclustered, which
    is how the map renders them anyway. When ``cache`` is given, results are
    memoized on the hotel set, zoom bucket and configuration.
    """

    if not should_cluster(viewport.zoom, config):
        return ClusteringResult(clusters=(), unclustered=tuple(points))

    def compute() -> ClusteringResult:
        return group_by_proximity(points, viewport.zoom, config)

    if cache is None:
        return compute()
    return cache.get_or_compute(cache_key(points, viewport.zoom, config), compute)


class ClusteringEngine:
    """Clustering entry point bound to a default config and an owned cache."""

    def __init__(self, config: Optional[ClusterConfig] = None, cache: Optional[ClusterCache] = None) -> None:
        self.config = config or ClusterConfig()
        self.cache = cache if cache is not None else ClusterCache()
        self._lock = threading.Lock()

    def should_cluster(self, zoom: float, config: Optional[ClusterConfig] = None) -> bool:
        return should_cluster(zoom, config or self.config)

    def cluster(
        self,
        points: Sequence[Hotel],
        viewport: Viewport,
        config: Optional[ClusterConfig] = None,
    ) -> ClusteringResult:
        with self._lock:
            return cluster(points, viewport, config or self.config, cache=self.cache)

    def clear_cache(self) -> None:
        with self._lock:
            self.cache.clear()
        logger.info("Clustering cache cleared")

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()


@functools.lru_cache(maxsize=1)
def get_engine() -> ClusteringEngine:
    """Application-wide engine configured from settings."""
    from ...config import settings

    return ClusteringEngine(
        config=ClusterConfig.from_settings(settings),
        cache=ClusterCache(capacity=settings.cluster_cache_capacity),
    )


def clear_cache() -> None:
    """Drop every memoized result held by the application-wide engine."""
    get_engine().clear_cache()
