"""Hotel marker clustering engine."""

from .algorithm import cluster_id, group_by_proximity
from .cache import ClusterCache
from .fingerprint import cache_key
from .policy import filter_visible, should_cluster
from .service import ClusteringEngine, clear_cache, cluster, get_engine

__all__ = [
    "cluster",
    "should_cluster",
    "filter_visible",
    "group_by_proximity",
    "cluster_id",
    "cache_key",
    "ClusterCache",
    "ClusteringEngine",
    "get_engine",
    "clear_cache",
]
