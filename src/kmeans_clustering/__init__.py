"""Lloyd's k-means clustering for points, boxes and numeric tuples."""

from .engine import cluster, cluster_restarts, cluster_with_config
from .results import ClusterResult

__all__ = [
    "cli",
    "config",
    "constants",
    "distance",
    "engine",
    "errors",
    "features",
    "initializer",
    "lloyd",
    "results",
    "samples",
    "stats",
    "visuals",
    "ClusterResult",
    "cluster",
    "cluster_restarts",
    "cluster_with_config",
]
__version__ = "0.1.0"
