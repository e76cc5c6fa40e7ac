from __future__ import annotations

from prometheus_client import Counter, Histogram

CLUSTERS_BUILT = Counter("hazard_clusters_built_total", "Number of spatial clusters produced")
INVALID_POINTS_SKIPPED = Counter(
    "hazard_invalid_points_skipped_total",
    "Number of invalid coordinates skipped by batch operations",
)
HOTSPOTS_DETECTED = Counter("hazard_hotspots_detected_total", "Number of hotspots that met the minimum size")
CLUSTERING_LATENCY_SECONDS = Histogram(
    "hazard_clustering_latency_seconds",
    "Latency of a clustering call",
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2),
)
