from __future__ import annotations

from prometheus_client import Counter, Histogram

POSTS_ANALYZED = Counter("hazard_posts_analyzed_total", "Number of posts run through per-post analysis")
CORPUS_BATCHES = Counter("hazard_corpus_batches_total", "Number of corpus-level analytics batches")
ANALYSIS_LATENCY_SECONDS = Histogram(
    "hazard_analysis_latency_seconds",
    "Latency of a text mining call",
    ["operation"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
