"""
Metrics definitions for sqlkv.

This module defines Prometheus metrics for monitoring
KV operations and lazy expiry cleanup.
"""

from prometheus_client import Counter, Histogram

# 카운터 메트릭
kv_operations = Counter(
    "kv_operations_total",
    "Number of KV operations executed",
    ["operation"]
)

kv_get_results = Counter(
    "kv_get_results_total",
    "Outcome of KV get calls",
    ["result"]
)

kv_expired_cleanup_failures = Counter(
    "kv_expired_cleanup_failures_total",
    "Lazy expiry deletes that failed"
)

# 히스토그램 메트릭
kv_operation_seconds = Histogram(
    "kv_operation_duration_seconds",
    "Time spent in KV operations",
    ["operation"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0]
)
