"""
Prometheus metrics for the store admin service.

Custom metrics for catalog activity and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Catalog metrics
catalog_mutations_total = Counter(
    "catalog_mutations_total",
    "Total catalog writes",
    ["entity", "action", "outcome"],
)

# Account metrics
auth_attempts_total = Counter(
    "auth_attempts_total",
    "Total registration and login attempts",
    ["action", "outcome"],
)

# Upload metrics
uploads_total = Counter(
    "uploads_total",
    "Total storage operations",
    ["provider", "operation", "outcome"],
)

upload_size_bytes = Histogram(
    "upload_size_bytes",
    "Size of accepted uploads in bytes",
    ["provider"],
    buckets=[10_000, 50_000, 100_000, 250_000, 500_000, 1_048_576],
)

# Cache metrics
cache_hits_total = Counter(
    "cache_hits_total",
    "Total cache hits",
    ["cache_key"],
)

cache_misses_total = Counter(
    "cache_misses_total",
    "Total cache misses",
    ["cache_key"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
