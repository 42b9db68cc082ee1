"""
Prometheus metrics for the provisioning console.

Custom metrics for business logic and performance monitoring.
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

# Activation key metrics
activation_key_server_groups_removed_total = Counter(
    "activation_key_server_groups_removed_total",
    "Total server groups removed from activation keys",
    ["org_id"],
)

activation_key_server_groups_added_total = Counter(
    "activation_key_server_groups_added_total",
    "Total server groups added to activation keys",
    ["org_id"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
