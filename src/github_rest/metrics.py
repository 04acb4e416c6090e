"""
Prometheus metrics definitions for the GitHub REST client.

Defines Counter, Gauge and Histogram metrics for outbound API traffic,
rate-limit budget and error classification. Naming: snake_case with a
github_rest_ prefix.
"""

from prometheus_client import Counter, Gauge, Histogram

# ==============================================================================
# COUNTERS - Monotonically increasing values
# ==============================================================================

requests_total = Counter(
    "github_rest_requests_total",
    "Total GitHub REST API requests sent",
    ["method", "status_class"],
    # status_class: 2xx, 3xx, 4xx, 5xx, transport_error
)

errors_total = Counter(
    "github_rest_errors_total",
    "Total errors surfaced to callers",
    ["kind"],
    # kind: validation, transport, api, rate_limit, abuse_rate_limit,
    #       two_factor, decode
)

# ==============================================================================
# GAUGES - Point-in-time values
# ==============================================================================

rate_limit_remaining = Gauge(
    "github_rest_rate_limit_remaining",
    "Remaining request budget reported by the last response",
    ["resource"],
    # resource: core, search, graphql, ... (X-RateLimit-Resource header)
)

# ==============================================================================
# HISTOGRAMS - Distributions
# ==============================================================================

request_duration_seconds = Histogram(
    "github_rest_request_duration_seconds",
    "Round-trip duration of GitHub REST API requests",
    ["method"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)


def status_class(status_code: int) -> str:
    """Collapse an HTTP status code into its class label (e.g. 404 -> "4xx")."""
    return f"{status_code // 100}xx"
