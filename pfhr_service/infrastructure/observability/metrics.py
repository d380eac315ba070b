"""Prometheus metrics for monitoring score distribution and input quality"""

from prometheus_client import Counter, Histogram

# Score metrics
score_counter = Counter(
    "pfhr_scores_total",
    "Total PFHR scores computed",
    ["category"],  # fragile | developing | healthy
)

score_value_histogram = Histogram(
    "pfhr_score_value",
    "Distribution of composite PFHR scores",
    buckets=[10, 20, 33, 40, 50, 66, 75, 90, 100],
)

validation_failures_counter = Counter(
    "pfhr_validation_failures_total",
    "Score requests rejected by input validation",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_score(category: str, score: float) -> None:
    """Record score metrics for monitoring category distribution"""
    score_counter.labels(category=category).inc()
    score_value_histogram.observe(score)
