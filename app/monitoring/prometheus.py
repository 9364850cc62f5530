"""
Prometheus monitoring and metrics collection for the sentiment analysis service.

This module provides Prometheus-compatible metrics for monitoring the traffic,
provider behavior and result distribution of the service. It uses the
`prometheus_client` library to define counters, gauges, and histograms.
"""

import time
from typing import Optional

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, Info, generate_latest

from app.core.config import get_settings
from app.ml.lexicon import get_lexicon_info

# --- Prometheus Metric Definitions ---

# General request metrics
REQUEST_COUNT = Counter(
    "sentiment_requests_total",
    "Total number of HTTP requests",
    ["endpoint", "method", "status_code"],
)
REQUEST_DURATION = Histogram(
    "sentiment_request_duration_seconds",
    "Request duration in seconds",
    ["endpoint", "method"],
)
ACTIVE_REQUESTS = Gauge("sentiment_active_requests", "Number of active requests")

# Analysis metrics
ANALYSES_TOTAL = Counter(
    "sentiment_analyses_total",
    "Total number of completed analyses",
    ["provider", "sentiment"],
)
PROVIDER_FALLBACKS = Counter(
    "sentiment_provider_fallbacks_total",
    "Number of analyses that fell back to the rule-based scorer",
    ["provider", "reason"],
)
PROVIDER_DURATION = Histogram(
    "sentiment_provider_duration_seconds",
    "Provider analysis duration",
    ["provider"],
)
CONFIDENCE = Histogram(
    "sentiment_confidence_percent",
    "Distribution of confidence values",
    buckets=(0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100),
)
TEXT_LENGTH = Histogram(
    "sentiment_text_length_characters",
    "Distribution of input text lengths",
    buckets=(10, 50, 100, 250, 500, 1000, 2500, 5000, 10000),
)
STORED_REVIEWS = Counter(
    "sentiment_stored_reviews_total",
    "Number of analyses persisted to the review store",
    ["status"],
)

# Static service information
LEXICON_INFO = Info("sentiment_lexicon", "Lexicon sizes used by the rule-based scorer")


class PrometheusMetrics:
    """Manages the collection and exposure of Prometheus metrics.

    This class centralizes all Prometheus metrics for the application, providing
    a single point of control for updating and serving them. It includes a
    caching mechanism to reduce the overhead of generating the metrics payload
    on every scrape from the Prometheus server.
    """

    def __init__(self):
        """Initializes the metrics collectors and sets static metric values."""
        self.settings = get_settings()
        self._initialize_static_metrics()
        self._metrics_cache: Optional[bytes] = None
        self._metrics_cache_ts: Optional[float] = None

    def _initialize_static_metrics(self):
        """Initializes static metrics that do not change during runtime."""
        LEXICON_INFO.info({key: str(value) for key, value in get_lexicon_info().items()})

    def get_metrics(self) -> bytes:
        """Generates and returns the metrics in Prometheus text format.

        Returns:
            A byte string containing the metrics in Prometheus format.
        """
        now = time.time()
        ttl = self.settings.monitoring.metrics_cache_ttl
        if self._metrics_cache and self._metrics_cache_ts and (now - self._metrics_cache_ts) < ttl:
            return self._metrics_cache

        payload = generate_latest()
        self._metrics_cache = payload
        self._metrics_cache_ts = now
        return payload

    @staticmethod
    def get_metrics_content_type() -> str:
        """Returns the content type for Prometheus metrics."""
        return CONTENT_TYPE_LATEST

    @staticmethod
    def record_request(endpoint: str, method: str, status_code: int):
        """Increments the counter for completed requests."""
        REQUEST_COUNT.labels(endpoint=endpoint, method=method, status_code=str(status_code)).inc()

    @staticmethod
    def record_request_duration(endpoint: str, method: str, duration: float):
        """Records the duration of a request."""
        REQUEST_DURATION.labels(endpoint=endpoint, method=method).observe(duration)

    @staticmethod
    def increment_active_requests():
        ACTIVE_REQUESTS.inc()

    @staticmethod
    def decrement_active_requests():
        ACTIVE_REQUESTS.dec()


_metrics_instance: Optional[PrometheusMetrics] = None


def get_metrics() -> PrometheusMetrics:
    """Retrieves a singleton instance of the `PrometheusMetrics` class."""
    global _metrics_instance
    if _metrics_instance is None:
        _metrics_instance = PrometheusMetrics()
    return _metrics_instance


# Helper functions for updating metrics from other modules
def record_analysis(provider: str, sentiment: str, confidence: int, text_length: int):
    """Records the outcome of a completed analysis."""
    ANALYSES_TOTAL.labels(provider=provider, sentiment=sentiment).inc()
    CONFIDENCE.observe(confidence)
    TEXT_LENGTH.observe(text_length)


def record_provider_duration(provider: str, duration: float):
    """Records how long a provider took to answer."""
    PROVIDER_DURATION.labels(provider=provider).observe(duration)


def record_fallback(provider: str, reason: str):
    """Counts a fallback from `provider` to the rule-based scorer."""
    PROVIDER_FALLBACKS.labels(provider=provider, reason=reason).inc()


def record_review_stored(success: bool):
    """Counts an attempt to persist an analysis."""
    STORED_REVIEWS.labels(status="success" if success else "failure").inc()
