"""
Monitoring and observability components.

This module contains the Prometheus metrics used by the service.
"""

from app.monitoring.prometheus import PrometheusMetrics, get_metrics

__all__ = ["get_metrics", "PrometheusMetrics"]
