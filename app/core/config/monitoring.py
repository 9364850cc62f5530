"""Monitoring, metrics and logging configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings


class MonitoringConfig(BaseSettings):
    """Monitoring, metrics and logging configuration.

    Attributes:
        enable_metrics: Enable metrics collection and the `/metrics` endpoint.
        log_level: Logging level.
        log_format: `json` for machine-readable logs, `console` for local development.
        metrics_cache_ttl: Seconds to cache generated Prometheus metrics.
        service_name: Service name attached to every log entry.
    """

    enable_metrics: bool = Field(
        default=True,
        description="Enable metrics collection",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="json",
        description="Log renderer (json or console)",
        pattern=r"^(json|console)$",
    )
    metrics_cache_ttl: int = Field(
        default=5,
        description="Seconds to cache generated Prometheus metrics",
        ge=1,
        le=300,
    )
    service_name: str = Field(
        default="sentiment-analysis",
        description="Service name attached to log entries",
    )

    class Config:
        """Pydantic configuration."""

        env_prefix = "SENTIMENT_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
