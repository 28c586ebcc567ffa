"""Prometheus Metrics."""

from apps.sso.infrastructure.metrics.prometheus import (
    REGISTRY,
    record_outcome,
    start_metrics_server,
    track_duration,
)

__all__ = [
    "REGISTRY",
    "record_outcome",
    "track_duration",
    "start_metrics_server",
]
