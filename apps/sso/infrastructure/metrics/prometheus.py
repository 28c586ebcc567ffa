"""Prometheus Metrics - SSO gateway 모니터링.

라벨:
- method: RPC 이름 (Login, Register, IsAdmin)
- outcome: 결과 종류 (success, invalid_input, internal, cancelled)
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import CollectorRegistry, Counter, Histogram, start_http_server

from apps.sso.setup.constants import (
    BUCKETS_FAST,
    METRIC_RPC_DURATION,
    METRIC_RPC_OUTCOMES_TOTAL,
)

logger = logging.getLogger(__name__)

REGISTRY = CollectorRegistry(auto_describe=True)

# =============================================================================
# Counter: RPC 결과
# =============================================================================

RPC_OUTCOMES_TOTAL = Counter(
    name=METRIC_RPC_OUTCOMES_TOTAL,
    documentation="Total number of auth RPCs by outcome",
    labelnames=["method", "outcome"],
    registry=REGISTRY,
)

# =============================================================================
# Histogram: RPC 처리 시간
# =============================================================================

RPC_DURATION = Histogram(
    name=METRIC_RPC_DURATION,
    documentation="Time spent handling auth RPCs",
    labelnames=["method"],
    buckets=BUCKETS_FAST,
    registry=REGISTRY,
)


def record_outcome(method: str, outcome: str) -> None:
    """RPC 결과 카운트."""
    RPC_OUTCOMES_TOTAL.labels(method=method, outcome=outcome).inc()


@contextmanager
def track_duration(method: str) -> Generator[None, None, None]:
    """RPC 처리 시간 측정."""
    start = time.perf_counter()
    try:
        yield
    finally:
        RPC_DURATION.labels(method=method).observe(time.perf_counter() - start)


def start_metrics_server(port: int) -> None:
    """메트릭 HTTP 엔드포인트 시작."""
    start_http_server(port, registry=REGISTRY)
    logger.info("Metrics server started", extra={"port": port})
