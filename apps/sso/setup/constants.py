"""
Service Constants (Single Source of Truth)

정적 상수 정의 - 빌드 타임에 결정되며 환경변수로 변경되지 않음
"""

from __future__ import annotations

# =============================================================================
# Service Identity
# =============================================================================

SERVICE_NAME = "sso-auth-gateway"
SERVICE_VERSION = "1.0.0"

GRPC_SERVICE_NAME = "auth.Auth"

# =============================================================================
# Logging Constants (12-Factor App Compliance)
# =============================================================================

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

# 로그 레코드에서 제외할 기본 속성
EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# 노이즈가 많은 로거 목록 (레벨 조정 대상)
NOISY_LOGGERS = (
    "grpc",
    "grpc._cython",
    "asyncio",
)

# =============================================================================
# PII Masking Configuration (OWASP compliant)
# =============================================================================

SENSITIVE_FIELD_PATTERNS = frozenset({"password", "secret", "token", "api_key", "authorization"})
MASK_PLACEHOLDER = "***REDACTED***"
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

# =============================================================================
# Metrics Constants
# =============================================================================

METRIC_RPC_OUTCOMES_TOTAL = "sso_rpc_outcomes_total"
METRIC_RPC_DURATION = "sso_rpc_duration_seconds"

# gRPC, 캐시 조회 등 빠른 작업용 (10ms ~ 2.5s)
BUCKETS_FAST: tuple[float, ...] = (0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5)
