"""
Runtime Settings

환경변수 기반 동적 설정 - 배포 환경별로 변경됨
"""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, ImportString
from pydantic_settings import BaseSettings, SettingsConfigDict

from apps.sso.setup.constants import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
)


class Settings(BaseSettings):
    """Runtime configuration for the SSO gRPC gateway."""

    # ==========================================================================
    # 서비스 기본 정보
    # ==========================================================================

    environment: str = DEFAULT_ENVIRONMENT

    # ==========================================================================
    # gRPC 서버 설정
    # ==========================================================================

    grpc_server_port: int = Field(default=44044, ge=0, le=65535)
    grpc_max_workers: int = Field(default=10, ge=1)
    grpc_shutdown_grace_seconds: float = Field(
        default=5.0,
        ge=0,
        description="SIGTERM 수신 후 진행 중인 RPC를 기다리는 시간",
    )

    # ==========================================================================
    # 로깅 설정
    # ==========================================================================

    log_level: str = DEFAULT_LOG_LEVEL
    log_format: Literal["json", "text"] = DEFAULT_LOG_FORMAT

    # ==========================================================================
    # 메트릭 설정
    # ==========================================================================

    metrics_enabled: bool = False
    metrics_port: int = Field(default=9090, ge=0, le=65535)

    # ==========================================================================
    # 도메인 서비스 (외부 협력자)
    # ==========================================================================

    auth_service: ImportString[Any] | None = Field(
        default=None,
        description="AuthService 구현체를 반환하는 팩토리 경로 (예: mypkg.auth:create_auth_service)",
    )

    model_config = SettingsConfigDict(
        env_prefix="SSO_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
