"""gRPC server for the SSO Auth gateway.

Usage:
    SSO_AUTH_SERVICE=mypkg.auth:create_auth_service python -m apps.sso.presentation.grpc.server
"""

from __future__ import annotations

import asyncio
import logging
import signal
from concurrent import futures

import grpc

from apps.sso.application.common.ports.auth_service import AuthService
from apps.sso.application.gateway import AuthGateway
from apps.sso.infrastructure.metrics import start_metrics_server
from apps.sso.presentation.grpc.interceptors import (
    ErrorHandlerInterceptor,
    LoggingInterceptor,
)
from apps.sso.presentation.grpc.protos import add_AuthServicer_to_server
from apps.sso.presentation.grpc.servicers import AuthGatewayServicer
from apps.sso.setup.config import Settings, get_settings
from apps.sso.setup.logging import setup_logging

logger = logging.getLogger(__name__)


def register(server: grpc.aio.Server, auth_service: AuthService) -> None:
    """기존 gRPC 서버에 auth.Auth 서비스를 등록."""
    add_AuthServicer_to_server(AuthGatewayServicer(AuthGateway(auth_service)), server)


def create_server(auth_service: AuthService, settings: Settings) -> grpc.aio.Server:
    """인터셉터와 Servicer가 등록된 gRPC 서버 생성 (포트 바인딩 제외)."""
    # 먼저 등록된 것이 먼저 실행
    interceptors = [
        LoggingInterceptor(),
        ErrorHandlerInterceptor(),
    ]

    server = grpc.aio.server(
        futures.ThreadPoolExecutor(max_workers=settings.grpc_max_workers),
        interceptors=interceptors,
    )
    register(server, auth_service)
    return server


def load_auth_service(settings: Settings) -> AuthService:
    """설정된 팩토리로 AuthService 구현체 생성.

    Raises:
        RuntimeError: 팩토리가 설정되지 않았거나 AuthService를 반환하지 않은 경우
    """
    if settings.auth_service is None:
        raise RuntimeError("SSO_AUTH_SERVICE is not configured")

    auth_service = settings.auth_service()
    if not isinstance(auth_service, AuthService):
        raise RuntimeError(
            f"SSO_AUTH_SERVICE returned {type(auth_service).__name__}, expected AuthService"
        )
    return auth_service


async def serve() -> None:
    """Start the gRPC server with graceful shutdown support."""
    settings = get_settings()
    setup_logging(settings)

    auth_service = load_auth_service(settings)
    server = create_server(auth_service, settings)

    listen_addr = f"[::]:{settings.grpc_server_port}"
    server.add_insecure_port(listen_addr)

    if settings.metrics_enabled:
        start_metrics_server(settings.metrics_port)

    logger.info(
        "Starting SSO gRPC server",
        extra={
            "address": listen_addr,
            "max_workers": settings.grpc_max_workers,
            "environment": settings.environment,
            "auth_service": type(auth_service).__name__,
        },
    )

    await server.start()

    stop_event = asyncio.Event()

    def handle_signal(sig: signal.Signals) -> None:
        logger.info("Received shutdown signal", extra={"signal": sig.name})
        stop_event.set()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, handle_signal, sig)

    await stop_event.wait()

    logger.info("Stopping gRPC server gracefully")
    await server.stop(grace=settings.grpc_shutdown_grace_seconds)
    logger.info("SSO gRPC server stopped")


if __name__ == "__main__":
    asyncio.run(serve())
