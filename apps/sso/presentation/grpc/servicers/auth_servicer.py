"""Auth gRPC Servicer (Thin Adapter).

요청 메시지에서 필드를 꺼내 AuthGateway에 위임하고,
Outcome을 응답 메시지 또는 gRPC status로 변환합니다.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import grpc
from google.protobuf.message import Message

from apps.sso.application.gateway import AuthGateway
from apps.sso.application.outcome import Outcome
from apps.sso.infrastructure.metrics import record_outcome, track_duration
from apps.sso.presentation.grpc.protos import sso_pb2, sso_pb2_grpc
from apps.sso.presentation.grpc.status import to_rpc_status

logger = logging.getLogger(__name__)


class AuthGatewayServicer(sso_pb2_grpc.AuthServicer):
    """auth.Auth 서비스 구현."""

    def __init__(self, gateway: AuthGateway) -> None:
        self._gateway = gateway

    async def Register(
        self,
        request: sso_pb2.RegisterRequest,
        context: grpc.aio.ServicerContext,
    ) -> sso_pb2.RegisterResponse:
        """회원가입."""
        with track_duration("Register"):
            outcome = await self._gateway.register(context, request.email, request.password)
        return await self._respond(
            "Register",
            outcome,
            context,
            lambda user_id: sso_pb2.RegisterResponse(user_id=user_id),
        )

    async def Login(
        self,
        request: sso_pb2.LoginRequest,
        context: grpc.aio.ServicerContext,
    ) -> sso_pb2.LoginResponse:
        """로그인."""
        with track_duration("Login"):
            outcome = await self._gateway.login(
                context, request.email, request.password, request.app_id
            )
        return await self._respond(
            "Login",
            outcome,
            context,
            lambda token: sso_pb2.LoginResponse(token=token),
        )

    async def IsAdmin(
        self,
        request: sso_pb2.IsAdminRequest,
        context: grpc.aio.ServicerContext,
    ) -> sso_pb2.IsAdminResponse:
        """관리자 여부 조회."""
        with track_duration("IsAdmin"):
            outcome = await self._gateway.is_admin(context, request.user_id)
        return await self._respond(
            "IsAdmin",
            outcome,
            context,
            lambda is_admin: sso_pb2.IsAdminResponse(is_admin=is_admin),
        )

    async def _respond(
        self,
        method: str,
        outcome: Outcome,
        context: grpc.aio.ServicerContext,
        build_response: Callable[[Any], Message],
    ) -> Message:
        if outcome.is_success:
            try:
                response = build_response(outcome.payload)
            except (TypeError, ValueError):
                # 도메인 반환값이 응답 필드 타입/범위에 맞지 않음
                logger.exception("Invalid domain payload", extra={"method": method})
                outcome = Outcome.internal()
            else:
                record_outcome(method, outcome.kind.value)
                return response

        record_outcome(method, outcome.kind.value)
        status = to_rpc_status(outcome, context.time_remaining())
        logger.debug(
            "Aborting RPC",
            extra={"method": method, "outcome": outcome.kind.value, "code": status.code.name},
        )
        await context.abort(status.code, status.details, status.trailing_metadata)
