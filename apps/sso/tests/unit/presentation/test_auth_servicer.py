"""AuthGatewayServicer 단위 테스트."""

from __future__ import annotations

import grpc
import pytest

from apps.sso.application.gateway import AuthGateway
from apps.sso.infrastructure.metrics import REGISTRY
from apps.sso.presentation.grpc.protos import sso_pb2
from apps.sso.presentation.grpc.servicers import AuthGatewayServicer
from conftest import VALID_EMAIL, VALID_PASSWORD, FakeAuthService, FakeServicerContext


@pytest.fixture
def servicer(gateway: AuthGateway) -> AuthGatewayServicer:
    return AuthGatewayServicer(gateway)


class TestLogin:
    """Login RPC 테스트."""

    @pytest.mark.asyncio
    async def test_returns_token(
        self,
        servicer: AuthGatewayServicer,
        servicer_context: FakeServicerContext,
    ) -> None:
        request = sso_pb2.LoginRequest(email=VALID_EMAIL, password=VALID_PASSWORD, app_id=1)

        response = await servicer.Login(request, servicer_context)

        assert response.token == "tok-123"
        assert servicer_context.code is None

    @pytest.mark.asyncio
    async def test_invalid_request_aborts_with_invalid_argument(
        self,
        servicer: AuthGatewayServicer,
        fake_auth_service: FakeAuthService,
        servicer_context: FakeServicerContext,
    ) -> None:
        request = sso_pb2.LoginRequest(email="not-an-email", password="short", app_id=0)

        with pytest.raises(grpc.aio.AbortError):
            await servicer.Login(request, servicer_context)

        assert servicer_context.code is grpc.StatusCode.INVALID_ARGUMENT
        assert servicer_context.details.startswith("invalid request: ")
        assert fake_auth_service.call_count == 0

    @pytest.mark.asyncio
    async def test_domain_failure_aborts_with_internal(
        self,
        failing_auth_service: FakeAuthService,
        servicer_context: FakeServicerContext,
    ) -> None:
        servicer = AuthGatewayServicer(AuthGateway(failing_auth_service))
        request = sso_pb2.LoginRequest(email=VALID_EMAIL, password=VALID_PASSWORD, app_id=1)

        with pytest.raises(grpc.aio.AbortError):
            await servicer.Login(request, servicer_context)

        assert servicer_context.code is grpc.StatusCode.INTERNAL
        assert servicer_context.details == "internal error"


class TestRegister:
    """Register RPC 테스트."""

    @pytest.mark.asyncio
    async def test_returns_user_id(
        self,
        servicer: AuthGatewayServicer,
        servicer_context: FakeServicerContext,
    ) -> None:
        request = sso_pb2.RegisterRequest(email="a@b.com", password="longenough1")

        response = await servicer.Register(request, servicer_context)

        assert response.user_id == 42


class TestIsAdmin:
    """IsAdmin RPC 테스트."""

    @pytest.mark.asyncio
    async def test_returns_admin_flag(
        self,
        servicer: AuthGatewayServicer,
        servicer_context: FakeServicerContext,
    ) -> None:
        response = await servicer.IsAdmin(sso_pb2.IsAdminRequest(user_id=7), servicer_context)

        assert response.is_admin is True

    @pytest.mark.asyncio
    async def test_domain_failure_aborts_with_internal(
        self,
        failing_auth_service: FakeAuthService,
        servicer_context: FakeServicerContext,
    ) -> None:
        servicer = AuthGatewayServicer(AuthGateway(failing_auth_service))

        with pytest.raises(grpc.aio.AbortError):
            await servicer.IsAdmin(sso_pb2.IsAdminRequest(user_id=7), servicer_context)

        assert servicer_context.code is grpc.StatusCode.INTERNAL


class TestCancelled:
    """취소 결과 테스트."""

    @pytest.mark.asyncio
    async def test_cancelled_outcome_aborts_with_cancelled(self) -> None:
        import asyncio

        context = FakeServicerContext(time_remaining=5.0)
        servicer = AuthGatewayServicer(AuthGateway(FakeAuthService(error=asyncio.CancelledError())))

        with pytest.raises(grpc.aio.AbortError):
            await servicer.IsAdmin(sso_pb2.IsAdminRequest(user_id=7), context)

        assert context.code is grpc.StatusCode.CANCELLED


def _outcome_count(method: str, outcome: str) -> float:
    value = REGISTRY.get_sample_value(
        "sso_rpc_outcomes_total", {"method": method, "outcome": outcome}
    )
    return value or 0.0


def _duration_count(method: str) -> float:
    value = REGISTRY.get_sample_value("sso_rpc_duration_seconds_count", {"method": method})
    return value or 0.0


class TestMetrics:
    """RPC 결과/처리 시간 메트릭 테스트.

    REGISTRY는 프로세스 전역이므로 호출 전후 차이로 검증합니다.
    """

    @pytest.mark.asyncio
    async def test_invalid_request_counts_invalid_input(
        self,
        servicer: AuthGatewayServicer,
        servicer_context: FakeServicerContext,
    ) -> None:
        invalid_before = _outcome_count("Login", "invalid_input")
        success_before = _outcome_count("Login", "success")
        request = sso_pb2.LoginRequest(email="not-an-email", password="short", app_id=0)

        with pytest.raises(grpc.aio.AbortError):
            await servicer.Login(request, servicer_context)

        assert _outcome_count("Login", "invalid_input") == invalid_before + 1
        assert _outcome_count("Login", "success") == success_before

    @pytest.mark.asyncio
    async def test_success_counts_outcome_and_duration(
        self,
        servicer: AuthGatewayServicer,
        servicer_context: FakeServicerContext,
    ) -> None:
        success_before = _outcome_count("Login", "success")
        duration_before = _duration_count("Login")
        request = sso_pb2.LoginRequest(email=VALID_EMAIL, password=VALID_PASSWORD, app_id=1)

        await servicer.Login(request, servicer_context)

        assert _outcome_count("Login", "success") == success_before + 1
        assert _duration_count("Login") == duration_before + 1

    @pytest.mark.asyncio
    async def test_unencodable_payload_counts_internal_not_success(
        self,
        servicer_context: FakeServicerContext,
    ) -> None:
        """int64 범위를 벗어난 user_id 반환 → INTERNAL로 응답하고 internal로 집계"""
        servicer = AuthGatewayServicer(AuthGateway(FakeAuthService(user_id=2**64)))
        success_before = _outcome_count("Register", "success")
        internal_before = _outcome_count("Register", "internal")
        request = sso_pb2.RegisterRequest(email=VALID_EMAIL, password=VALID_PASSWORD)

        with pytest.raises(grpc.aio.AbortError):
            await servicer.Register(request, servicer_context)

        assert servicer_context.code is grpc.StatusCode.INTERNAL
        assert servicer_context.details == "internal error"
        assert _outcome_count("Register", "internal") == internal_before + 1
        assert _outcome_count("Register", "success") == success_before
