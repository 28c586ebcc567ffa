"""Pytest configuration for SSO gateway tests."""

from __future__ import annotations

from typing import Any

import grpc
import pytest

from apps.sso.application.common.ports.auth_service import AuthService
from apps.sso.application.gateway import AuthGateway

VALID_EMAIL = "user@mail.com"
VALID_PASSWORD = "longenough1"


# ============================================================================
# Test Doubles
# ============================================================================


class FakeAuthService(AuthService):
    """호출 횟수를 기록하는 AuthService 테스트 더블."""

    def __init__(
        self,
        token: str = "tok-123",
        user_id: int = 42,
        admin: bool = True,
        error: BaseException | None = None,
    ) -> None:
        self.token = token
        self.user_id = user_id
        self.admin = admin
        self.error = error
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def login(self, context, email, password, app_id) -> str:
        self.calls.append(("login", (context, email, password, app_id)))
        if self.error is not None:
            raise self.error
        return self.token

    async def register_new_user(self, context, email, password) -> int:
        self.calls.append(("register_new_user", (context, email, password)))
        if self.error is not None:
            raise self.error
        return self.user_id

    async def is_admin(self, context, user_id) -> bool:
        self.calls.append(("is_admin", (context, user_id)))
        if self.error is not None:
            raise self.error
        return self.admin


class FakeServicerContext:
    """grpc.aio.ServicerContext 테스트 더블.

    abort()는 실제 서버와 같이 grpc.aio.AbortError를 발생시킵니다.
    """

    def __init__(self, method: str = "/auth.Auth/Login", time_remaining: float | None = None):
        self._method = method
        self._time_remaining = time_remaining
        self.code: grpc.StatusCode | None = None
        self.details: str | None = None
        self.trailing_metadata: tuple = ()

    def method(self) -> str:
        return self._method

    def peer(self) -> str:
        return "ipv4:127.0.0.1:50000"

    def time_remaining(self) -> float | None:
        return self._time_remaining

    def invocation_metadata(self) -> tuple:
        return ()

    def set_code(self, code: grpc.StatusCode) -> None:
        self.code = code

    def set_details(self, details: str) -> None:
        self.details = details

    async def abort(self, code: grpc.StatusCode, details: str = "", trailing_metadata=()) -> None:
        self.code = code
        self.details = details
        self.trailing_metadata = tuple(trailing_metadata or ())
        raise grpc.aio.AbortError(details)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def fake_auth_service() -> FakeAuthService:
    return FakeAuthService()


@pytest.fixture
def failing_auth_service() -> FakeAuthService:
    from apps.sso.domain.exceptions import InvalidCredentialsError

    return FakeAuthService(error=InvalidCredentialsError())


@pytest.fixture
def gateway(fake_auth_service: FakeAuthService) -> AuthGateway:
    return AuthGateway(fake_auth_service)


@pytest.fixture
def servicer_context() -> FakeServicerContext:
    return FakeServicerContext()
