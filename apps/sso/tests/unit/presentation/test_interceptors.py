"""gRPC Interceptor 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import grpc
import pytest

from apps.sso.presentation.grpc.interceptors import (
    ErrorHandlerInterceptor,
    LoggingInterceptor,
)
from apps.sso.presentation.grpc.protos import sso_pb2_grpc
from conftest import FakeServicerContext


class TestErrorHandlerInterceptor:
    """ErrorHandlerInterceptor 테스트."""

    @pytest.fixture
    def interceptor(self) -> ErrorHandlerInterceptor:
        return ErrorHandlerInterceptor()

    @pytest.mark.asyncio
    async def test_passes_through_response(self, interceptor: ErrorHandlerInterceptor) -> None:
        wrapped = interceptor._wrap_unary_unary(AsyncMock(return_value="ok"))

        assert await wrapped(MagicMock(), FakeServicerContext()) == "ok"

    @pytest.mark.asyncio
    async def test_not_implemented_becomes_unimplemented(
        self,
        interceptor: ErrorHandlerInterceptor,
    ) -> None:
        """미구현 RPC → 프로세스 오류 대신 UNIMPLEMENTED"""
        context = FakeServicerContext(method="/auth.Auth/IsAdmin")
        wrapped = interceptor._wrap_unary_unary(sso_pb2_grpc.AuthServicer().IsAdmin)

        with pytest.raises(grpc.aio.AbortError):
            await wrapped(MagicMock(), context)

        assert context.code is grpc.StatusCode.UNIMPLEMENTED
        assert context.details == "operation not supported"

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_opaque_internal(
        self,
        interceptor: ErrorHandlerInterceptor,
    ) -> None:
        context = FakeServicerContext()
        wrapped = interceptor._wrap_unary_unary(
            AsyncMock(side_effect=RuntimeError("password hash for a@b.com mismatched"))
        )

        with pytest.raises(grpc.aio.AbortError):
            await wrapped(MagicMock(), context)

        assert context.code is grpc.StatusCode.INTERNAL
        assert context.details == "internal error"

    @pytest.mark.asyncio
    async def test_abort_error_is_not_rewritten(
        self,
        interceptor: ErrorHandlerInterceptor,
    ) -> None:
        context = FakeServicerContext()

        async def behavior(request, ctx):
            await ctx.abort(grpc.StatusCode.INVALID_ARGUMENT, "invalid request: x")

        wrapped = interceptor._wrap_unary_unary(behavior)

        with pytest.raises(grpc.aio.AbortError):
            await wrapped(MagicMock(), context)

        assert context.code is grpc.StatusCode.INVALID_ARGUMENT
        assert context.details == "invalid request: x"

    @pytest.mark.asyncio
    async def test_intercept_service_returns_none_for_unknown_method(
        self,
        interceptor: ErrorHandlerInterceptor,
    ) -> None:
        continuation = AsyncMock(return_value=None)

        assert await interceptor.intercept_service(continuation, MagicMock()) is None


class TestLoggingInterceptor:
    """LoggingInterceptor 테스트."""

    @pytest.mark.asyncio
    async def test_logs_completion(self, caplog: pytest.LogCaptureFixture) -> None:
        wrapped = LoggingInterceptor()._wrap_unary_unary(
            AsyncMock(return_value="ok"), "/auth.Auth/Login"
        )

        with caplog.at_level("INFO"):
            result = await wrapped(MagicMock(), FakeServicerContext())

        assert result == "ok"
        record = next(r for r in caplog.records if r.message == "gRPC request completed")
        assert record.method == "/auth.Auth/Login"
        assert record.status == "OK"

    @pytest.mark.asyncio
    async def test_logs_and_reraises_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        wrapped = LoggingInterceptor()._wrap_unary_unary(
            AsyncMock(side_effect=grpc.aio.AbortError("boom")), "/auth.Auth/Login"
        )

        with caplog.at_level("WARNING"), pytest.raises(grpc.aio.AbortError):
            await wrapped(MagicMock(), FakeServicerContext())

        record = next(r for r in caplog.records if r.message == "gRPC request failed")
        assert record.error_type == "AbortError"
