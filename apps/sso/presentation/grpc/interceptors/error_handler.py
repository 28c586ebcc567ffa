"""Error Handler Interceptor.

Servicer 밖으로 빠져나온 예외를 gRPC status code로 변환하는 인터셉터입니다.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

import grpc

from apps.sso.application.outcome import INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)

NOT_SUPPORTED_MESSAGE = "operation not supported"


class ErrorHandlerInterceptor(grpc.aio.ServerInterceptor):
    """예외를 gRPC status로 변환하는 인터셉터.

    통제되지 않은 예외가 프로세스 오류나 세부 정보 노출로 이어지지 않도록
    항상 형식이 갖춰진 status를 반환합니다.

    매핑 규칙:
        - grpc.aio.AbortError → 그대로 전파 (Servicer가 이미 status 설정)
        - NotImplementedError → UNIMPLEMENTED
        - Exception → INTERNAL
    """

    async def intercept_service(
        self,
        continuation: Callable[[grpc.HandlerCallDetails], Any],
        handler_call_details: grpc.HandlerCallDetails,
    ) -> Any:
        """서비스 호출을 인터셉트합니다."""
        handler = await continuation(handler_call_details)

        if handler is None:
            return handler

        if handler.unary_unary:
            return grpc.unary_unary_rpc_method_handler(
                self._wrap_unary_unary(handler.unary_unary),
                request_deserializer=handler.request_deserializer,
                response_serializer=handler.response_serializer,
            )

        return handler

    def _wrap_unary_unary(self, behavior: Callable) -> Callable:
        """Unary-Unary RPC를 래핑합니다."""

        async def wrapper(
            request: Any,
            context: grpc.aio.ServicerContext,
        ) -> Any:
            try:
                response = behavior(request, context)
                if inspect.isawaitable(response):
                    response = await response
                return response
            except grpc.aio.AbortError:
                raise
            except NotImplementedError:
                logger.warning(
                    "Not implemented",
                    extra={"method": context.method()},
                )
                await context.abort(grpc.StatusCode.UNIMPLEMENTED, NOT_SUPPORTED_MESSAGE)
            except Exception:
                logger.exception(
                    "Internal error",
                    extra={"method": context.method()},
                )
                await context.abort(grpc.StatusCode.INTERNAL, INTERNAL_ERROR_MESSAGE)

        return wrapper
