"""Auth Gateway Handlers.

RPC 한 건당 한 번 실행되는 단일 패스 상태 머신입니다.

상태:
    Received → Validating → (Rejected | Invoking) → (Succeeded | Failed) → Responded

- Rejected: 검증 실패, INVALID_INPUT 반환 (도메인 호출 없음)
- Invoking: 검증된 필드와 호출 컨텍스트로 도메인을 정확히 한 번 호출 (재시도 없음)
- Failed: 모든 도메인 실패는 INTERNAL, 취소는 CANCELLED
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

from apps.sso.application.common.exceptions.validation import RequestValidationError
from apps.sso.application.common.ports.auth_service import AuthService, RequestContext
from apps.sso.application.mappers.request_mapper import (
    map_is_admin_request,
    map_login_request,
    map_register_request,
)
from apps.sso.application.outcome import Outcome, OutcomeTranslator
from apps.sso.domain.exceptions.base import DomainError

logger = logging.getLogger(__name__)


class AuthGateway:
    """Login / Register / IsAdmin 게이트웨이.

    호출 간 공유되는 상태는 주입된 AuthService 참조뿐이므로
    동시 호출 사이에 락이 필요하지 않습니다.
    """

    def __init__(self, auth_service: AuthService) -> None:
        self._auth_service = auth_service
        self._translator = OutcomeTranslator()

    async def login(
        self,
        context: RequestContext,
        email: Any,
        password: Any,
        app_id: Any,
    ) -> Outcome:
        """로그인 → 토큰."""
        mapping = map_login_request(email, password, app_id)
        if mapping.error is not None:
            return self._reject("Login", mapping.error)

        command = mapping.command
        return await self._invoke(
            "Login",
            lambda: self._auth_service.login(
                context, command.email, command.password, command.app_id
            ),
        )

    async def register(self, context: RequestContext, email: Any, password: Any) -> Outcome:
        """회원가입 → 사용자 ID."""
        mapping = map_register_request(email, password)
        if mapping.error is not None:
            return self._reject("Register", mapping.error)

        command = mapping.command
        return await self._invoke(
            "Register",
            lambda: self._auth_service.register_new_user(
                context, command.email, command.password
            ),
        )

    async def is_admin(self, context: RequestContext, user_id: Any) -> Outcome:
        """관리자 여부 조회 → bool."""
        mapping = map_is_admin_request(user_id)
        if mapping.error is not None:
            return self._reject("IsAdmin", mapping.error)

        query = mapping.command
        return await self._invoke(
            "IsAdmin",
            lambda: self._auth_service.is_admin(context, query.user_id),
        )

    def _reject(self, operation: str, error: RequestValidationError) -> Outcome:
        logger.info(
            "Request rejected",
            extra={
                "operation": operation,
                "fields": list(error.fields),
                "rules": [v.rule for v in error.violations],
            },
        )
        return self._translator.translate_rejection(error)

    async def _invoke(
        self,
        operation: str,
        call: Callable[[], Awaitable[Any]],
    ) -> Outcome:
        try:
            payload = await call()
        except asyncio.CancelledError as e:
            # 취소를 CANCELLED 결과로 소비하므로 바깥 asyncio.timeout도 TimeoutError 없이 반환됨
            logger.info("Domain call cancelled", extra={"operation": operation})
            return self._translator.translate_failure(e)
        except DomainError as e:
            logger.warning(
                "Domain call failed",
                extra={
                    "operation": operation,
                    "error_type": type(e).__name__,
                },
            )
            return self._translator.translate_failure(e)
        except Exception as e:
            logger.exception(
                "Unexpected error in domain call",
                extra={"operation": operation},
            )
            return self._translator.translate_failure(e)

        return Outcome.success(payload)
