"""Outcome / Outcome Translator.

도메인 결과를 호출자에게 노출되는 결과 종류로 축약합니다.

결과 종류:
- SUCCESS: 작업별 payload (토큰, 사용자 ID, 관리자 여부)
- INVALID_INPUT: 도메인 호출 전 검증 실패 (메시지 노출 안전)
- INTERNAL: 도메인 호출 후 모든 실패 (세부 정보 숨김)
- CANCELLED: 도메인 호출 중 호출 컨텍스트 취소

"이메일 없음"과 "비밀번호 불일치"는 호출자 입장에서 구분할 수 없어야 하므로
모든 도메인 실패는 동일한 INTERNAL 결과가 됩니다.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any

from apps.sso.application.common.exceptions.validation import (
    FieldViolation,
    RequestValidationError,
)

INTERNAL_ERROR_MESSAGE = "internal error"
CANCELLED_MESSAGE = "request cancelled"


class OutcomeKind(str, Enum):
    """호출 결과 종류."""

    SUCCESS = "success"
    INVALID_INPUT = "invalid_input"
    INTERNAL = "internal"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class Outcome:
    """Tagged result. kind 하나만 활성화됩니다."""

    kind: OutcomeKind
    payload: Any = None
    error: RequestValidationError | None = None

    @classmethod
    def success(cls, payload: Any) -> "Outcome":
        return cls(kind=OutcomeKind.SUCCESS, payload=payload)

    @classmethod
    def invalid_input(cls, error: RequestValidationError) -> "Outcome":
        return cls(kind=OutcomeKind.INVALID_INPUT, error=error)

    @classmethod
    def internal(cls) -> "Outcome":
        return cls(kind=OutcomeKind.INTERNAL)

    @classmethod
    def cancelled(cls) -> "Outcome":
        return cls(kind=OutcomeKind.CANCELLED)

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def message(self) -> str:
        """호출자에게 노출되는 메시지."""
        if self.kind is OutcomeKind.INVALID_INPUT and self.error is not None:
            return f"invalid request: {self.error.message}"
        if self.kind is OutcomeKind.INTERNAL:
            return INTERNAL_ERROR_MESSAGE
        if self.kind is OutcomeKind.CANCELLED:
            return CANCELLED_MESSAGE
        return ""

    @property
    def violations(self) -> tuple[FieldViolation, ...]:
        return self.error.violations if self.error is not None else ()


class OutcomeTranslator:
    """도메인 실패 → Outcome 변환기."""

    @staticmethod
    def translate_failure(exc: BaseException) -> Outcome:
        """도메인 호출 이후의 예외를 Outcome으로 변환.

        취소만 별도로 구분하고 나머지는 예외 타입, 메시지와 무관하게
        INTERNAL로 평탄화합니다.
        """
        if isinstance(exc, asyncio.CancelledError):
            return Outcome.cancelled()
        return Outcome.internal()

    @staticmethod
    def translate_rejection(error: RequestValidationError) -> Outcome:
        return Outcome.invalid_input(error)
