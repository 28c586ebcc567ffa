"""Request Validation Exceptions."""

from __future__ import annotations

from dataclasses import dataclass

from apps.sso.application.common.exceptions.base import ApplicationError


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """단일 필드 검증 위반.

    Attributes:
        field: wire 필드 이름 (email, password, app_id, user_id)
        rule: 위반한 규칙 이름 (required, email, min, gt, int64)
        message: 호출자에게 그대로 노출해도 안전한 설명
    """

    field: str
    rule: str
    message: str


class RequestValidationError(ApplicationError):
    """요청 검증 실패.

    위반 사항 전체를 필드 선언 순서대로 보관합니다.
    도메인 호출 이전에만 발생하며 메시지는 호출자에게 노출해도 안전합니다.
    """

    def __init__(self, violations: tuple[FieldViolation, ...] | list[FieldViolation]) -> None:
        self.violations: tuple[FieldViolation, ...] = tuple(violations)
        super().__init__("; ".join(v.message for v in self.violations))

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(v.field for v in self.violations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestValidationError):
            return NotImplemented
        return self.violations == other.violations

    def __hash__(self) -> int:
        return hash(self.violations)

    def __repr__(self) -> str:
        return f"RequestValidationError(violations={list(self.violations)!r})"
