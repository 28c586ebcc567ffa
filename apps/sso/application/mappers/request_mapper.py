"""Request Mapper.

디코딩된 wire 요청 필드를 검증된 Command로 변환합니다.

규칙:
- 요청별 Pydantic 스키마로 검증하고, ValidationError.errors()를
  FieldViolation 목록으로 바꿈
- 모든 필드를 검사하고 위반 사항을 필드 선언 순서대로 모음 (collect-all)
- 한 필드 안에서는 처음 실패한 규칙만 보고 (비어 있으면 required)
- 도메인 서비스를 호출하지 않음 (순수 게이트)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from apps.sso.application.common.dto.commands import (
    AdminCheckQuery,
    LoginCommand,
    RegisterCommand,
)
from apps.sso.application.common.exceptions.validation import (
    FieldViolation,
    RequestValidationError,
)
from apps.sso.application.common.validation.rules import PASSWORD_MIN_LENGTH, is_present
from apps.sso.application.common.validation.schemas import (
    IsAdminRequestModel,
    LoginRequestModel,
    RegisterRequestModel,
)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class FieldRules:
    """필드별 보고 규칙. required가 None이면 빈 값도 형식 규칙으로 보고."""

    rule: str
    message: str
    required: str | None = None


FIELD_RULES: dict[str, FieldRules] = {
    "email": FieldRules(
        rule="email",
        message="email must be a valid email address",
        required="email is required",
    ),
    "password": FieldRules(
        rule="min",
        message=f"password must be at least {PASSWORD_MIN_LENGTH} characters long",
        required="password is required",
    ),
    "app_id": FieldRules(
        rule="gt",
        message="app_id must be greater than 0",
        required="app_id is required",
    ),
    "user_id": FieldRules(rule="int64", message="user_id must be a 64-bit integer"),
}


@dataclass(frozen=True, slots=True)
class MappingResult(Generic[T]):
    """매핑 결과. command와 error 중 정확히 하나만 설정됩니다."""

    command: T | None = None
    error: RequestValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, command: T) -> "MappingResult[T]":
        return cls(command=command)

    @classmethod
    def failure(cls, violations: Sequence[FieldViolation]) -> "MappingResult[T]":
        return cls(error=RequestValidationError(violations))


def _to_violation(error: dict[str, Any]) -> FieldViolation:
    name = str(error["loc"][0])
    rules = FIELD_RULES[name]
    if rules.required is not None and not is_present(error.get("input")):
        return FieldViolation(field=name, rule="required", message=rules.required)
    return FieldViolation(field=name, rule=rules.rule, message=rules.message)


def _violations(exc: ValidationError) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    seen: set[str] = set()
    for error in exc.errors(include_url=False):
        violation = _to_violation(error)
        if violation.field in seen:
            continue
        seen.add(violation.field)
        violations.append(violation)
    return violations


def _validate(schema: type[M], fields: dict[str, Any]) -> tuple[M | None, list[FieldViolation]]:
    try:
        return schema.model_validate(fields), []
    except ValidationError as e:
        return None, _violations(e)


def map_login_request(email: Any, password: Any, app_id: Any) -> MappingResult[LoginCommand]:
    """Login 요청 → LoginCommand."""
    request, violations = _validate(
        LoginRequestModel, {"email": email, "password": password, "app_id": app_id}
    )
    if request is None:
        return MappingResult.failure(violations)
    return MappingResult.success(
        LoginCommand(email=request.email, password=request.password, app_id=request.app_id)
    )


def map_register_request(email: Any, password: Any) -> MappingResult[RegisterCommand]:
    """Register 요청 → RegisterCommand."""
    request, violations = _validate(RegisterRequestModel, {"email": email, "password": password})
    if request is None:
        return MappingResult.failure(violations)
    return MappingResult.success(RegisterCommand(email=request.email, password=request.password))


def map_is_admin_request(user_id: Any) -> MappingResult[AdminCheckQuery]:
    """IsAdmin 요청 → AdminCheckQuery."""
    request, violations = _validate(IsAdminRequestModel, {"user_id": user_id})
    if request is None:
        return MappingResult.failure(violations)
    return MappingResult.success(AdminCheckQuery(user_id=request.user_id))
