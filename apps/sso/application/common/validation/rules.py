"""Request field validation rules.

도메인 호출 전에 raw 필드 값에 적용되는 순수 함수 모음입니다.
부작용이 없고 결정적이며 단독으로 테스트할 수 있습니다.

필드 타입(Annotated)은 요청 스키마와 공유하며, 각 predicate는
같은 타입에 대한 TypeAdapter 검증 결과를 bool로 돌려줍니다.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import EmailStr, Field, StrictInt, StrictStr, TypeAdapter, ValidationError

PASSWORD_MIN_LENGTH = 8

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# =============================================================================
# 필드 타입
# =============================================================================

Email = EmailStr
Password = Annotated[StrictStr, Field(min_length=PASSWORD_MIN_LENGTH)]
ApplicationId = Annotated[StrictInt, Field(gt=0)]
UserId = Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]

_EMAIL_ADAPTER: TypeAdapter[str] = TypeAdapter(Email)
_PASSWORD_ADAPTER: TypeAdapter[str] = TypeAdapter(Password)
_APPLICATION_ID_ADAPTER: TypeAdapter[int] = TypeAdapter(ApplicationId)
_USER_ID_ADAPTER: TypeAdapter[int] = TypeAdapter(UserId)


def _accepts(adapter: TypeAdapter[Any], value: Any) -> bool:
    try:
        adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def is_present(value: Any) -> bool:
    """값이 비어 있지 않은지 확인 (zero value 거부)."""
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    # bool은 int의 하위 타입이므로 제외
    if isinstance(value, int) and not isinstance(value, bool):
        return value != 0
    return True


def is_valid_email(value: Any) -> bool:
    """비어 있지 않고 이메일 주소 문법(email-validator)에 맞는지 확인."""
    if not isinstance(value, str) or not value:
        return False
    return _accepts(_EMAIL_ADAPTER, value)


def is_valid_password(value: Any) -> bool:
    """비어 있지 않고 PASSWORD_MIN_LENGTH 이상인지 확인.

    상한은 여기서 강제하지 않습니다 (도메인 서비스 책임).
    """
    return _accepts(_PASSWORD_ADAPTER, value)


def is_valid_application_id(value: Any) -> bool:
    """정수이며 0보다 큰지 확인."""
    return _accepts(_APPLICATION_ID_ADAPTER, value)


def is_valid_user_id(value: Any) -> bool:
    """signed 64-bit 범위의 정수인지 확인.

    존재 여부와 범위 의미는 도메인 서비스가 판단합니다.
    """
    return _accepts(_USER_ID_ADAPTER, value)
