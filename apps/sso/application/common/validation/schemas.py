"""요청 검증 스키마

wire 요청별 Pydantic 모델. 필드 선언 순서가 위반 보고 순서입니다.
"""

from pydantic import BaseModel, ConfigDict, Field

from apps.sso.application.common.validation.rules import (
    ApplicationId,
    Email,
    Password,
    UserId,
)

# bool → int, bytes → str 같은 암묵 변환 금지
_REQUEST_CONFIG = ConfigDict(strict=True, frozen=True)


class LoginRequestModel(BaseModel):
    """Login 요청"""

    model_config = _REQUEST_CONFIG

    email: Email = Field(..., description="로그인 이메일")
    password: Password = Field(..., description="비밀번호 (8자 이상)")
    app_id: ApplicationId = Field(..., description="토큰을 발급받을 애플리케이션 ID")


class RegisterRequestModel(BaseModel):
    """Register 요청"""

    model_config = _REQUEST_CONFIG

    email: Email = Field(..., description="가입 이메일")
    password: Password = Field(..., description="비밀번호 (8자 이상)")


class IsAdminRequestModel(BaseModel):
    """IsAdmin 요청"""

    model_config = _REQUEST_CONFIG

    user_id: UserId = Field(..., description="조회할 사용자 ID (int64)")
