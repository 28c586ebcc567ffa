"""Auth Domain Exceptions.

AuthService 구현체가 발생시키는 실패 타입입니다.
게이트웨이는 이 타입들을 모두 동일한 INTERNAL 결과로 변환합니다.
"""

from apps.sso.domain.exceptions.base import DomainError


class AuthFailure(DomainError):
    """로그인 실패."""

    def __init__(self, reason: str = "Authentication failed") -> None:
        super().__init__(reason)


class InvalidCredentialsError(AuthFailure):
    """이메일 또는 비밀번호 불일치."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class InvalidAppIdError(AuthFailure):
    """등록되지 않은 애플리케이션."""

    def __init__(self, app_id: int | None = None) -> None:
        self.app_id = app_id
        message = f"Unknown app_id: {app_id}" if app_id is not None else "Unknown app_id"
        super().__init__(message)


class RegistrationFailure(DomainError):
    """회원가입 실패."""

    def __init__(self, reason: str = "Registration failed") -> None:
        super().__init__(reason)


class UserAlreadyExistsError(RegistrationFailure):
    """이미 가입된 이메일."""

    def __init__(self, email: str | None = None) -> None:
        message = f"User already exists: {email}" if email else "User already exists"
        super().__init__(message)


class LookupFailure(DomainError):
    """권한 조회 실패."""

    def __init__(self, reason: str = "Lookup failed") -> None:
        super().__init__(reason)


class UserNotFoundError(LookupFailure):
    """사용자를 찾을 수 없음."""

    def __init__(self, user_id: int | None = None) -> None:
        message = f"User not found: {user_id}" if user_id is not None else "User not found"
        super().__init__(message)
