"""Validated Commands.

Request Mapper가 검증을 통과한 요청만으로 생성하는 호출 단위 DTO입니다.
영속화되지 않으며 호출이 끝나면 버려집니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class LoginCommand:
    """로그인 Command."""

    email: str
    password: str = field(repr=False)
    app_id: int


@dataclass(frozen=True, slots=True)
class RegisterCommand:
    """회원가입 Command."""

    email: str
    password: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class AdminCheckQuery:
    """관리자 여부 조회 Query."""

    user_id: int
