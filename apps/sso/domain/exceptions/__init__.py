"""Domain Exceptions."""

from apps.sso.domain.exceptions.auth import (
    AuthFailure,
    InvalidAppIdError,
    InvalidCredentialsError,
    LookupFailure,
    RegistrationFailure,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from apps.sso.domain.exceptions.base import DomainError

__all__ = [
    "DomainError",
    "AuthFailure",
    "InvalidCredentialsError",
    "InvalidAppIdError",
    "RegistrationFailure",
    "UserAlreadyExistsError",
    "LookupFailure",
    "UserNotFoundError",
]
