"""Validation Rules."""

from apps.sso.application.common.validation.rules import (
    PASSWORD_MIN_LENGTH,
    is_present,
    is_valid_application_id,
    is_valid_email,
    is_valid_password,
    is_valid_user_id,
)
from apps.sso.application.common.validation.schemas import (
    IsAdminRequestModel,
    LoginRequestModel,
    RegisterRequestModel,
)

__all__ = [
    "PASSWORD_MIN_LENGTH",
    "is_present",
    "is_valid_email",
    "is_valid_password",
    "is_valid_application_id",
    "is_valid_user_id",
    # Schemas
    "LoginRequestModel",
    "RegisterRequestModel",
    "IsAdminRequestModel",
]
