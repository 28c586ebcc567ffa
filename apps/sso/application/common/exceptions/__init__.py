"""Application Exceptions."""

from apps.sso.application.common.exceptions.base import ApplicationError
from apps.sso.application.common.exceptions.validation import (
    FieldViolation,
    RequestValidationError,
)

__all__ = [
    "ApplicationError",
    "FieldViolation",
    "RequestValidationError",
]
