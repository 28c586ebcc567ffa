"""Application DTOs (Data Transfer Objects)."""

from apps.sso.application.common.dto.commands import (
    AdminCheckQuery,
    LoginCommand,
    RegisterCommand,
)

__all__ = [
    "LoginCommand",
    "RegisterCommand",
    "AdminCheckQuery",
]
