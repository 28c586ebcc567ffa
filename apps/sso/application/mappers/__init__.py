"""Request Mappers."""

from apps.sso.application.mappers.request_mapper import (
    MappingResult,
    map_is_admin_request,
    map_login_request,
    map_register_request,
)

__all__ = [
    "MappingResult",
    "map_login_request",
    "map_register_request",
    "map_is_admin_request",
]
