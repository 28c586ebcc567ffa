"""Protocol Buffer modules.

auth.Auth 서비스 정의(sso.proto)의 메시지와 서비스 클래스입니다.
"""

from apps.sso.presentation.grpc.protos.sso_pb2 import (
    IsAdminRequest,
    IsAdminResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from apps.sso.presentation.grpc.protos.sso_pb2_grpc import (
    AuthServicer,
    AuthStub,
    add_AuthServicer_to_server,
)

__all__ = [
    # Messages
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    "IsAdminRequest",
    "IsAdminResponse",
    # Service
    "AuthServicer",
    "AuthStub",
    "add_AuthServicer_to_server",
]
