"""gRPC Interceptors.

횡단 관심사를 처리하는 인터셉터 모음입니다.
"""

from apps.sso.presentation.grpc.interceptors.error_handler import (
    ErrorHandlerInterceptor,
)
from apps.sso.presentation.grpc.interceptors.logging import LoggingInterceptor

__all__ = [
    "ErrorHandlerInterceptor",
    "LoggingInterceptor",
]
