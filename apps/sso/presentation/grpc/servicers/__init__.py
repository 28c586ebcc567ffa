"""gRPC Servicers."""

from apps.sso.presentation.grpc.servicers.auth_servicer import AuthGatewayServicer

__all__ = ["AuthGatewayServicer"]
