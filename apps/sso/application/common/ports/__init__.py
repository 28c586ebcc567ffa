"""Application Ports (Interfaces).

게이트웨이가 외부 협력자에게 요구하는 인터페이스입니다.
"""

from apps.sso.application.common.ports.auth_service import AuthService, RequestContext

__all__ = ["AuthService", "RequestContext"]
