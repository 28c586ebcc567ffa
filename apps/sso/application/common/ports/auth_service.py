"""AuthService Port - 인증 도메인 서비스 추상 인터페이스.

Clean Architecture:
- Application Layer에서 정의하는 추상 Port
- 자격 증명 검증, 사용자 생성, 권한 조회는 외부 협력자가 구현

게이트웨이는 구현체를 생성하지 않고 생성자로 주입받습니다.
구현체는 여러 RPC 호출이 동시에 사용하므로 동시성에 안전해야 합니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, Sequence


class RequestContext(Protocol):
    """호출별 실행 컨텍스트.

    grpc.aio.ServicerContext가 이 Protocol을 만족합니다.
    취소/데드라인 신호는 컨텍스트를 통해 전달되며
    게이트웨이는 별도의 타임아웃을 만들지 않고 그대로 넘깁니다.
    """

    def time_remaining(self) -> float | None:
        """데드라인까지 남은 시간(초). 데드라인이 없으면 None."""
        ...

    def invocation_metadata(self) -> Sequence[Any] | None:
        ...

    def peer(self) -> str:
        ...


class AuthService(ABC):
    """인증 도메인 서비스 Port.

    사용 예시:
    ```python
    token = await auth_service.login(context, "user@mail.com", "password1", 1)
    user_id = await auth_service.register_new_user(context, "user@mail.com", "password1")
    is_admin = await auth_service.is_admin(context, user_id)
    ```
    """

    @abstractmethod
    async def login(
        self,
        context: RequestContext,
        email: str,
        password: str,
        app_id: int,
    ) -> str:
        """자격 증명을 검증하고 토큰을 발급.

        Returns:
            발급된 토큰

        Raises:
            AuthFailure: 알 수 없는 이메일, 비밀번호 불일치, 알 수 없는 app_id,
                기타 도메인 내부 오류
        """

    @abstractmethod
    async def register_new_user(
        self,
        context: RequestContext,
        email: str,
        password: str,
    ) -> int:
        """새 사용자를 생성.

        Returns:
            생성된 사용자 ID (int64)

        Raises:
            RegistrationFailure: 중복 이메일, 저장소 오류 등
        """

    @abstractmethod
    async def is_admin(self, context: RequestContext, user_id: int) -> bool:
        """사용자의 관리자 여부 조회.

        Raises:
            LookupFailure: 사용자 없음, 저장소 오류 등
        """
