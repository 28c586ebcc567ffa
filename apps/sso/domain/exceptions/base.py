"""Domain Exception Base."""


class DomainError(Exception):
    """도메인 예외 베이스 클래스.

    인증 도메인 서비스(외부 협력자)가 발생시키는 모든 실패의 공통 부모입니다.
    게이트웨이는 하위 타입을 구분하지 않습니다.
    """

    def __init__(self, message: str = "Domain error") -> None:
        self.message = message
        super().__init__(message)
