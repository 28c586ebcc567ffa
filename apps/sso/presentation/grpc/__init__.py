"""gRPC presentation layer for the SSO Auth service.

폴더 구조:
    - protos/: auth.Auth 서비스 정의와 메시지 (sso.proto)
    - servicers/: gRPC servicer (thin adapter)
    - interceptors/: 횡단 관심사 (로깅, 에러 핸들링)
    - status.py: Outcome → gRPC status 변환
    - server.py: gRPC 서버 부팅 코드
"""
