"""Social Auth Application.

Google, Kakao, Naver OAuth2 로그인 후 자체 세션 토큰을 발급/관리하는 서비스입니다.

Layers:
    - domain/: 순수 비즈니스 로직 (엔티티, 값 객체, 예외)
    - application/: Use Cases (Commands) 와 Ports
    - infrastructure/: OAuth 프로바이더, JWT, Redis, PostgreSQL 어댑터
    - setup/: 설정, 로깅 및 의존성 조립
"""

__version__ = "1.0.0"
