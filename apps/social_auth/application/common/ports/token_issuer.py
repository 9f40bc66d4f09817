"""TokenIssuer Port.

세션 토큰 발급/검증을 위한 인터페이스입니다.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from apps.social_auth.domain.value_objects.token_payload import ClaimValue


class TokenIssuer(Protocol):
    """세션 토큰 발급자 인터페이스.

    액세스 토큰과 리프레시 토큰은 같은 서명 방식을 공유하고
    클레임과 유효기간만 다릅니다.

    구현체:
        - JwtTokenIssuer (infrastructure/security/)
    """

    @property
    def access_ttl_seconds(self) -> int:
        """액세스 토큰 유효기간 (초)."""
        ...

    def issue_access_token(
        self, subject: str, claims: Mapping[str, ClaimValue] | None = None
    ) -> str:
        """액세스 토큰 발급.

        Raises:
            TokenIssuanceError: 서명 키 설정 오류
        """
        ...

    def issue_refresh_token(self, subject: str) -> str:
        """리프레시 토큰 발급.

        Raises:
            TokenIssuanceError: 서명 키 설정 오류
        """
        ...

    def parse_claims(self, token: str) -> dict[str, Any]:
        """토큰 검증 후 클레임 반환.

        Raises:
            TokenInvalidError: 형식 오류, 서명 불일치
            TokenExpiredError: 만료
        """
        ...

    def validate(self, token: str) -> bool:
        """토큰 유효 여부. 예외를 발생시키지 않습니다."""
        ...
