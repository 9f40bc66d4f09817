"""OAuth Provider Ports.

프로바이더(Google, Kakao, Naver) 어댑터가 공통으로 노출하는 인터페이스입니다.
상속이 아닌 구조적 타이핑(Protocol)으로 정의합니다.
"""

from typing import Protocol

from apps.social_auth.domain.enums.oauth_provider import OAuthProvider
from apps.social_auth.domain.value_objects.provider_profile import ProviderProfile


class OAuthProviderAdapter(Protocol):
    """OAuth 프로바이더 어댑터.

    구현체:
        - GoogleOAuthProvider, KakaoOAuthProvider, NaverOAuthProvider (infrastructure/oauth/)
    """

    provider: OAuthProvider
    supports_state: bool
    default_scopes: tuple[str, ...]

    def build_authorization_url(self, state: str | None = None) -> str:
        """동의 화면 URL 생성."""
        ...

    async def exchange_code(self, code: str, state: str | None = None) -> str:
        """인가 코드를 프로바이더 액세스 토큰으로 교환.

        Raises:
            ProviderExchangeError: 교환 실패
        """
        ...

    async def fetch_profile(self, access_token: str) -> ProviderProfile:
        """프로바이더 액세스 토큰으로 사용자 프로필 조회.

        Raises:
            ProviderProfileError: 조회 실패 또는 식별자 누락
        """
        ...


class ProviderResolver(Protocol):
    """프로바이더 이름으로 어댑터를 찾는 인터페이스.

    구현체:
        - ProviderRegistry (infrastructure/oauth/)
    """

    def get(self, provider: OAuthProvider | str) -> OAuthProviderAdapter:
        """어댑터 조회.

        Raises:
            UnsupportedProviderError: 지원하지 않는 프로바이더
            ConfigurationError: 필수 설정값 누락
        """
        ...
