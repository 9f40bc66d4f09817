"""OAuth Provider Registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import httpx

from apps.social_auth.application.common.exceptions.auth import UnsupportedProviderError
from apps.social_auth.application.common.exceptions.config import ConfigurationError
from apps.social_auth.domain.enums.oauth_provider import OAuthProvider
from apps.social_auth.infrastructure.oauth.google import GoogleOAuthProvider
from apps.social_auth.infrastructure.oauth.http import build_http_client
from apps.social_auth.infrastructure.oauth.kakao import KakaoOAuthProvider
from apps.social_auth.infrastructure.oauth.naver import NaverOAuthProvider

if TYPE_CHECKING:
    from apps.social_auth.application.common.ports.oauth_provider import OAuthProviderAdapter
    from apps.social_auth.setup.config import ProviderConfig, Settings

logger = logging.getLogger(__name__)

AdapterFactory = Callable[["ProviderConfig", httpx.AsyncClient], "OAuthProviderAdapter"]

_FACTORIES: dict[OAuthProvider, AdapterFactory] = {
    OAuthProvider.GOOGLE: GoogleOAuthProvider,
    OAuthProvider.KAKAO: KakaoOAuthProvider,
    OAuthProvider.NAVER: NaverOAuthProvider,
}


class ProviderRegistry:
    """OAuth 프로바이더 레지스트리.

    ProviderResolver 구현체. 어댑터는 처음 조회될 때 설정을 검증하고 생성되며,
    모든 어댑터가 하나의 HTTP 클라이언트를 공유합니다.
    """

    def __init__(self, settings: "Settings", client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._client = client or build_http_client(settings)
        self._providers: dict[OAuthProvider, OAuthProviderAdapter] = {}

    def get(self, provider: OAuthProvider | str) -> "OAuthProviderAdapter":
        """프로바이더 어댑터 조회.

        Raises:
            UnsupportedProviderError: 지원하지 않는 프로바이더
            ConfigurationError: 필수 설정값 누락
        """
        key = self._resolve(provider)
        adapter = self._providers.get(key)
        if adapter is None:
            config = self._settings.provider_config(key)
            adapter = _FACTORIES[key](config, self._client)
            self._providers[key] = adapter
        return adapter

    @property
    def available_providers(self) -> list[str]:
        """설정이 완료된 프로바이더 목록."""
        available = []
        for provider in OAuthProvider:
            try:
                self._settings.provider_config(provider)
            except ConfigurationError as e:
                logger.debug(
                    "OAuth provider not configured",
                    extra={"provider": provider.value, "missing": e.missing},
                )
                continue
            available.append(provider.value)
        return available

    async def aclose(self) -> None:
        """공유 HTTP 클라이언트 종료."""
        await self._client.aclose()

    @staticmethod
    def _resolve(provider: OAuthProvider | str) -> OAuthProvider:
        if isinstance(provider, OAuthProvider):
            return provider
        try:
            return OAuthProvider.from_string(provider)
        except ValueError as e:
            raise UnsupportedProviderError(str(provider)) from e
