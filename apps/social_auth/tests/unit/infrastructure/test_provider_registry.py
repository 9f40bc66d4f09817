"""ProviderRegistry 단위 테스트."""

from __future__ import annotations

import httpx
import pytest

from apps.social_auth.application.common.exceptions.auth import UnsupportedProviderError
from apps.social_auth.application.common.exceptions.config import ConfigurationError
from apps.social_auth.domain.enums.oauth_provider import OAuthProvider
from apps.social_auth.infrastructure.oauth import (
    GoogleOAuthProvider,
    KakaoOAuthProvider,
    ProviderRegistry,
)
from apps.social_auth.setup.config import Settings


class TestProviderRegistry:
    """ProviderRegistry 테스트."""

    @pytest.fixture
    def requests(self) -> list[httpx.Request]:
        return []

    @pytest.fixture
    def registry(self, requests: list[httpx.Request]) -> ProviderRegistry:
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(500)

        settings = Settings(
            google_client_id="gid",
            google_client_secret="gsecret",
            google_redirect_uri="http://localhost/callback/google",
            kakao_client_id="kid",
            kakao_client_secret=None,
            kakao_redirect_uri="http://localhost/callback/kakao",
            naver_client_id=None,
            naver_client_secret=None,
            naver_redirect_uri=None,
        )
        return ProviderRegistry(settings, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    def test_get_by_name_and_enum(self, registry: ProviderRegistry) -> None:
        assert isinstance(registry.get("google"), GoogleOAuthProvider)
        assert isinstance(registry.get(OAuthProvider.KAKAO), KakaoOAuthProvider)

    def test_adapters_are_cached(self, registry: ProviderRegistry) -> None:
        assert registry.get("GOOGLE") is registry.get(OAuthProvider.GOOGLE)

    def test_unknown_provider(self, registry: ProviderRegistry) -> None:
        with pytest.raises(UnsupportedProviderError) as exc_info:
            registry.get("github")
        assert exc_info.value.provider == "github"

    def test_missing_configuration_fails_before_network(
        self, registry: ProviderRegistry, requests: list[httpx.Request]
    ) -> None:
        """설정 누락은 네트워크 호출 전에 보고된다."""
        with pytest.raises(ConfigurationError) as exc_info:
            registry.get("naver")

        assert "SOCIAL_AUTH_NAVER_CLIENT_ID" in exc_info.value.missing
        assert "SOCIAL_AUTH_NAVER_CLIENT_SECRET" in exc_info.value.missing
        assert requests == []

    def test_available_providers(self, registry: ProviderRegistry) -> None:
        assert registry.available_providers == ["google", "kakao"]

    @pytest.mark.asyncio
    async def test_aclose_closes_shared_client(self, registry: ProviderRegistry) -> None:
        await registry.aclose()

        assert registry._client.is_closed
