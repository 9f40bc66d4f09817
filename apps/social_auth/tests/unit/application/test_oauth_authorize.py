"""OAuthAuthorizeInteractor 단위 테스트."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from apps.social_auth.application.commands.oauth_authorize import OAuthAuthorizeInteractor
from apps.social_auth.application.common.dto.auth import OAuthAuthorizeRequest
from apps.social_auth.application.common.exceptions.auth import UnsupportedProviderError


class TestOAuthAuthorizeInteractor:
    """OAuthAuthorizeInteractor 테스트."""

    @pytest.fixture
    def adapter(self) -> MagicMock:
        adapter = MagicMock()
        adapter.supports_state = True
        adapter.build_authorization_url.return_value = "https://accounts.google.com/o/oauth2/v2/auth?..."
        return adapter

    @pytest.fixture
    def providers(self, adapter: MagicMock) -> MagicMock:
        providers = MagicMock()
        providers.get.return_value = adapter
        return providers

    @pytest.fixture
    def interactor(self, providers: MagicMock) -> OAuthAuthorizeInteractor:
        return OAuthAuthorizeInteractor(providers)

    @pytest.mark.asyncio
    async def test_execute_generates_state(
        self, interactor: OAuthAuthorizeInteractor, adapter: MagicMock
    ) -> None:
        """state 지원 프로바이더는 랜덤 state 를 생성한다."""
        # Act
        result = await interactor.execute(OAuthAuthorizeRequest(provider="google"))

        # Assert
        assert result.authorization_url == "https://accounts.google.com/o/oauth2/v2/auth?..."
        assert result.state is not None
        assert len(result.state) > 20
        adapter.build_authorization_url.assert_called_once_with(state=result.state)

    @pytest.mark.asyncio
    async def test_state_differs_between_calls(self, interactor: OAuthAuthorizeInteractor) -> None:
        first = await interactor.execute(OAuthAuthorizeRequest(provider="naver"))
        second = await interactor.execute(OAuthAuthorizeRequest(provider="naver"))

        assert first.state != second.state

    @pytest.mark.asyncio
    async def test_provider_without_state(
        self, interactor: OAuthAuthorizeInteractor, adapter: MagicMock
    ) -> None:
        """카카오는 state 없이 URL을 생성한다."""
        adapter.supports_state = False

        result = await interactor.execute(OAuthAuthorizeRequest(provider="kakao"))

        assert result.state is None
        adapter.build_authorization_url.assert_called_once_with(state=None)

    @pytest.mark.asyncio
    async def test_unsupported_provider(
        self, interactor: OAuthAuthorizeInteractor, providers: MagicMock
    ) -> None:
        providers.get.side_effect = UnsupportedProviderError("github")

        with pytest.raises(UnsupportedProviderError):
            await interactor.execute(OAuthAuthorizeRequest(provider="github"))
