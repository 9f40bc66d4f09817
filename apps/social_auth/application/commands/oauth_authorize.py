"""OAuthAuthorize Command.

OAuth 인증 URL 생성 Use Case입니다.
"""

from __future__ import annotations

import secrets

from apps.social_auth.application.common.dto.auth import (
    OAuthAuthorizeRequest,
    OAuthAuthorizeResponse,
)
from apps.social_auth.application.common.ports.oauth_provider import ProviderResolver


class OAuthAuthorizeInteractor:
    """OAuth 인증 URL 생성 Interactor.

    state 를 지원하는 프로바이더(Google, Naver)는 랜덤 state 를 생성해
    URL에 포함하고 응답으로 돌려줍니다. state 의 보관과 대조는 호출자 책임입니다.
    """

    def __init__(self, providers: ProviderResolver) -> None:
        self._providers = providers

    async def execute(self, request: OAuthAuthorizeRequest) -> OAuthAuthorizeResponse:
        """OAuth 인증 URL 생성.

        Raises:
            UnsupportedProviderError: 지원하지 않는 프로바이더
            ConfigurationError: 필수 설정값 누락
        """
        adapter = self._providers.get(request.provider)

        state = secrets.token_urlsafe(32) if adapter.supports_state else None
        authorization_url = adapter.build_authorization_url(state=state)

        return OAuthAuthorizeResponse(authorization_url=authorization_url, state=state)
