"""Google OAuth Provider."""

from __future__ import annotations

import secrets
from typing import Optional
from urllib.parse import urlencode

import httpx

from apps.social_auth.domain.enums.oauth_provider import OAuthProvider
from apps.social_auth.domain.value_objects.provider_profile import ProviderProfile
from apps.social_auth.infrastructure.oauth.http import (
    request_access_token,
    request_user_info,
    require_identifier,
)
from apps.social_auth.setup.config import ProviderConfig


class GoogleOAuthProvider:
    """Google OAuth 2.0 어댑터.

    오프라인 접근(access_type=offline)과 매 로그인 동의(prompt=consent)를 요청합니다.
    """

    provider = OAuthProvider.GOOGLE
    supports_state = True
    default_scopes: tuple[str, ...] = ("profile", "email")

    def __init__(self, config: ProviderConfig, client: httpx.AsyncClient) -> None:
        self._config = config
        self._client = client

    def build_authorization_url(self, state: Optional[str] = None) -> str:
        params = {
            "client_id": self._config.client_id,
            "redirect_uri": self._config.redirect_uri,
            "response_type": "code",
            "scope": " ".join(self.default_scopes),
            "state": state or secrets.token_urlsafe(32),
            "access_type": "offline",
            "prompt": "consent",
        }
        return f"{self._config.authorize_url}?{urlencode(params)}"

    async def exchange_code(self, code: str, state: Optional[str] = None) -> str:
        data = {
            "grant_type": "authorization_code",
            "client_id": self._config.client_id,
            "client_secret": self._config.client_secret or "",
            "redirect_uri": self._config.redirect_uri,
            "code": code,
        }
        return await request_access_token(
            self._client, provider=self.provider, url=self._config.token_url, data=data
        )

    async def fetch_profile(self, access_token: str) -> ProviderProfile:
        payload = await request_user_info(
            self._client,
            provider=self.provider,
            url=self._config.user_info_url,
            access_token=access_token,
        )
        return ProviderProfile(
            provider_id=require_identifier(self.provider, payload.get("id")),
            provider=self.provider,
            email=payload.get("email"),
            display_name=payload.get("name"),
            avatar_url=payload.get("picture"),
            locale=payload.get("locale"),
        )
