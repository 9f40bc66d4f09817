"""Naver OAuth Provider."""

from __future__ import annotations

import secrets
from typing import Optional
from urllib.parse import urlencode

import httpx

from apps.social_auth.application.common.exceptions.auth import ProviderProfileError
from apps.social_auth.domain.enums.oauth_provider import OAuthProvider
from apps.social_auth.domain.value_objects.provider_profile import ProviderProfile
from apps.social_auth.infrastructure.oauth.http import (
    request_access_token,
    request_user_info,
    require_identifier,
)
from apps.social_auth.setup.config import ProviderConfig

NAVER_SUCCESS_RESULT_CODE = "00"


class NaverOAuthProvider:
    """Naver OAuth 2.0 어댑터.

    토큰 교환 시에도 state를 전달하며, PKCE는 지원하지 않습니다.
    """

    provider = OAuthProvider.NAVER
    supports_state = True
    default_scopes: tuple[str, ...] = ()

    def __init__(self, config: ProviderConfig, client: httpx.AsyncClient) -> None:
        self._config = config
        self._client = client

    def build_authorization_url(self, state: Optional[str] = None) -> str:
        params = {
            "response_type": "code",
            "client_id": self._config.client_id,
            "redirect_uri": self._config.redirect_uri,
            "state": state or secrets.token_urlsafe(32),
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
        if state:
            data["state"] = state
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

        result_code = payload.get("resultcode")
        if result_code is not None and result_code != NAVER_SUCCESS_RESULT_CODE:
            raise ProviderProfileError(
                self.provider.value, f"{result_code} {payload.get('message') or ''}".strip()
            )

        response = payload.get("response") or {}
        if not isinstance(response, dict):
            raise ProviderProfileError(self.provider.value, "unexpected profile shape: response")
        return ProviderProfile(
            provider_id=require_identifier(self.provider, response.get("id")),
            provider=self.provider,
            email=response.get("email"),
            display_name=response.get("nickname") or response.get("name"),
            avatar_url=response.get("profile_image"),
        )
