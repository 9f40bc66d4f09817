"""Kakao OAuth Provider."""

from __future__ import annotations

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


class KakaoOAuthProvider:
    """Kakao OAuth 2.0 어댑터.

    동의 화면 URL에 state를 포함하지 않습니다.
    스코프는 카카오 개발자 콘솔의 동의 항목 설정을 따릅니다.
    """

    provider = OAuthProvider.KAKAO
    supports_state = False
    default_scopes: tuple[str, ...] = ()

    def __init__(self, config: ProviderConfig, client: httpx.AsyncClient) -> None:
        self._config = config
        self._client = client

    def build_authorization_url(self, state: Optional[str] = None) -> str:
        params = {
            "client_id": self._config.client_id,
            "redirect_uri": self._config.redirect_uri,
            "response_type": "code",
        }
        if self.default_scopes:
            params["scope"] = ",".join(self.default_scopes)
        return f"{self._config.authorize_url}?{urlencode(params)}"

    async def exchange_code(self, code: str, state: Optional[str] = None) -> str:
        data = {
            "grant_type": "authorization_code",
            "client_id": self._config.client_id,
            "redirect_uri": self._config.redirect_uri,
            "code": code,
        }
        if self._config.client_secret:
            data["client_secret"] = self._config.client_secret
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

        kakao_account = payload.get("kakao_account") or {}
        if not isinstance(kakao_account, dict):
            raise ProviderProfileError(self.provider.value, "unexpected profile shape: kakao_account")
        profile = kakao_account.get("profile") or {}
        if not isinstance(profile, dict):
            raise ProviderProfileError(self.provider.value, "unexpected profile shape: profile")

        return ProviderProfile(
            provider_id=require_identifier(self.provider, payload.get("id")),
            provider=self.provider,
            email=kakao_account.get("email"),
            display_name=profile.get("nickname"),
            avatar_url=profile.get("profile_image_url"),
        )
