"""Auth DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from apps.social_auth.domain.enums.login_stage import LoginStage
from apps.social_auth.domain.enums.oauth_provider import OAuthProvider
from apps.social_auth.domain.value_objects.provider_profile import ProviderProfile


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeRequest:
    provider: OAuthProvider | str


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeResponse:
    """동의 화면 URL과 함께 생성된 state (state 미지원 프로바이더는 None)."""

    authorization_url: str
    state: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthCallbackRequest:
    """리다이렉트 콜백으로 전달된 인가 코드."""

    provider: OAuthProvider | str
    code: str
    state: str | None = None


@dataclass(frozen=True, slots=True)
class LoginSession:
    """로그인 성공 결과.

    access_token 은 토큰 저장소의 액세스 토큰과,
    refresh_token 은 (user_id, provider) 리프레시 레코드와 같은 값입니다.
    """

    access_token: str
    refresh_token: str
    expires_in: int
    refresh_expires_at: datetime
    profile: ProviderProfile
    stage: LoginStage
    token_type: str = "Bearer"

    @property
    def user_id(self) -> str:
        return self.profile.provider_id

    def __repr__(self) -> str:
        return (
            f"LoginSession(provider={self.profile.provider.value}, "
            f"user_id={self.user_id}, expires_in={self.expires_in})"
        )


@dataclass(frozen=True, slots=True)
class RefreshTokensRequest:
    refresh_token: str


@dataclass(frozen=True, slots=True)
class RefreshTokensResponse:
    access_token: str
    expires_in: int
    token_type: str = "Bearer"

    def __repr__(self) -> str:
        return f"RefreshTokensResponse(expires_in={self.expires_in})"


@dataclass(frozen=True, slots=True)
class LogoutRequest:
    """로그아웃 요청.

    refresh_token 이 주어지면 해당 레코드도 함께 폐기합니다.
    """

    user_id: str
    provider: OAuthProvider | str
    refresh_token: str | None = None
