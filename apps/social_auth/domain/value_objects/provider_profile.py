"""ProviderProfile Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.social_auth.domain.enums.oauth_provider import OAuthProvider
from apps.social_auth.domain.exceptions.validation import ValidationError
from apps.social_auth.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True)
class ProviderProfile(ValueObject):
    """프로바이더에서 조회한 정규화된 사용자 프로필.

    로그인 시도마다 한 번 생성되며 직접 저장되지 않습니다.
    """

    provider_id: str
    provider: OAuthProvider
    email: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    locale: str | None = None

    def __post_init__(self) -> None:
        if not self.provider_id:
            raise ValidationError("provider_id", "must not be empty")

    def to_claims(self) -> dict[str, str]:
        """세션 토큰에 포함할 클레임. 값이 없는 필드는 제외합니다."""
        claims = {
            "provider": self.provider.value,
            "provider_id": self.provider_id,
            "email": self.email,
            "name": self.display_name,
        }
        return {key: value for key, value in claims.items() if value is not None}

    def __repr__(self) -> str:
        return f"ProviderProfile(provider={self.provider.value}, provider_id={self.provider_id})"
