"""OAuth Provider Implementations."""

from apps.social_auth.infrastructure.oauth.google import GoogleOAuthProvider
from apps.social_auth.infrastructure.oauth.kakao import KakaoOAuthProvider
from apps.social_auth.infrastructure.oauth.naver import NaverOAuthProvider
from apps.social_auth.infrastructure.oauth.registry import ProviderRegistry

__all__ = [
    "GoogleOAuthProvider",
    "KakaoOAuthProvider",
    "NaverOAuthProvider",
    "ProviderRegistry",
]
