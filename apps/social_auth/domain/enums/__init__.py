"""Domain Enums."""

from apps.social_auth.domain.enums.login_stage import LoginStage
from apps.social_auth.domain.enums.oauth_provider import OAuthProvider

__all__ = ["LoginStage", "OAuthProvider"]
