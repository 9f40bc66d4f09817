"""Application Commands (Use Cases).

각 Command는 하나의 Use Case를 나타냅니다.
"""

from apps.social_auth.application.commands.logout import LogoutInteractor
from apps.social_auth.application.commands.oauth_authorize import OAuthAuthorizeInteractor
from apps.social_auth.application.commands.oauth_callback import OAuthCallbackInteractor
from apps.social_auth.application.commands.refresh_tokens import RefreshTokensInteractor

__all__ = [
    "LogoutInteractor",
    "OAuthAuthorizeInteractor",
    "OAuthCallbackInteractor",
    "RefreshTokensInteractor",
]
