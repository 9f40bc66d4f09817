"""Application Ports.

인프라 어댑터가 구현하는 Protocol 인터페이스입니다.
"""

from apps.social_auth.application.common.ports.access_token_cache import AccessTokenCache
from apps.social_auth.application.common.ports.flusher import Flusher
from apps.social_auth.application.common.ports.oauth_provider import (
    OAuthProviderAdapter,
    ProviderResolver,
)
from apps.social_auth.application.common.ports.refresh_token_gateway import RefreshTokenGateway
from apps.social_auth.application.common.ports.token_issuer import TokenIssuer
from apps.social_auth.application.common.ports.transaction_manager import TransactionManager

__all__ = [
    "AccessTokenCache",
    "Flusher",
    "OAuthProviderAdapter",
    "ProviderResolver",
    "RefreshTokenGateway",
    "TokenIssuer",
    "TransactionManager",
]
