"""Application DTOs (Data Transfer Objects)."""

from apps.social_auth.application.common.dto.auth import (
    LoginSession,
    LogoutRequest,
    OAuthAuthorizeRequest,
    OAuthAuthorizeResponse,
    OAuthCallbackRequest,
    RefreshTokensRequest,
    RefreshTokensResponse,
)

__all__ = [
    "LoginSession",
    "LogoutRequest",
    "OAuthAuthorizeRequest",
    "OAuthAuthorizeResponse",
    "OAuthCallbackRequest",
    "RefreshTokensRequest",
    "RefreshTokensResponse",
]
