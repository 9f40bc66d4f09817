"""Application Exceptions."""

from apps.social_auth.application.common.exceptions.base import ApplicationError
from apps.social_auth.application.common.exceptions.auth import (
    LoginFailedError,
    MissingAuthorizationCodeError,
    OAuthProviderError,
    ProviderExchangeError,
    ProviderProfileError,
    UnsupportedProviderError,
)
from apps.social_auth.application.common.exceptions.config import ConfigurationError
from apps.social_auth.application.common.exceptions.gateway import (
    GatewayError,
    StoreUnavailableError,
)

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "GatewayError",
    "LoginFailedError",
    "MissingAuthorizationCodeError",
    "OAuthProviderError",
    "ProviderExchangeError",
    "ProviderProfileError",
    "StoreUnavailableError",
    "UnsupportedProviderError",
]
