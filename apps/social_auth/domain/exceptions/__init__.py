"""Domain Exceptions."""

from apps.social_auth.domain.exceptions.base import DomainError
from apps.social_auth.domain.exceptions.auth import (
    TokenExpiredError,
    TokenInvalidError,
    TokenIssuanceError,
    TokenRevokedError,
)
from apps.social_auth.domain.exceptions.validation import ValidationError

__all__ = [
    "DomainError",
    "TokenExpiredError",
    "TokenInvalidError",
    "TokenIssuanceError",
    "TokenRevokedError",
    "ValidationError",
]
