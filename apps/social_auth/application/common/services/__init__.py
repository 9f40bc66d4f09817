"""Application Services."""

from apps.social_auth.application.common.services.token_store import TokenStore

__all__ = ["TokenStore"]
