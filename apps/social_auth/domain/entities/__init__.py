"""Domain Entities."""

from apps.social_auth.domain.entities.refresh_token import RefreshToken

__all__ = ["RefreshToken"]
