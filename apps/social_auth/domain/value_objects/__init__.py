"""Domain Value Objects."""

from apps.social_auth.domain.value_objects.provider_profile import ProviderProfile
from apps.social_auth.domain.value_objects.token_payload import ClaimValue, TokenPayload

__all__ = ["ClaimValue", "ProviderProfile", "TokenPayload"]
