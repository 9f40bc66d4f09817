"""Security Adapters."""

from apps.social_auth.infrastructure.security.jwt_token_issuer import JwtTokenIssuer

__all__ = ["JwtTokenIssuer"]
