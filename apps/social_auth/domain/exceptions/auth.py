"""Auth Domain Exceptions."""

from apps.social_auth.domain.exceptions.base import DomainError


class TokenInvalidError(DomainError):
    """유효하지 않은 토큰 (형식 오류, 서명 불일치, 만료)."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(TokenInvalidError):
    """만료된 토큰."""

    def __init__(self) -> None:
        super().__init__("Token has expired")


class TokenRevokedError(TokenInvalidError):
    """폐기되었거나 저장소에 없는 토큰."""

    def __init__(self, reason: str = "Token has been revoked") -> None:
        super().__init__(reason)


class TokenIssuanceError(DomainError):
    """토큰 서명 실패 (서명 키 설정 오류 등)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Token issuance failed: {reason}")
