"""TokenPayload Value Object."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Union

from apps.social_auth.domain.value_objects.base import ValueObject

ClaimValue = Union[str, int, float, bool]

REGISTERED_CLAIMS = frozenset({"sub", "jti", "iat", "exp"})


@dataclass(frozen=True, slots=True)
class TokenPayload(ValueObject):
    """검증된 세션 토큰의 페이로드 Value Object."""

    sub: str
    jti: str
    iat: int  # Unix timestamp
    exp: int  # Unix timestamp
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "TokenPayload":
        """디코딩된 클레임에서 TokenPayload 생성."""
        return cls(
            sub=str(claims["sub"]),
            jti=str(claims.get("jti", "")),
            iat=int(claims["iat"]),
            exp=int(claims["exp"]),
            extra={k: v for k, v in claims.items() if k not in REGISTERED_CLAIMS},
        )

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)

    def is_expired(self, now: datetime) -> bool:
        """토큰 만료 여부 (now >= exp)."""
        return now.timestamp() >= self.exp
