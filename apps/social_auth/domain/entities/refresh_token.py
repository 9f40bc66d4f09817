"""RefreshToken Entity.

영속 저장소(PostgreSQL)에 기록되는 리프레시 토큰입니다.
SQLAlchemy에 의존하지 않으며, 매핑은
infrastructure/persistence_postgres/mappings/refresh_token.py 에서 Imperative Mapping으로 처리합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from apps.social_auth.domain.services.clock import utc_now


@dataclass(eq=False, repr=False)
class RefreshToken:
    """리프레시 토큰 레코드.

    - 로그인 성공 시 생성
    - revoked=True 로의 변경만 허용 (논리 삭제)
    - revoked == False 이고 expires_at > now 일 때만 사용 가능
    """

    token: str
    user_id: str
    provider: str
    expires_at: datetime
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    revoked: bool = False

    def is_usable(self, now: datetime) -> bool:
        """사용 가능 여부."""
        return not self.revoked and _as_aware(self.expires_at) > now

    def revoke(self) -> None:
        """토큰 폐기."""
        self.revoked = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RefreshToken):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return (
            f"RefreshToken(id={self.id!r}, user_id={self.user_id!r}, "
            f"provider={self.provider!r}, revoked={self.revoked})"
        )


def _as_aware(value: datetime) -> datetime:
    # timezone 정보가 없는 값은 UTC로 간주
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
