"""RefreshToken ORM Mapping."""

from sqlalchemy import Boolean, Column, DateTime, Index, String, Table, false
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.social_auth.infrastructure.persistence_postgres.registry import mapper_registry


refresh_tokens_table = Table(
    "refresh_tokens",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("token", String(1024), nullable=False, unique=True),
    Column("user_id", String(255), nullable=False),
    Column("provider", String(32), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("expires_at", DateTime(timezone=True), nullable=False),
    Column("revoked", Boolean, nullable=False, server_default=false()),
    # (user_id, provider) 중복은 DB 제약이 아닌 저장 시점의 교체로 관리
    Index("ix_refresh_tokens_user_provider", "user_id", "provider"),
    schema="auth",
)


def start_refresh_token_mapper() -> None:
    """RefreshToken 매퍼 시작.

    Note:
        Imperative Mapping 사용.
        도메인 엔티티가 SQLAlchemy에 의존하지 않도록 합니다.
    """
    from apps.social_auth.domain.entities.refresh_token import RefreshToken

    # 이미 매핑된 경우 스킵
    if hasattr(RefreshToken, "__mapper__"):
        return

    mapper_registry.map_imperatively(RefreshToken, refresh_tokens_table)
