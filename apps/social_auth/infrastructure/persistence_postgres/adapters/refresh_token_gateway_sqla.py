"""SQLAlchemy RefreshToken Gateway.

RefreshTokenGateway 포트의 구현체입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from apps.social_auth.domain.entities.refresh_token import RefreshToken
from apps.social_auth.infrastructure.persistence_postgres.adapters.errors import (
    translate_store_errors,
)
from apps.social_auth.infrastructure.persistence_postgres.mappings.refresh_token import (
    refresh_tokens_table,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class SqlaRefreshTokenGateway:
    """SQLAlchemy 기반 RefreshToken Gateway.

    RefreshTokenGateway 구현체.
    """

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    def add(self, refresh_token: RefreshToken) -> None:
        """새 레코드 추가.

        Session에 추가만 하고 커밋은 TransactionManager에서 처리합니다.
        """
        self._session.add(refresh_token)

    async def get_by_token(self, token: str) -> RefreshToken | None:
        """토큰 값으로 조회."""
        stmt = select(RefreshToken).where(refresh_tokens_table.c.token == token)
        with translate_store_errors("get_refresh_token"):
            result = await self._session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_by_user_and_provider(
        self, user_id: str, provider: str
    ) -> RefreshToken | None:
        """(user_id, provider) 쌍으로 조회.

        동시 로그인으로 여러 건이 남은 경우 가장 최근 레코드를 반환합니다.
        """
        stmt = (
            select(RefreshToken)
            .where(
                refresh_tokens_table.c.user_id == user_id,
                refresh_tokens_table.c.provider == provider,
            )
            .order_by(refresh_tokens_table.c.created_at.desc())
            .limit(1)
        )
        with translate_store_errors("get_refresh_token_by_user"):
            result = await self._session.execute(stmt)
            return result.scalars().first()

    async def delete(self, refresh_token: RefreshToken) -> None:
        """레코드 물리 삭제."""
        with translate_store_errors("delete_refresh_token"):
            await self._session.delete(refresh_token)
