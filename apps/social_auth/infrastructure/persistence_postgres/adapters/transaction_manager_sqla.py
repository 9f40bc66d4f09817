"""SQLAlchemy Transaction Manager.

TransactionManager 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.social_auth.infrastructure.persistence_postgres.adapters.errors import (
    translate_store_errors,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SqlaTransactionManager:
    """SQLAlchemy 트랜잭션 관리자.

    TransactionManager 구현체. 커밋 실패 시 세션을 롤백한 뒤 StoreUnavailableError를 발생시킵니다.
    """

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def commit(self) -> None:
        """트랜잭션 커밋."""
        try:
            with translate_store_errors("commit"):
                await self._session.commit()
        except Exception:
            await self.rollback()
            raise

    async def rollback(self) -> None:
        """트랜잭션 롤백."""
        with translate_store_errors("rollback"):
            await self._session.rollback()
