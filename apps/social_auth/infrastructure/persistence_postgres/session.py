"""Database session management for the refresh-token store."""

from __future__ import annotations

from collections.abc import AsyncIterator
from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.social_auth.infrastructure.persistence_postgres.mappings import start_all_mappers
from apps.social_auth.setup.config import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """프로세스 단위 AsyncEngine."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        connect_args={"timeout": 5} if settings.database_url.startswith("postgresql+asyncpg") else {},
    )


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    start_all_mappers()
    return async_sessionmaker(
        bind=get_async_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_async_session() -> AsyncIterator[AsyncSession]:
    """Yield a request-scoped async database session."""
    async with get_session_factory()() as session:
        yield session
