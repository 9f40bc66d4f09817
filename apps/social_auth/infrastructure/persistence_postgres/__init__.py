"""PostgreSQL Persistence Layer."""

from apps.social_auth.infrastructure.persistence_postgres.registry import mapper_registry
from apps.social_auth.infrastructure.persistence_postgres.session import (
    get_async_engine,
    get_async_session,
)

__all__ = ["get_async_engine", "get_async_session", "mapper_registry"]
