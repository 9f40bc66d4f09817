"""Redis Client Provider.

액세스 토큰 캐시용 비동기 Redis 클라이언트입니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import redis.asyncio as aioredis


def _build_async_client(redis_url: str) -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성."""
    import redis.asyncio as aioredis

    return aioredis.from_url(
        redis_url,
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
    )


@lru_cache
def get_access_token_redis() -> "aioredis.Redis":
    """액세스 토큰 캐시용 Redis 클라이언트.

    환경변수:
        - SOCIAL_AUTH_REDIS_URL (default: redis://localhost:6379/0)
    """
    from apps.social_auth.setup.config import get_settings

    settings = get_settings()
    return _build_async_client(settings.redis_url)
