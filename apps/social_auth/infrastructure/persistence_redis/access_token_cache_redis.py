"""Redis Access Token Cache.

AccessTokenCache 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from apps.social_auth.application.common.exceptions.gateway import StoreUnavailableError
from apps.social_auth.setup.constants import ACCESS_TOKEN_KEY_PREFIX, ACCESS_TOKEN_TTL_SECONDS

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

STORE_NAME = "redis"


class RedisAccessTokenCache:
    """Redis 기반 액세스 토큰 캐시.

    AccessTokenCache 구현체. 키는 `access_token:{user_id}`, SETEX로 TTL을 부여합니다.
    """

    def __init__(
        self,
        redis: "aioredis.Redis",
        ttl_seconds: int = ACCESS_TOKEN_TTL_SECONDS,
        key_prefix: str = ACCESS_TOKEN_KEY_PREFIX,
    ) -> None:
        self._redis = redis
        self._ttl_seconds = ttl_seconds
        self._key_prefix = key_prefix

    def _key(self, user_id: str) -> str:
        return f"{self._key_prefix}{user_id}"

    async def put(self, user_id: str, token: str) -> None:
        """액세스 토큰 저장 (덮어쓰기)."""
        key = self._key(user_id)
        try:
            await self._redis.setex(key, self._ttl_seconds, token)
        except (RedisError, OSError) as e:
            logger.error("Failed to store access token", extra={"key": key, "error": str(e)})
            raise StoreUnavailableError(STORE_NAME, "put_access_token", str(e)) from e
        logger.debug("Stored access token", extra={"key": key, "ttl": self._ttl_seconds})

    async def get(self, user_id: str) -> str | None:
        """액세스 토큰 조회."""
        key = self._key(user_id)
        try:
            value = await self._redis.get(key)
        except (RedisError, OSError) as e:
            logger.error("Failed to read access token", extra={"key": key, "error": str(e)})
            raise StoreUnavailableError(STORE_NAME, "get_access_token", str(e)) from e
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else value

    async def delete(self, user_id: str) -> None:
        """액세스 토큰 삭제."""
        key = self._key(user_id)
        try:
            await self._redis.delete(key)
        except (RedisError, OSError) as e:
            logger.error("Failed to delete access token", extra={"key": key, "error": str(e)})
            raise StoreUnavailableError(STORE_NAME, "delete_access_token", str(e)) from e
        logger.debug("Deleted access token", extra={"key": key})
