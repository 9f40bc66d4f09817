"""Redis Persistence Layer."""

from apps.social_auth.infrastructure.persistence_redis.access_token_cache_redis import (
    RedisAccessTokenCache,
)
from apps.social_auth.infrastructure.persistence_redis.client import get_access_token_redis

__all__ = ["RedisAccessTokenCache", "get_access_token_redis"]
