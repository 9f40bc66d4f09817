"""AccessTokenCache Port.

액세스 토큰을 보관하는 만료형 캐시(fast tier) 인터페이스입니다.
"""

from typing import Protocol


class AccessTokenCache(Protocol):
    """사용자별 액세스 토큰 캐시.

    사용자당 하나의 엔트리만 유지하며, 만료는 캐시 엔진이 TTL로 처리합니다.

    구현체:
        - RedisAccessTokenCache (infrastructure/persistence_redis/)
    """

    async def put(self, user_id: str, token: str) -> None:
        """액세스 토큰 저장 (기존 엔트리 덮어쓰기).

        Raises:
            StoreUnavailableError: 캐시 접근 실패
        """
        ...

    async def get(self, user_id: str) -> str | None:
        """액세스 토큰 조회. 없거나 만료되었으면 None."""
        ...

    async def delete(self, user_id: str) -> None:
        """액세스 토큰 삭제."""
        ...
