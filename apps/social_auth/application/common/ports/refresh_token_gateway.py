"""RefreshTokenGateway Port.

리프레시 토큰 영속 저장소(durable tier) 인터페이스입니다.
"""

from typing import Protocol

from apps.social_auth.domain.entities.refresh_token import RefreshToken


class RefreshTokenGateway(Protocol):
    """리프레시 토큰 저장소.

    토큰 값, (user_id, provider) 쌍으로 조회할 수 있습니다.
    모든 메서드는 DB 접근 실패 시 StoreUnavailableError를 발생시킵니다.

    구현체:
        - SqlaRefreshTokenGateway (infrastructure/persistence_postgres/adapters/)
    """

    def add(self, refresh_token: RefreshToken) -> None:
        """새 레코드 추가 (커밋은 TransactionManager에서 처리)."""
        ...

    async def get_by_token(self, token: str) -> RefreshToken | None:
        """토큰 값으로 조회 (폐기/만료 여부와 무관)."""
        ...

    async def get_by_user_and_provider(
        self, user_id: str, provider: str
    ) -> RefreshToken | None:
        """(user_id, provider) 쌍으로 조회."""
        ...

    async def delete(self, refresh_token: RefreshToken) -> None:
        """레코드 물리 삭제."""
        ...
