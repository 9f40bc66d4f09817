"""Token Store.

액세스 토큰(만료형 캐시)과 리프레시 토큰(영속, 폐기 가능한 레코드)을
하나의 인터페이스로 묶은 2계층 토큰 저장소입니다.

- Access Token: Redis, 사용자당 1건, TTL 15분
- Refresh Token: PostgreSQL, (user_id, provider) 당 1건 (저장 시 교체)

저장소 접근 실패는 StoreUnavailableError로 그대로 전파됩니다.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from apps.social_auth.application.common.exceptions.auth import UnsupportedProviderError
from apps.social_auth.application.common.ports.access_token_cache import AccessTokenCache
from apps.social_auth.application.common.ports.flusher import Flusher
from apps.social_auth.application.common.ports.refresh_token_gateway import RefreshTokenGateway
from apps.social_auth.application.common.ports.transaction_manager import TransactionManager
from apps.social_auth.domain.entities.refresh_token import RefreshToken
from apps.social_auth.domain.enums.oauth_provider import OAuthProvider
from apps.social_auth.domain.services.clock import utc_now

logger = logging.getLogger(__name__)


class TokenStore:
    """2계층 토큰 저장소."""

    def __init__(
        self,
        access_tokens: AccessTokenCache,
        refresh_tokens: RefreshTokenGateway,
        flusher: Flusher,
        transaction_manager: TransactionManager,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._access_tokens = access_tokens
        self._refresh_tokens = refresh_tokens
        self._flusher = flusher
        self._transaction_manager = transaction_manager
        self._clock = clock

    # ------------------------------------------------------------------
    # Access Token (fast tier)
    # ------------------------------------------------------------------

    async def put_access_token(self, user_id: str, token: str) -> None:
        """액세스 토큰 저장. 같은 사용자의 이전 토큰은 덮어씁니다."""
        await self._access_tokens.put(user_id, token)
        logger.info("Access token stored", extra={"user_id": user_id})

    async def get_access_token(self, user_id: str) -> str | None:
        return await self._access_tokens.get(user_id)

    async def delete_access_token(self, user_id: str) -> None:
        await self._access_tokens.delete(user_id)
        logger.info("Access token deleted", extra={"user_id": user_id})

    # ------------------------------------------------------------------
    # Refresh Token (durable tier)
    # ------------------------------------------------------------------

    async def put_refresh_token(
        self,
        user_id: str,
        provider: OAuthProvider | str,
        token: str,
        expires_at: datetime,
    ) -> RefreshToken:
        """리프레시 토큰 저장.

        기존 (user_id, provider) 레코드를 삭제한 뒤 새 레코드를 추가합니다.
        트랜잭션으로 묶지 않으므로 동시 로그인 시 마지막 저장이 남습니다.
        """
        provider_name = _provider_name(provider)

        existing = await self._refresh_tokens.get_by_user_and_provider(user_id, provider_name)
        if existing is not None:
            await self._refresh_tokens.delete(existing)
            await self._flusher.flush()
            logger.debug(
                "Replaced previous refresh token",
                extra={"user_id": user_id, "provider": provider_name},
            )

        record = RefreshToken(
            token=token,
            user_id=user_id,
            provider=provider_name,
            expires_at=expires_at,
            created_at=self._clock(),
            revoked=False,
        )
        self._refresh_tokens.add(record)
        await self._transaction_manager.commit()

        logger.info(
            "Refresh token stored",
            extra={
                "user_id": user_id,
                "provider": provider_name,
                "expires_at": expires_at.isoformat(),
            },
        )
        return record

    async def get_refresh_token(self, token: str) -> RefreshToken | None:
        """사용 가능한 리프레시 토큰 조회.

        폐기되었거나 만료된 레코드는 None으로 처리합니다.
        """
        record = await self._refresh_tokens.get_by_token(token)
        if record is None or not record.is_usable(self._clock()):
            return None
        return record

    async def revoke_refresh_token(self, token: str) -> None:
        """리프레시 토큰 폐기. 일치하는 레코드가 없으면 아무것도 하지 않습니다."""
        record = await self._refresh_tokens.get_by_token(token)
        if record is None:
            return
        record.revoke()
        await self._transaction_manager.commit()
        logger.info("Refresh token revoked", extra={"refresh_token_id": str(record.id)})

    async def delete_refresh_token(self, token: str) -> None:
        """리프레시 토큰 물리 삭제. 일치하는 레코드가 없으면 아무것도 하지 않습니다."""
        record = await self._refresh_tokens.get_by_token(token)
        if record is None:
            return
        await self._refresh_tokens.delete(record)
        await self._transaction_manager.commit()
        logger.info("Refresh token deleted", extra={"refresh_token_id": str(record.id)})

    async def revoke_all(self, user_id: str, provider: OAuthProvider | str) -> None:
        """로그아웃: 액세스 토큰 삭제 + (user_id, provider) 리프레시 토큰 폐기."""
        provider_name = _provider_name(provider)

        await self._access_tokens.delete(user_id)

        record = await self._refresh_tokens.get_by_user_and_provider(user_id, provider_name)
        if record is not None and not record.revoked:
            record.revoke()
            await self._transaction_manager.commit()

        logger.info(
            "All tokens revoked",
            extra={"user_id": user_id, "provider": provider_name},
        )


def _provider_name(provider: OAuthProvider | str) -> str:
    if isinstance(provider, OAuthProvider):
        return provider.value
    try:
        return OAuthProvider.from_string(provider).value
    except ValueError as e:
        raise UnsupportedProviderError(str(provider)) from e
