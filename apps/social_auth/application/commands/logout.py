"""Logout Command.

로그아웃(세션 종료) Use Case입니다.
"""

from __future__ import annotations

import logging

from apps.social_auth.application.common.dto.auth import LogoutRequest
from apps.social_auth.application.common.services.token_store import TokenStore

logger = logging.getLogger(__name__)


class LogoutInteractor:
    """로그아웃 Interactor.

    액세스 토큰 캐시를 비우고 (user_id, provider) 리프레시 토큰을 폐기합니다.
    요청에 리프레시 토큰이 포함되면 해당 레코드도 폐기합니다.
    """

    def __init__(self, token_store: TokenStore) -> None:
        self._token_store = token_store

    async def execute(self, request: LogoutRequest) -> None:
        await self._token_store.revoke_all(request.user_id, request.provider)
        if request.refresh_token:
            await self._token_store.revoke_refresh_token(request.refresh_token)

        logger.info(
            "User logged out",
            extra={"user_id": request.user_id, "provider": getattr(request.provider, "value", request.provider)},
        )
