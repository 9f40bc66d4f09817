"""RefreshTokens Command.

리프레시 토큰으로 액세스 토큰을 재발급하는 Use Case입니다.
"""

from __future__ import annotations

import logging

from apps.social_auth.application.common.dto.auth import (
    RefreshTokensRequest,
    RefreshTokensResponse,
)
from apps.social_auth.application.common.ports.token_issuer import TokenIssuer
from apps.social_auth.application.common.services.token_store import TokenStore
from apps.social_auth.domain.exceptions.auth import TokenInvalidError, TokenRevokedError
from apps.social_auth.domain.value_objects.token_payload import TokenPayload

logger = logging.getLogger(__name__)


class RefreshTokensInteractor:
    """토큰 갱신 Interactor.

    1. 리프레시 토큰 서명/만료 검증
    2. 저장소의 사용 가능한 레코드와 대조 (폐기/교체된 토큰 거부)
    3. 새 액세스 토큰 발급 및 저장

    리프레시 토큰 자체는 교체하지 않습니다.
    """

    def __init__(self, token_issuer: TokenIssuer, token_store: TokenStore) -> None:
        self._token_issuer = token_issuer
        self._token_store = token_store

    async def execute(self, request: RefreshTokensRequest) -> RefreshTokensResponse:
        """액세스 토큰 재발급.

        Raises:
            TokenInvalidError: 형식 오류, 서명 불일치, 소유자 불일치
            TokenExpiredError: 만료
            TokenRevokedError: 폐기되었거나 교체된 토큰
        """
        payload = TokenPayload.from_claims(self._token_issuer.parse_claims(request.refresh_token))

        record = await self._token_store.get_refresh_token(request.refresh_token)
        if record is None:
            raise TokenRevokedError()
        if record.user_id != payload.sub:
            logger.warning(
                "Refresh token subject mismatch",
                extra={"refresh_token_id": str(record.id)},
            )
            raise TokenInvalidError("Refresh token subject mismatch")

        access_token = self._token_issuer.issue_access_token(
            payload.sub, {"provider": record.provider}
        )
        await self._token_store.put_access_token(payload.sub, access_token)

        logger.info(
            "Access token refreshed",
            extra={"user_id": payload.sub, "provider": record.provider},
        )

        return RefreshTokensResponse(
            access_token=access_token,
            expires_in=self._token_issuer.access_ttl_seconds,
        )
