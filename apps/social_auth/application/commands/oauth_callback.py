"""OAuthCallback Command.

OAuth 콜백 처리 Use Case입니다.
인가 코드 하나로 로그인 트랜잭션 전체(교환 → 프로필 → 토큰 발급 → 저장)를 수행합니다.
"""

from __future__ import annotations

import logging

from apps.social_auth.application.common.dto.auth import LoginSession, OAuthCallbackRequest
from apps.social_auth.application.common.exceptions.auth import (
    LoginFailedError,
    MissingAuthorizationCodeError,
)
from apps.social_auth.application.common.ports.oauth_provider import ProviderResolver
from apps.social_auth.application.common.ports.token_issuer import TokenIssuer
from apps.social_auth.application.common.services.token_store import TokenStore
from apps.social_auth.domain.enums.login_stage import LoginStage
from apps.social_auth.domain.value_objects.token_payload import TokenPayload

logger = logging.getLogger(__name__)


class OAuthCallbackInteractor:
    """OAuth 콜백 Interactor.

    OAuth 로그인 플로우의 콜백 단계:
    1. 인가 코드 확인 (비어 있으면 네트워크 호출 없이 실패)
    2. 프로바이더 토큰 교환
    3. 프로필 조회
    4. 세션 토큰 발급
    5. 토큰 저장

    어느 단계에서 실패하든 LoginFailedError 하나로 보고하며 재시도하지 않습니다.
    이미 발급된 토큰은 저장 실패 시에도 되돌리지 않습니다.
    """

    def __init__(
        self,
        providers: ProviderResolver,
        token_issuer: TokenIssuer,
        token_store: TokenStore,
    ) -> None:
        self._providers = providers
        self._token_issuer = token_issuer
        self._token_store = token_store

    async def execute(self, request: OAuthCallbackRequest) -> LoginSession:
        """OAuth 콜백 처리.

        Args:
            request: 콜백 요청 DTO

        Returns:
            로그인 세션 DTO

        Raises:
            LoginFailedError: 실패한 단계와 구체적인 원인을 포함
        """
        stage = LoginStage.START
        try:
            # 1. 인가 코드 확인
            if not request.code or not request.code.strip():
                raise MissingAuthorizationCodeError()
            stage = LoginStage.CODE_RECEIVED

            # 2. 프로바이더 토큰 교환
            adapter = self._providers.get(request.provider)
            provider_token = await adapter.exchange_code(request.code, request.state)
            stage = LoginStage.PROVIDER_EXCHANGED

            # 3. 프로필 조회
            profile = await adapter.fetch_profile(provider_token)
            stage = LoginStage.PROFILE_FETCHED

            # 4. 세션 토큰 발급
            user_id = profile.provider_id
            access_token = self._token_issuer.issue_access_token(user_id, profile.to_claims())
            refresh_token = self._token_issuer.issue_refresh_token(user_id)
            refresh_payload = TokenPayload.from_claims(
                self._token_issuer.parse_claims(refresh_token)
            )
            stage = LoginStage.TOKENS_ISSUED

            # 5. 토큰 저장
            await self._token_store.put_access_token(user_id, access_token)
            await self._token_store.put_refresh_token(
                user_id=user_id,
                provider=profile.provider,
                token=refresh_token,
                expires_at=refresh_payload.expires_at,
            )
            stage = LoginStage.TOKENS_STORED
        except Exception as e:
            logger.warning(
                "OAuth login failed",
                extra={
                    "provider": getattr(request.provider, "value", request.provider),
                    "stage": stage.value,
                    "status": LoginStage.ERROR.value,
                    "error_kind": type(e).__name__,
                },
            )
            raise LoginFailedError(stage, e) from e

        stage = LoginStage.COMPLETED

        logger.info(
            "OAuth login successful",
            extra={"user_id": user_id, "provider": profile.provider.value},
        )

        return LoginSession(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=self._token_issuer.access_ttl_seconds,
            refresh_expires_at=refresh_payload.expires_at,
            profile=profile,
            stage=stage,
        )
