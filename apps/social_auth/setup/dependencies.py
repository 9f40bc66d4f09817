"""Dependency Wiring.

프로세스 단위 싱글톤(프로바이더 레지스트리, 토큰 발급자, Redis 캐시)과
요청 단위 객체(AsyncSession 기반 토큰 저장소, Interactor)를 조립합니다.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncSession

from apps.social_auth.application.commands.logout import LogoutInteractor
from apps.social_auth.application.commands.oauth_authorize import OAuthAuthorizeInteractor
from apps.social_auth.application.commands.oauth_callback import OAuthCallbackInteractor
from apps.social_auth.application.commands.refresh_tokens import RefreshTokensInteractor
from apps.social_auth.application.common.services.token_store import TokenStore
from apps.social_auth.infrastructure.oauth.registry import ProviderRegistry
from apps.social_auth.infrastructure.persistence_postgres.adapters import (
    SqlaFlusher,
    SqlaRefreshTokenGateway,
    SqlaTransactionManager,
)
from apps.social_auth.infrastructure.persistence_redis.access_token_cache_redis import (
    RedisAccessTokenCache,
)
from apps.social_auth.infrastructure.persistence_redis.client import get_access_token_redis
from apps.social_auth.infrastructure.security.jwt_token_issuer import JwtTokenIssuer
from apps.social_auth.setup.config import get_settings
from apps.social_auth.setup.logging import configure_logging

# =============================================================================
# 프로세스 시작 / 종료
# =============================================================================


def startup() -> None:
    """프로세스 시작 시 한 번 호출.

    구조화된 로깅(ECS JSON)을 설정하고 프로세스 단위 싱글톤을 미리 만듭니다.
    프로바이더 설정 누락은 여기서 실패하지 않고 해당 프로바이더 조회 시 보고됩니다.
    """
    configure_logging()
    get_provider_registry()
    get_token_issuer()
    get_access_token_cache()


# =============================================================================
# 프로세스 단위 싱글톤
# =============================================================================


@lru_cache
def get_provider_registry() -> ProviderRegistry:
    return ProviderRegistry(get_settings())


@lru_cache
def get_token_issuer() -> JwtTokenIssuer:
    return JwtTokenIssuer(get_settings().issuer_config())


@lru_cache
def get_access_token_cache() -> RedisAccessTokenCache:
    settings = get_settings()
    return RedisAccessTokenCache(
        get_access_token_redis(),
        ttl_seconds=settings.access_token_ttl_seconds,
        key_prefix=settings.access_token_key_prefix,
    )


# =============================================================================
# 요청 단위 팩토리
# =============================================================================


def build_token_store(session: AsyncSession) -> TokenStore:
    """요청 세션에 묶인 TokenStore."""
    return TokenStore(
        access_tokens=get_access_token_cache(),
        refresh_tokens=SqlaRefreshTokenGateway(session),
        flusher=SqlaFlusher(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def build_oauth_authorize_interactor() -> OAuthAuthorizeInteractor:
    return OAuthAuthorizeInteractor(get_provider_registry())


def build_oauth_callback_interactor(session: AsyncSession) -> OAuthCallbackInteractor:
    return OAuthCallbackInteractor(
        providers=get_provider_registry(),
        token_issuer=get_token_issuer(),
        token_store=build_token_store(session),
    )


def build_refresh_tokens_interactor(session: AsyncSession) -> RefreshTokensInteractor:
    return RefreshTokensInteractor(
        token_issuer=get_token_issuer(),
        token_store=build_token_store(session),
    )


def build_logout_interactor(session: AsyncSession) -> LogoutInteractor:
    return LogoutInteractor(build_token_store(session))


async def shutdown() -> None:
    """공유 HTTP 클라이언트와 Redis 연결 종료."""
    await get_provider_registry().aclose()
    await get_access_token_redis().aclose()
