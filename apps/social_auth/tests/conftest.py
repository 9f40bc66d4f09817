"""Social Auth test fixtures.

저장소 포트의 인메모리 구현과 조작 가능한 시계를 제공합니다.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from apps.social_auth.application.common.services.token_store import TokenStore
from apps.social_auth.domain.entities.refresh_token import RefreshToken
from apps.social_auth.infrastructure.security.jwt_token_issuer import JwtTokenIssuer
from apps.social_auth.setup.config import IssuerConfig

TEST_SIGNING_KEY = "test-signing-key-0123456789abcdef"


class FakeClock:
    """테스트에서 직접 진행시키는 시계."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class InMemoryAccessTokenCache:
    """AccessTokenCache 인메모리 구현 (시계 기준 TTL)."""

    def __init__(self, clock: FakeClock, ttl_seconds: int = 900) -> None:
        self._clock = clock
        self._ttl = timedelta(seconds=ttl_seconds)
        self._entries: dict[str, tuple[str, datetime]] = {}

    async def put(self, user_id: str, token: str) -> None:
        self._entries[user_id] = (token, self._clock() + self._ttl)

    async def get(self, user_id: str) -> str | None:
        entry = self._entries.get(user_id)
        if entry is None:
            return None
        token, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[user_id]
            return None
        return token

    async def delete(self, user_id: str) -> None:
        self._entries.pop(user_id, None)


class InMemoryRefreshTokenGateway:
    """RefreshTokenGateway 인메모리 구현."""

    def __init__(self) -> None:
        self.records: list[RefreshToken] = []

    def add(self, refresh_token: RefreshToken) -> None:
        self.records.append(refresh_token)

    async def get_by_token(self, token: str) -> RefreshToken | None:
        return next((r for r in self.records if r.token == token), None)

    async def get_by_user_and_provider(self, user_id: str, provider: str) -> RefreshToken | None:
        matches = [r for r in self.records if r.user_id == user_id and r.provider == provider]
        if not matches:
            return None
        return max(matches, key=lambda r: r.created_at)

    async def delete(self, refresh_token: RefreshToken) -> None:
        self.records.remove(refresh_token)

    def for_pair(self, user_id: str, provider: str) -> list[RefreshToken]:
        return [r for r in self.records if r.user_id == user_id and r.provider == provider]


class CountingUnitOfWork:
    """Flusher / TransactionManager 호출 횟수 기록."""

    def __init__(self) -> None:
        self.flushes = 0
        self.commits = 0
        self.rollbacks = 0

    async def flush(self) -> None:
        self.flushes += 1

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def access_cache(clock: FakeClock) -> InMemoryAccessTokenCache:
    return InMemoryAccessTokenCache(clock)


@pytest.fixture
def refresh_gateway() -> InMemoryRefreshTokenGateway:
    return InMemoryRefreshTokenGateway()


@pytest.fixture
def unit_of_work() -> CountingUnitOfWork:
    return CountingUnitOfWork()


@pytest.fixture
def token_store(
    access_cache: InMemoryAccessTokenCache,
    refresh_gateway: InMemoryRefreshTokenGateway,
    unit_of_work: CountingUnitOfWork,
    clock: FakeClock,
) -> TokenStore:
    return TokenStore(
        access_tokens=access_cache,
        refresh_tokens=refresh_gateway,
        flusher=unit_of_work,
        transaction_manager=unit_of_work,
        clock=clock,
    )


@pytest.fixture
def issuer_config() -> IssuerConfig:
    return IssuerConfig(secret_key=TEST_SIGNING_KEY)


@pytest.fixture
def token_issuer(issuer_config: IssuerConfig, clock: FakeClock) -> JwtTokenIssuer:
    return JwtTokenIssuer(issuer_config, clock=clock)
