"""TokenStore 단위 테스트."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from apps.social_auth.application.common.exceptions.auth import UnsupportedProviderError
from apps.social_auth.application.common.exceptions.gateway import StoreUnavailableError
from apps.social_auth.application.common.services.token_store import TokenStore
from apps.social_auth.domain.enums.oauth_provider import OAuthProvider


class TestAccessTokenTier:
    """액세스 토큰 (캐시 계층) 테스트."""

    @pytest.mark.asyncio
    async def test_put_overwrites_previous_token(self, token_store: TokenStore) -> None:
        await token_store.put_access_token("u-1", "first")
        await token_store.put_access_token("u-1", "second")

        assert await token_store.get_access_token("u-1") == "second"

    @pytest.mark.asyncio
    async def test_entry_disappears_after_ttl(self, token_store: TokenStore, clock) -> None:
        """TTL 경과 후 명시적 삭제 없이 조회되지 않는다."""
        await token_store.put_access_token("u-1", "tok")

        clock.advance(899)
        assert await token_store.get_access_token("u-1") == "tok"

        clock.advance(1)
        assert await token_store.get_access_token("u-1") is None

    @pytest.mark.asyncio
    async def test_delete_access_token(self, token_store: TokenStore) -> None:
        await token_store.put_access_token("u-1", "tok")

        await token_store.delete_access_token("u-1")

        assert await token_store.get_access_token("u-1") is None

    @pytest.mark.asyncio
    async def test_unknown_user_returns_none(self, token_store: TokenStore) -> None:
        assert await token_store.get_access_token("nobody") is None


class TestRefreshTokenTier:
    """리프레시 토큰 (영속 계층) 테스트."""

    @pytest.mark.asyncio
    async def test_put_and_get(self, token_store: TokenStore, clock, unit_of_work) -> None:
        # Arrange
        expires_at = clock() + timedelta(days=30)

        # Act
        record = await token_store.put_refresh_token("u-1", OAuthProvider.GOOGLE, "r-1", expires_at)
        found = await token_store.get_refresh_token("r-1")

        # Assert
        assert found is record
        assert record.provider == "google"
        assert record.revoked is False
        assert record.created_at == clock()
        assert unit_of_work.commits == 1
        assert unit_of_work.flushes == 0

    @pytest.mark.asyncio
    async def test_replacement_leaves_one_record_per_pair(
        self, token_store: TokenStore, refresh_gateway, clock, unit_of_work
    ) -> None:
        """같은 (user, provider) 저장 시 이전 토큰은 조회되지 않는다."""
        # Arrange
        expires_at = clock() + timedelta(days=30)
        await token_store.put_refresh_token("u-1", "google", "r-old", expires_at)

        # Act
        await token_store.put_refresh_token("u-1", "google", "r-new", expires_at)

        # Assert
        records = refresh_gateway.for_pair("u-1", "google")
        assert [r.token for r in records] == ["r-new"]
        assert not records[0].revoked
        assert await token_store.get_refresh_token("r-old") is None
        assert (await token_store.get_refresh_token("r-new")).token == "r-new"
        assert unit_of_work.flushes == 1

    @pytest.mark.asyncio
    async def test_other_providers_are_untouched(
        self, token_store: TokenStore, refresh_gateway, clock
    ) -> None:
        expires_at = clock() + timedelta(days=30)
        await token_store.put_refresh_token("u-1", "google", "r-google", expires_at)

        await token_store.put_refresh_token("u-1", "kakao", "r-kakao", expires_at)

        assert await token_store.get_refresh_token("r-google") is not None
        assert len(refresh_gateway.records) == 2

    @pytest.mark.asyncio
    async def test_revoke_hides_unexpired_record(self, token_store: TokenStore, clock) -> None:
        await token_store.put_refresh_token("u-1", "naver", "r-1", clock() + timedelta(days=30))

        await token_store.revoke_refresh_token("r-1")

        assert await token_store.get_refresh_token("r-1") is None

    @pytest.mark.asyncio
    async def test_revoke_unknown_token_is_noop(self, token_store: TokenStore, unit_of_work) -> None:
        await token_store.revoke_refresh_token("missing")

        assert unit_of_work.commits == 0

    @pytest.mark.asyncio
    async def test_expired_record_is_not_returned(self, token_store: TokenStore, clock) -> None:
        await token_store.put_refresh_token("u-1", "google", "r-1", clock() + timedelta(hours=1))

        clock.advance(3600)

        assert await token_store.get_refresh_token("r-1") is None

    @pytest.mark.asyncio
    async def test_delete_refresh_token_removes_record(
        self, token_store: TokenStore, refresh_gateway, clock
    ) -> None:
        await token_store.put_refresh_token("u-1", "google", "r-1", clock() + timedelta(days=1))

        await token_store.delete_refresh_token("r-1")
        await token_store.delete_refresh_token("r-1")

        assert refresh_gateway.records == []

    @pytest.mark.asyncio
    async def test_revoke_all(self, token_store: TokenStore, refresh_gateway, clock) -> None:
        """로그아웃: 액세스 토큰 삭제 + 리프레시 토큰 폐기."""
        # Arrange
        await token_store.put_access_token("u-1", "a-1")
        await token_store.put_refresh_token("u-1", "kakao", "r-1", clock() + timedelta(days=1))

        # Act
        await token_store.revoke_all("u-1", OAuthProvider.KAKAO)

        # Assert
        assert await token_store.get_access_token("u-1") is None
        assert await token_store.get_refresh_token("r-1") is None
        assert refresh_gateway.records[0].revoked is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("provider", [" kakao", "KAKAO ", "Kakao"])
    async def test_revoke_all_normalizes_provider_name(
        self, token_store: TokenStore, refresh_gateway, clock, provider: str
    ) -> None:
        """공백/대소문자가 섞인 프로바이더 이름도 같은 레코드를 폐기한다."""
        await token_store.put_refresh_token("u-1", "kakao", "r-1", clock() + timedelta(days=1))

        await token_store.revoke_all("u-1", provider)

        assert refresh_gateway.records[0].revoked is True
        assert await token_store.get_refresh_token("r-1") is None

    @pytest.mark.asyncio
    async def test_revoke_all_rejects_unknown_provider(self, token_store: TokenStore) -> None:
        await token_store.put_access_token("u-1", "a-1")

        with pytest.raises(UnsupportedProviderError):
            await token_store.revoke_all("u-1", "github")

        assert await token_store.get_access_token("u-1") == "a-1"


class TestStoreFailures:
    """저장소 장애 전파 테스트."""

    @pytest.mark.asyncio
    async def test_cache_failure_propagates(self, refresh_gateway, unit_of_work) -> None:
        # Arrange
        cache = AsyncMock()
        cache.put.side_effect = StoreUnavailableError("redis", "put_access_token", "down")
        store = TokenStore(cache, refresh_gateway, unit_of_work, unit_of_work)

        # Act & Assert
        with pytest.raises(StoreUnavailableError) as exc_info:
            await store.put_access_token("u-1", "tok")
        assert exc_info.value.store == "redis"

    @pytest.mark.asyncio
    async def test_commit_failure_propagates(self, access_cache, refresh_gateway, clock) -> None:
        unit_of_work = AsyncMock()
        unit_of_work.commit.side_effect = StoreUnavailableError("postgres", "commit", "down")
        store = TokenStore(access_cache, refresh_gateway, unit_of_work, unit_of_work, clock=clock)

        with pytest.raises(StoreUnavailableError):
            await store.put_refresh_token("u-1", "google", "r-1", clock() + timedelta(days=1))
