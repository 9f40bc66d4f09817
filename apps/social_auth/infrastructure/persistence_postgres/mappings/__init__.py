"""ORM Mappings.

도메인 엔티티와 DB 테이블의 매핑을 정의합니다.
"""

from apps.social_auth.infrastructure.persistence_postgres.mappings.refresh_token import (
    refresh_tokens_table,
    start_refresh_token_mapper,
)


def start_all_mappers() -> None:
    """모든 매퍼 시작."""
    start_refresh_token_mapper()


__all__ = [
    "refresh_tokens_table",
    "start_refresh_token_mapper",
    "start_all_mappers",
]
