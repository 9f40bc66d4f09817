"""Flusher Port.

세션 변경사항 플러시를 위한 인터페이스입니다.
"""

from typing import Protocol


class Flusher(Protocol):
    """세션 플러시 인터페이스.

    Session의 변경사항을 DB에 반영합니다 (commit 전).
    리프레시 토큰 교체 시 기존 레코드 삭제를 신규 INSERT 보다 먼저 반영하는 데 사용합니다.

    구현체:
        - SqlaFlusher (infrastructure/persistence_postgres/adapters/)
    """

    async def flush(self) -> None:
        """세션 변경사항 플러시.

        Raises:
            StoreUnavailableError: DB 접근 실패
        """
        ...
