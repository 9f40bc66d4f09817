"""Clock.

만료 판정과 생성 시각 기록에 쓰는 기본 시계입니다.
테스트에서는 clock 인자로 고정 시계를 주입합니다.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """timezone-aware UTC 현재 시각."""
    return datetime.now(timezone.utc)
