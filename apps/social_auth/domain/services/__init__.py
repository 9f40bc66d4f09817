"""Domain Services.

엔티티 단독으로 처리하기 어려운 로직을 서비스로 분리합니다.
"""

from apps.social_auth.domain.services.clock import utc_now

__all__ = ["utc_now"]
