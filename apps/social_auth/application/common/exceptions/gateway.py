"""Gateway Exceptions."""

from apps.social_auth.application.common.exceptions.base import ApplicationError


class GatewayError(ApplicationError):
    """Gateway 오류 베이스 클래스."""

    pass


class StoreUnavailableError(GatewayError):
    """토큰 저장소(Redis / PostgreSQL) 접근 실패."""

    def __init__(self, store: str, operation: str, reason: str) -> None:
        self.store = store
        self.operation = operation
        super().__init__(f"{store} unavailable during {operation}: {reason}")
