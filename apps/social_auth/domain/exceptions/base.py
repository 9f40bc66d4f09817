"""Domain Exception Base."""


class DomainError(Exception):
    """도메인 예외 베이스 클래스."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
