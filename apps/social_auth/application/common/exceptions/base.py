"""Application Exception Base."""


class ApplicationError(Exception):
    """애플리케이션 예외 베이스 클래스."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def kind(self) -> str:
        """오류 종류 (예외 클래스 이름)."""
        return type(self).__name__
