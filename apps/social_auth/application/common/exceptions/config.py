"""Configuration Exceptions."""

from apps.social_auth.application.common.exceptions.base import ApplicationError


class ConfigurationError(ApplicationError):
    """필수 설정값 누락.

    네트워크 호출 전에 감지되어야 합니다.
    """

    def __init__(self, component: str, missing: list[str] | tuple[str, ...]) -> None:
        self.component = component
        self.missing = tuple(missing)
        super().__init__(f"{component} is not configured. Missing: {', '.join(self.missing)}")
