"""Auth Application Exceptions."""

from __future__ import annotations

from apps.social_auth.application.common.exceptions.base import ApplicationError
from apps.social_auth.domain.enums.login_stage import LoginStage


class MissingAuthorizationCodeError(ApplicationError):
    """인가 코드 누락."""

    def __init__(self) -> None:
        super().__init__("Authorization code is required")


class UnsupportedProviderError(ApplicationError):
    """지원하지 않는 프로바이더."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")


class OAuthProviderError(ApplicationError):
    """OAuth 프로바이더 오류."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"OAuth provider error ({provider}): {reason}")


class ProviderExchangeError(OAuthProviderError):
    """인가 코드 → 액세스 토큰 교환 실패.

    타임아웃, 비정상 응답 코드, 응답 본문의 error 필드, access_token 누락.
    """


class ProviderProfileError(OAuthProviderError):
    """사용자 프로필 조회 실패.

    네트워크 오류 또는 고유 식별자 누락.
    """


class LoginFailedError(ApplicationError):
    """로그인 트랜잭션 실패.

    실패한 단계(stage)와 구체적인 원인(error)을 함께 전달합니다.
    원인 예외는 __cause__ 로도 연결됩니다.
    """

    def __init__(self, stage: LoginStage, error: Exception) -> None:
        self.stage = stage
        self.error = error
        super().__init__(f"Login failed at {stage.value}: {_describe_chain(error)}")

    @property
    def kind(self) -> str:
        return type(self.error).__name__

    @property
    def status(self) -> LoginStage:
        """트랜잭션의 종료 상태. stage 는 실패 직전까지 도달한 단계."""
        return LoginStage.ERROR


def _describe_chain(error: BaseException) -> str:
    """예외 체인을 사람이 읽을 수 있는 문자열로 변환."""
    parts = []
    current: BaseException | None = error
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        parts.append(f"{type(current).__name__}: {current}")
        current = current.__cause__ or current.__context__
    return " <- ".join(parts)
