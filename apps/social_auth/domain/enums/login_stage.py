"""Login Stage Enum."""

from enum import Enum


class LoginStage(str, Enum):
    """OAuth 로그인 트랜잭션의 진행 단계.

    START → CODE_RECEIVED → PROVIDER_EXCHANGED → PROFILE_FETCHED
    → TOKENS_ISSUED → TOKENS_STORED → COMPLETED

    ERROR는 종료 상태가 아닌 모든 단계에서 도달할 수 있습니다.
    """

    START = "start"
    CODE_RECEIVED = "code_received"
    PROVIDER_EXCHANGED = "provider_exchanged"
    PROFILE_FETCHED = "profile_fetched"
    TOKENS_ISSUED = "tokens_issued"
    TOKENS_STORED = "tokens_stored"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (LoginStage.COMPLETED, LoginStage.ERROR)
