"""JWT Token Issuer.

TokenIssuer 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any, Callable
from uuid import uuid4

import jwt

from apps.social_auth.domain.exceptions.auth import (
    TokenExpiredError,
    TokenInvalidError,
    TokenIssuanceError,
)
from apps.social_auth.domain.services.clock import utc_now
from apps.social_auth.domain.value_objects.token_payload import ClaimValue, TokenPayload
from apps.social_auth.setup.config import IssuerConfig
from apps.social_auth.setup.constants import MIN_SIGNING_KEY_BYTES

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ("sub", "iat", "exp")


class JwtTokenIssuer:
    """HMAC 서명 JWT 발급/검증.

    액세스/리프레시 토큰은 같은 키와 알고리즘으로 서명하고
    클레임과 유효기간만 다릅니다. 서명 키는 생성 시 한 번 읽고 이후 변경하지 않습니다.

    만료 판정은 주입된 clock 기준으로 수행합니다 (now >= exp 이면 만료).
    """

    def __init__(
        self,
        config: IssuerConfig,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._key = config.secret_key.encode("utf-8") if config.secret_key else b""
        self._algorithm = config.algorithm
        self._access_ttl = timedelta(seconds=config.access_ttl_seconds)
        self._refresh_ttl = timedelta(seconds=config.refresh_ttl_seconds)
        self._clock = clock

    @property
    def access_ttl_seconds(self) -> int:
        return int(self._access_ttl.total_seconds())

    def issue_access_token(
        self, subject: str, claims: Mapping[str, ClaimValue] | None = None
    ) -> str:
        """액세스 토큰 발급. 예약 클레임(sub, jti, iat, exp)이 전달된 클레임보다 우선합니다."""
        return self._sign(subject, dict(claims or {}), self._access_ttl)

    def issue_refresh_token(self, subject: str) -> str:
        """리프레시 토큰 발급."""
        return self._sign(subject, {}, self._refresh_ttl)

    def parse_claims(self, token: str) -> dict[str, Any]:
        """서명/형식 검증 후 클레임 반환.

        Raises:
            TokenInvalidError: 형식 오류, 서명 불일치, 필수 클레임 누락
            TokenExpiredError: 만료
        """
        if not token or not self._key:
            raise TokenInvalidError("Token or signing key is empty")
        try:
            claims = jwt.decode(
                token,
                self._key,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": list(REQUIRED_CLAIMS),
                },
            )
        except jwt.PyJWTError as e:
            raise TokenInvalidError(f"Invalid token: {e}") from e
        except (NotImplementedError, ValueError, TypeError) as e:
            raise TokenInvalidError(f"Invalid token: {e}") from e

        try:
            payload = TokenPayload.from_claims(claims)
        except (KeyError, TypeError, ValueError) as e:
            raise TokenInvalidError(f"Malformed claims: {e}") from e
        if payload.is_expired(self._clock()):
            raise TokenExpiredError()
        return claims

    def validate(self, token: str) -> bool:
        """토큰 유효 여부. 어떤 실패 사유든 False로 처리합니다."""
        try:
            self.parse_claims(token)
        except TokenInvalidError:
            return False
        return True

    def _sign(self, subject: str, claims: dict[str, Any], ttl: timedelta) -> str:
        if not subject:
            raise TokenIssuanceError("subject must not be empty")
        if len(self._key) < MIN_SIGNING_KEY_BYTES:
            logger.error(
                "Session token signing key is missing or too short",
                extra={"min_bytes": MIN_SIGNING_KEY_BYTES},
            )
            raise TokenIssuanceError(
                f"signing key must be at least {MIN_SIGNING_KEY_BYTES} bytes"
            )

        now = self._clock()
        payload = {
            **claims,
            "sub": subject,
            "jti": uuid4().hex,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
        }
        try:
            return jwt.encode(payload, self._key, algorithm=self._algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
            logger.error("Session token signing failed", extra={"algorithm": self._algorithm})
            raise TokenIssuanceError(str(e)) from e
