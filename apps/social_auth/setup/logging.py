"""Social Auth Logging.

ECS JSON(기본) 또는 텍스트 포맷으로 stdout 에 기록합니다.

로그 extra 에는 세션 토큰, 프로바이더 토큰, client secret 이 섞여 들어올 수 있으므로
포매터 단계에서 두 가지를 가립니다.

- 키 이름이 민감 패턴(token, secret ...)을 포함하는 값 (단, *_id 등 식별자 키 제외)
- 키와 무관하게 JWT 형태(header.payload.signature)인 문자열 값
"""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from datetime import datetime, timezone
from typing import Any

from apps.social_auth.setup.constants import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    ECS_VERSION,
    ENV_KEY_ENVIRONMENT,
    ENV_KEY_LOG_FORMAT,
    ENV_KEY_LOG_LEVEL,
    EXCLUDED_LOG_RECORD_ATTRS,
    MASK_MIN_LENGTH,
    MASK_PLACEHOLDER,
    MASK_PRESERVE_PREFIX,
    MASK_PRESERVE_SUFFIX,
    NOISY_LOGGERS,
    SENSITIVE_FIELD_EXEMPT_SUFFIXES,
    SENSITIVE_FIELD_PATTERNS,
    SERVICE_NAME,
    SERVICE_VERSION,
)

JWT_PATTERN = re.compile(r"eyJ[\w-]+\.[\w-]+\.[\w-]+")

# =============================================================================
# 마스킹
# =============================================================================


def is_sensitive_key(key: str) -> bool:
    """민감 필드 여부. 식별자/시각 키(refresh_token_id, expires_at 등)는 제외."""
    key_lower = key.lower()
    if key_lower.endswith(SENSITIVE_FIELD_EXEMPT_SUFFIXES):
        return False
    return any(pattern in key_lower for pattern in SENSITIVE_FIELD_PATTERNS)


def mask_value(value: Any) -> str:
    if value is None:
        return MASK_PLACEHOLDER
    text = str(value)
    if len(text) <= MASK_MIN_LENGTH:
        return MASK_PLACEHOLDER
    return f"{text[:MASK_PRESERVE_PREFIX]}...{text[-MASK_PRESERVE_SUFFIX:]}"


def redact_jwts(text: str) -> str:
    """문자열 안의 JWT를 부분 마스킹 (예외 메시지에 토큰이 섞인 경우)."""
    return JWT_PATTERN.sub(lambda match: mask_value(match.group(0)), text)


def mask_sensitive_data(data: Any, key: str | None = None) -> Any:
    """extra 값 재귀 마스킹."""
    if key is not None and is_sensitive_key(key):
        return mask_value(data)
    if isinstance(data, dict):
        return {k: mask_sensitive_data(v, str(k)) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [mask_sensitive_data(item) for item in data]
    if isinstance(data, str):
        return redact_jwts(data)
    return data


# =============================================================================
# 포매터
# =============================================================================


class ECSJsonFormatter(logging.Formatter):
    """Elastic Common Schema (ECS) JSON 포매터.

    extra 필드는 labels 아래에 마스킹된 상태로 기록됩니다.
    """

    def __init__(
        self,
        service_name: str = SERVICE_NAME,
        service_version: str = SERVICE_VERSION,
        environment: str = DEFAULT_ENVIRONMENT,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "@timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "message": redact_jwts(record.getMessage()),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "ecs.version": ECS_VERSION,
            "service.name": self.service_name,
            "service.version": self.service_version,
            "service.environment": self.environment,
        }

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, _ = record.exc_info
            log_obj["error.type"] = exc_type.__name__
            log_obj["error.message"] = redact_jwts(str(exc_value))
            log_obj["error.stack_trace"] = redact_jwts(self.formatException(record.exc_info))

        labels = {
            key: value
            for key, value in record.__dict__.items()
            if key not in EXCLUDED_LOG_RECORD_ATTRS
        }
        if labels:
            log_obj["labels"] = mask_sensitive_data(labels)

        return json.dumps(log_obj, ensure_ascii=False, default=str)


# =============================================================================
# 설정
# =============================================================================


def configure_logging(
    service_name: str = SERVICE_NAME,
    service_version: str = SERVICE_VERSION,
    log_level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """루트 로거 설정.

    환경변수:
        - LOG_LEVEL (default: INFO)
        - LOG_FORMAT: json | text (default: json)
        - ENVIRONMENT (default: dev)
    """
    level_name = (log_level or os.getenv(ENV_KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL)).upper()
    level = getattr(logging, level_name, logging.INFO)
    if json_format is None:
        json_format = os.getenv(ENV_KEY_LOG_FORMAT, DEFAULT_LOG_FORMAT) == "json"

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if json_format:
        handler.setFormatter(
            ECSJsonFormatter(
                service_name,
                service_version,
                os.getenv(ENV_KEY_ENVIRONMENT, DEFAULT_ENVIRONMENT),
            )
        )
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(level)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
