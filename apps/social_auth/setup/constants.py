"""
Service Constants (Single Source of Truth)

정적 상수 정의 - 빌드 타임에 결정되며 환경변수로 변경되지 않음
"""

from __future__ import annotations

# =============================================================================
# Service Identity
# =============================================================================

SERVICE_NAME = "social-auth"
SERVICE_VERSION = "1.0.0"

# =============================================================================
# Logging Constants (12-Factor App Compliance)
# =============================================================================

ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

# 로그 레코드에서 제외할 기본 속성
EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# 노이즈가 많은 로거 목록 (레벨 조정 대상)
NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "asyncio",
    "sqlalchemy.engine",
)

# =============================================================================
# PII Masking Configuration
# =============================================================================

SENSITIVE_FIELD_PATTERNS = frozenset(
    {"password", "secret", "token", "api_key", "authorization"}
)
# 레코드 식별자(refresh_token_id 등)는 토큰 값이 아니므로 마스킹하지 않음
SENSITIVE_FIELD_EXEMPT_SUFFIXES = ("_id", "_at")
MASK_PLACEHOLDER = "***REDACTED***"
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

# =============================================================================
# Token Defaults
# =============================================================================

ACCESS_TOKEN_TTL_SECONDS = 15 * 60
REFRESH_TOKEN_TTL_SECONDS = 30 * 24 * 60 * 60
ACCESS_TOKEN_KEY_PREFIX = "access_token:"
MIN_SIGNING_KEY_BYTES = 32

# =============================================================================
# Provider HTTP Timeouts (seconds)
# =============================================================================

HTTP_CONNECT_TIMEOUT = 5.0
HTTP_READ_TIMEOUT = 20.0
