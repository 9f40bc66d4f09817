"""SQLAlchemy error translation."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from apps.social_auth.application.common.exceptions.gateway import StoreUnavailableError

logger = logging.getLogger(__name__)

STORE_NAME = "postgres"


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """SQLAlchemy / 커넥션 오류를 StoreUnavailableError로 변환."""
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        logger.error(
            "Refresh token store operation failed",
            extra={"operation": operation, "error": str(e)},
        )
        raise StoreUnavailableError(STORE_NAME, operation, str(e)) from e
