"""SQLAlchemy Adapters for PostgreSQL.

Port 구현체들을 제공합니다.
"""

from apps.social_auth.infrastructure.persistence_postgres.adapters.flusher_sqla import (
    SqlaFlusher,
)
from apps.social_auth.infrastructure.persistence_postgres.adapters.refresh_token_gateway_sqla import (
    SqlaRefreshTokenGateway,
)
from apps.social_auth.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = [
    "SqlaFlusher",
    "SqlaRefreshTokenGateway",
    "SqlaTransactionManager",
]
