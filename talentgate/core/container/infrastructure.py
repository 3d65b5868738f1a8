"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console adapter)
- Database (async SQLAlchemy engine)
- Audit sink (in-memory or PostgreSQL)

Request-scoped:
- Database session
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from talentgate.core.config import get_settings
from talentgate.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from talentgate.domain.protocols import AuditProtocol, LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: human-readable console output
    - testing/ci/production: JSON lines (or whenever LOG_JSON is set)
    """
    from talentgate.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Raises:
        RuntimeError: If DATABASE_URL is not configured.
    """
    settings = get_settings()
    if not settings.database_url:
        raise RuntimeError("DATABASE_URL is not configured")
    return Database(database_url=settings.database_url, echo=settings.db_echo)


@lru_cache()
def get_audit() -> "AuditProtocol":
    """Get the app-scoped audit sink used by the AuditEmitter.

    Selected by AUDIT_BACKEND:
        - 'memory': InMemoryAuditAdapter
        - 'postgres': DatabaseAuditAdapter (one session per write)
    """
    settings = get_settings()
    if settings.audit_backend == "postgres":
        from talentgate.infrastructure.audit.database_adapter import (
            DatabaseAuditAdapter,
        )

        return DatabaseAuditAdapter(
            get_database(), max_limit=settings.audit_query_max_limit
        )

    from talentgate.infrastructure.audit.in_memory_adapter import InMemoryAuditAdapter

    return InMemoryAuditAdapter(max_limit=settings.audit_query_max_limit)


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success and rolls back on exception.
    """
    async with get_database().get_session() as session:
        yield session
