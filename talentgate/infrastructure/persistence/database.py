"""Database connection and session management.

Async SQLAlchemy engine plus a session context manager that commits on
success and rolls back on error. Used by the audit sink and the role
grant repository.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


class Database:
    """Owns the async engine for audit_events and role_permissions.

    Usage:
        db = Database(settings.database_url)
        async with db.get_session() as session:
            await RolePermissionRepository(session).list_all()
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 10,
        max_overflow: int = 0,
    ) -> None:
        """
        Args:
            database_url: Async database URL (e.g., postgresql+asyncpg://...).
            echo: Log all SQL statements.
            pool_size: Connections kept in the pool (PostgreSQL only).
            max_overflow: Extra connections above pool_size (PostgreSQL only).
        """
        engine_kwargs: dict[str, object] = {"echo": echo, "pool_pre_ping": True}
        if database_url.startswith("postgresql"):
            engine_kwargs.update(pool_size=pool_size, max_overflow=max_overflow)
        self.engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional session.

        Yields:
            AsyncSession: Committed on success, rolled back on exception.
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create all tables (development and tests only)."""
        from talentgate.infrastructure.persistence.base import BaseModel
        from talentgate.infrastructure.persistence.models import (  # noqa: F401
            AuditEventModel,
            RolePermissionModel,
        )

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def close(self) -> None:
        """Dispose the engine (application shutdown)."""
        await self.engine.dispose()
