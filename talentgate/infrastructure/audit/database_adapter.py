"""Audit sink that opens its own session per call.

Fire-and-forget writes from the AuditEmitter outlive the request that
triggered them, so they cannot share the request's session.
"""

from talentgate.core.enums import ErrorCode
from talentgate.core.result import Failure, Result
from talentgate.domain.entities import AuditEvent, AuditEventFilters
from talentgate.domain.errors import AuditError
from talentgate.infrastructure.audit.postgres_adapter import PostgresAuditAdapter
from talentgate.infrastructure.persistence.database import Database


class DatabaseAuditAdapter:
    """AuditProtocol implementation delegating to PostgresAuditAdapter."""

    def __init__(self, database: Database, max_limit: int = 1000) -> None:
        self._database = database
        self._max_limit = max_limit

    async def record(self, event: AuditEvent) -> Result[None, AuditError]:
        try:
            async with self._database.async_session() as session:
                return await PostgresAuditAdapter(session, self._max_limit).record(
                    event
                )
        except Exception as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    message=f"Could not open audit session: {e}",
                    details={"error_type": type(e).__name__},
                )
            )

    async def query(
        self, filters: AuditEventFilters
    ) -> Result[list[AuditEvent], AuditError]:
        try:
            async with self._database.async_session() as session:
                return await PostgresAuditAdapter(session, self._max_limit).query(
                    filters
                )
        except Exception as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_QUERY_FAILED,
                    message=f"Could not open audit session: {e}",
                    details={"error_type": type(e).__name__},
                )
            )
