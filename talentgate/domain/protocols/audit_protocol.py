"""Audit trail protocol (port).

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides ADAPTERS (InMemoryAuditAdapter, PostgresAuditAdapter)
- The AuditEmitter uses the protocol and never knows which sink it writes to

Usage:
    result = await audit.record(event)
    result = await audit.query(AuditEventFilters(user_id="u1", limit=50))
"""

from typing import Protocol

from talentgate.core.result import Result
from talentgate.domain.entities import AuditEvent, AuditEventFilters
from talentgate.domain.errors import AuditError


class AuditProtocol(Protocol):
    """Protocol for audit sinks.

    Records are immutable: implementations never update or delete.

    Error Handling:
        All methods return Result types (Success or Failure).
        NEVER raise exceptions - wrap in Failure(AuditError(...)) instead.
    """

    async def record(self, event: AuditEvent) -> Result[None, AuditError]:
        """Append one audit event.

        Args:
            event: Fully built event (id, timestamp and level already set).

        Returns:
            Result[None, AuditError]:
                - Success(None) if the event was stored
                - Failure(AuditError) with AUDIT_RECORD_FAILED otherwise
        """
        ...

    async def query(
        self, filters: AuditEventFilters
    ) -> Result[list[AuditEvent], AuditError]:
        """Read events matching filters.

        Note:
            - Results ordered by timestamp DESC (newest first)
            - Limit capped at the sink's maximum (1000 by default)

        Returns:
            Result[list[AuditEvent], AuditError]:
                - Success(events) (list may be empty)
                - Failure(AuditError) with AUDIT_QUERY_FAILED
        """
        ...
