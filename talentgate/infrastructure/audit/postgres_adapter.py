"""PostgreSQL implementation of AuditProtocol.

Inserts into and selects from ``audit_events``. There is no update or
delete path.

Usage:
    adapter = PostgresAuditAdapter(session)
    result = await adapter.record(event)
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from talentgate.core.enums import ErrorCode
from talentgate.core.result import Failure, Result, Success
from talentgate.domain.entities import AuditEvent, AuditEventFilters
from talentgate.domain.errors import AuditError
from talentgate.infrastructure.persistence.models import AuditEventModel


class PostgresAuditAdapter:
    """Session-bound audit sink.

    This adapter is stateless apart from the session it was given.

    Attributes:
        session: SQLAlchemy async session.
        max_limit: Hard cap on rows returned by one query.
    """

    def __init__(self, session: AsyncSession, max_limit: int = 1000) -> None:
        self.session = session
        self.max_limit = max_limit

    async def record(self, event: AuditEvent) -> Result[None, AuditError]:
        """Insert one event and commit.

        Returns:
            Result[None, AuditError]:
                - Success(None) if the row was committed
                - Failure(AuditError) with AUDIT_RECORD_FAILED otherwise
        """
        details = {
            "event_type": event.event_type.value,
            "resource_type": event.resource_type,
        }
        try:
            self.session.add(AuditEventModel.from_entity(event))
            await self.session.commit()
            return Success(value=None)
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    message=f"Failed to record audit event: {e}",
                    details={**details, "error_type": type(e).__name__},
                )
            )
        except Exception as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    message=f"Unexpected error recording audit event: {e}",
                    details={**details, "error_type": type(e).__name__},
                )
            )

    async def query(
        self, filters: AuditEventFilters
    ) -> Result[list[AuditEvent], AuditError]:
        """Select matching events, newest first, capped at max_limit."""
        try:
            limit = max(1, min(filters.limit, self.max_limit))
            stmt = select(AuditEventModel)

            if filters.event_type is not None:
                stmt = stmt.where(AuditEventModel.event_type == filters.event_type.value)
            if filters.user_id is not None:
                stmt = stmt.where(AuditEventModel.actor_id == filters.user_id)
            if filters.resource_type is not None:
                stmt = stmt.where(AuditEventModel.resource_type == filters.resource_type)
            if filters.resource_id is not None:
                stmt = stmt.where(AuditEventModel.resource_id == filters.resource_id)
            if filters.date_from is not None:
                stmt = stmt.where(AuditEventModel.occurred_at >= filters.date_from)
            if filters.date_to is not None:
                stmt = stmt.where(AuditEventModel.occurred_at <= filters.date_to)

            stmt = stmt.order_by(AuditEventModel.occurred_at.desc()).limit(limit)

            result = await self.session.execute(stmt)
            return Success(value=[row.to_entity() for row in result.scalars().all()])

        except SQLAlchemyError as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_QUERY_FAILED,
                    message=f"Failed to query audit events: {e}",
                    details=_filter_details(filters, e),
                )
            )
        except Exception as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_QUERY_FAILED,
                    message=f"Unexpected error querying audit events: {e}",
                    details=_filter_details(filters, e),
                )
            )


def _filter_details(filters: AuditEventFilters, error: Exception) -> dict[str, Any]:
    details: dict[str, Any] = {"error_type": type(error).__name__}
    if filters.user_id is not None:
        details["user_id"] = filters.user_id
    if filters.event_type is not None:
        details["event_type"] = filters.event_type.value
    if filters.resource_type is not None:
        details["resource_type"] = filters.resource_type
    return details
