"""Unit tests for audit sinks.

Tests cover:
- InMemoryAuditAdapter ordering, filtering and limit capping
- PostgresAuditAdapter record()/query() with a mocked AsyncSession
- DatabaseAuditAdapter session-per-call delegation

Architecture:
- Unit tests with mocked AsyncSession
- NO real database dependencies
"""

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from freezegun import freeze_time
from sqlalchemy.exc import SQLAlchemyError

from talentgate.core.enums import ErrorCode
from talentgate.core.result import Failure, Success
from talentgate.domain.entities import AuditEvent, AuditEventFilters
from talentgate.domain.enums import AuditEventType
from talentgate.domain.errors import AuditError
from talentgate.infrastructure.audit import InMemoryAuditAdapter, PostgresAuditAdapter
from talentgate.infrastructure.audit.database_adapter import DatabaseAuditAdapter
from talentgate.infrastructure.persistence.models import AuditEventModel


def _event(
    event_type: AuditEventType = AuditEventType.UNAUTHORIZED_ACCESS,
    actor_id: str | None = "u1",
    resource_id: str | None = None,
) -> AuditEvent:
    return AuditEvent.create(
        event_type=event_type,
        action="vendor:delete",
        actor_id=actor_id,
        actor_roles=("viewer",),
        resource_type="vendor",
        resource_id=resource_id,
        details={"permission": "vendor:delete"},
        success=False,
        error_message="denied",
    )


@pytest.mark.unit
class TestInMemoryAuditAdapter:
    async def test_record_and_query_newest_first(self):
        adapter = InMemoryAuditAdapter()
        with freeze_time("2026-01-01 10:00:00"):
            older = _event(actor_id="u1")
        with freeze_time("2026-01-02 10:00:00"):
            newer = _event(actor_id="u2")

        await adapter.record(older)
        await adapter.record(newer)
        result = await adapter.query(AuditEventFilters())

        assert isinstance(result, Success)
        assert result.value == [newer, older]
        assert adapter.events == (older, newer)

    async def test_query_filters(self):
        adapter = InMemoryAuditAdapter()
        await adapter.record(_event(actor_id="u1", resource_id="v1"))
        await adapter.record(_event(AuditEventType.VENDOR_DELETED, "u2", "v2"))

        result = await adapter.query(AuditEventFilters(user_id="u2"))
        assert [e.resource_id for e in result.value] == ["v2"]

        result = await adapter.query(
            AuditEventFilters(event_type=AuditEventType.UNAUTHORIZED_ACCESS)
        )
        assert [e.actor_id for e in result.value] == ["u1"]

    async def test_date_range(self):
        adapter = InMemoryAuditAdapter()
        with freeze_time("2026-01-01"):
            await adapter.record(_event(actor_id="early"))
        with freeze_time("2026-02-01"):
            await adapter.record(_event(actor_id="late"))

        result = await adapter.query(
            AuditEventFilters(date_from=datetime(2026, 1, 15, tzinfo=UTC))
        )

        assert [e.actor_id for e in result.value] == ["late"]

    async def test_limit_is_capped(self):
        adapter = InMemoryAuditAdapter(max_limit=2)
        for _ in range(5):
            await adapter.record(_event())

        assert len((await adapter.query(AuditEventFilters(limit=100))).value) == 2
        assert len((await adapter.query(AuditEventFilters(limit=0))).value) == 1


@pytest.mark.unit
class TestPostgresAuditAdapterRecord:
    """Test PostgresAuditAdapter.record() method."""

    async def test_record_success(self):
        mock_session = AsyncMock()
        mock_session.add = MagicMock()
        event = _event(resource_id="v1")

        adapter = PostgresAuditAdapter(session=mock_session)
        result = await adapter.record(event)

        assert isinstance(result, Success)
        assert result.value is None

        mock_session.add.assert_called_once()
        row = mock_session.add.call_args[0][0]
        assert isinstance(row, AuditEventModel)
        assert row.id == event.id
        assert row.event_type == "unauthorized_access"
        assert row.actor_roles == ["viewer"]
        assert row.security_level == "restricted"
        assert row.details == {"permission": "vendor:delete"}
        assert row.occurred_at == event.timestamp
        mock_session.commit.assert_awaited_once()

    async def test_record_database_error_rolls_back(self):
        mock_session = AsyncMock()
        mock_session.add = MagicMock()
        mock_session.commit.side_effect = SQLAlchemyError("connection lost")

        adapter = PostgresAuditAdapter(session=mock_session)
        result = await adapter.record(_event())

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuditError)
        assert result.error.code == ErrorCode.AUDIT_RECORD_FAILED
        assert "connection lost" in result.error.message
        assert result.error.details["error_type"] == "SQLAlchemyError"
        mock_session.rollback.assert_awaited_once()

    async def test_record_unexpected_error(self):
        mock_session = AsyncMock()
        mock_session.add = MagicMock(side_effect=RuntimeError("boom"))

        result = await PostgresAuditAdapter(session=mock_session).record(_event())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.AUDIT_RECORD_FAILED


@pytest.mark.unit
class TestPostgresAuditAdapterQuery:
    """Test PostgresAuditAdapter.query() method."""

    async def test_query_maps_rows_to_entities(self):
        event = _event()
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = [
            AuditEventModel.from_entity(event)
        ]
        mock_session = AsyncMock()
        mock_session.execute.return_value = mock_result

        adapter = PostgresAuditAdapter(session=mock_session)
        result = await adapter.query(
            AuditEventFilters(
                event_type=AuditEventType.UNAUTHORIZED_ACCESS,
                user_id="u1",
                resource_type="vendor",
                date_from=datetime(2026, 1, 1, tzinfo=UTC),
            )
        )

        assert isinstance(result, Success)
        assert result.value == [event]

        stmt = mock_session.execute.call_args[0][0]
        compiled = str(stmt)
        assert "audit_events.event_type" in compiled
        assert "audit_events.actor_id" in compiled
        assert "ORDER BY audit_events.occurred_at DESC" in compiled

    async def test_query_empty(self):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_session = AsyncMock()
        mock_session.execute.return_value = mock_result

        result = await PostgresAuditAdapter(session=mock_session).query(
            AuditEventFilters()
        )

        assert result == Success(value=[])

    async def test_query_database_error(self):
        mock_session = AsyncMock()
        mock_session.execute.side_effect = SQLAlchemyError("timeout")

        result = await PostgresAuditAdapter(session=mock_session).query(
            AuditEventFilters(user_id="u1")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.AUDIT_QUERY_FAILED
        assert result.error.details == {"error_type": "SQLAlchemyError", "user_id": "u1"}


@pytest.mark.unit
class TestDatabaseAuditAdapter:
    @staticmethod
    def _database(session) -> MagicMock:
        @asynccontextmanager
        async def factory():
            yield session

        database = MagicMock()
        database.async_session = factory
        return database

    async def test_record_opens_session(self):
        mock_session = AsyncMock()
        mock_session.add = MagicMock()

        adapter = DatabaseAuditAdapter(self._database(mock_session))
        result = await adapter.record(_event())

        assert isinstance(result, Success)
        mock_session.commit.assert_awaited_once()

    async def test_session_failure_becomes_failure(self):
        database = MagicMock()
        database.async_session.side_effect = OSError("no route to host")

        adapter = DatabaseAuditAdapter(database)

        record = await adapter.record(_event())
        query = await adapter.query(AuditEventFilters())

        assert record.error.code == ErrorCode.AUDIT_RECORD_FAILED
        assert query.error.code == ErrorCode.AUDIT_QUERY_FAILED
