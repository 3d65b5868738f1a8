"""In-process audit sink.

Keeps events in an append-only list. Used for the ``memory`` audit
backend, CLIs and tests.
"""

from talentgate.core.result import Result, Success
from talentgate.domain.entities import AuditEvent, AuditEventFilters
from talentgate.domain.errors import AuditError


class InMemoryAuditAdapter:
    """AuditProtocol implementation backed by a list.

    Attributes:
        max_limit: Hard cap on rows returned by one query.
    """

    def __init__(self, max_limit: int = 1000) -> None:
        self.max_limit = max_limit
        self._events: list[AuditEvent] = []

    @property
    def events(self) -> tuple[AuditEvent, ...]:
        """Snapshot of everything recorded, oldest first."""
        return tuple(self._events)

    async def record(self, event: AuditEvent) -> Result[None, AuditError]:
        self._events.append(event)
        return Success(value=None)

    async def query(
        self, filters: AuditEventFilters
    ) -> Result[list[AuditEvent], AuditError]:
        """Matching events, newest first, capped at max_limit."""
        limit = max(1, min(filters.limit, self.max_limit))
        indexed = [
            (position, event)
            for position, event in enumerate(self._events)
            if filters.matches(event)
        ]
        indexed.sort(key=lambda item: (item[1].timestamp, item[0]), reverse=True)
        return Success(value=[event for _, event in indexed[:limit]])
