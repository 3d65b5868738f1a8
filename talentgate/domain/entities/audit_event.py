"""Audit event entity and query filters.

Audit events are append-only: created once by the emitter, written once by
a sink, never updated or deleted.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from talentgate.domain.enums import AuditEventType, SecurityLevel, security_level_for


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditEvent:
    """One immutable audit record.

    Attributes:
        id: Time-ordered identifier (UUIDv7).
        event_type: What happened.
        actor_id: Who did it (None for system actions).
        actor_roles: Roles held at the time.
        timestamp: When it happened (UTC).
        resource_type: Kind of record affected.
        resource_id: Record affected.
        action: Verb or ``resource:action`` that was attempted.
        details: Extra structured context.
        success: Whether the action was allowed and completed.
        security_level: Classification derived from event_type.
        error_message: Reason for failure, if any.
    """

    id: UUID
    event_type: AuditEventType
    actor_id: str | None
    actor_roles: tuple[str, ...]
    timestamp: datetime
    resource_type: str | None
    resource_id: str | None
    action: str
    details: dict[str, Any] = field(default_factory=dict)
    success: bool = True
    security_level: SecurityLevel = SecurityLevel.INTERNAL
    error_message: str | None = None

    @classmethod
    def create(
        cls,
        *,
        event_type: AuditEventType,
        action: str,
        actor_id: str | None,
        actor_roles: tuple[str, ...] = (),
        resource_type: str | None = None,
        resource_id: str | None = None,
        details: dict[str, Any] | None = None,
        success: bool = True,
        error_message: str | None = None,
    ) -> "AuditEvent":
        """Create a new event stamped with id, time and security level."""
        return cls(
            id=uuid7(),
            event_type=event_type,
            actor_id=actor_id,
            actor_roles=tuple(actor_roles),
            timestamp=datetime.now(UTC),
            resource_type=resource_type,
            resource_id=resource_id,
            action=action,
            details=dict(details or {}),
            success=success,
            security_level=security_level_for(event_type),
            error_message=error_message,
        )


def _aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditEventFilters:
    """Query filters for the audit trail. All are optional and ANDed.

    Attributes:
        event_type: Only events of this type.
        user_id: Only events by this actor.
        resource_type: Only events on this kind of record.
        resource_id: Only events on this record.
        date_from: Inclusive lower bound on timestamp.
        date_to: Inclusive upper bound on timestamp.
        limit: Maximum rows (capped by the sink).
    """

    event_type: AuditEventType | None = None
    user_id: str | None = None
    resource_type: str | None = None
    resource_id: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    limit: int = 100

    def matches(self, event: AuditEvent) -> bool:
        if self.event_type is not None and event.event_type != self.event_type:
            return False
        if self.user_id is not None and event.actor_id != self.user_id:
            return False
        if self.resource_type is not None and event.resource_type != self.resource_type:
            return False
        if self.resource_id is not None and event.resource_id != self.resource_id:
            return False
        if self.date_from is not None and event.timestamp < _aware(self.date_from):
            return False
        if self.date_to is not None and event.timestamp > _aware(self.date_to):
            return False
        return True

    @property
    def has_valid_range(self) -> bool:
        """False when date_from is after date_to."""
        if self.date_from is None or self.date_to is None:
            return True
        return _aware(self.date_from) <= _aware(self.date_to)
