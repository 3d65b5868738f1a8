"""Audit event database model.

The ``audit_events`` table is append-only. The application only INSERTs
and SELECTs; there is no update or delete path.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from talentgate.domain.entities import AuditEvent
from talentgate.domain.enums import AuditEventType, SecurityLevel
from talentgate.infrastructure.persistence.base import BaseModel


class AuditEventModel(BaseModel):
    """Audit event row (immutable).

    Fields:
        id: Event id (UUIDv7 from the domain event)
        created_at: Insertion time (from BaseModel)
        occurred_at: When the event happened (domain timestamp)
        event_type: AuditEventType value
        actor_id: Who acted (None for system actions)
        actor_roles: Roles held at the time
        resource_type / resource_id: What was affected
        action: Attempted verb or ``resource:action``
        details: Extra context (JSON)
        success: Whether the action was allowed
        security_level: SecurityLevel value
        error_message: Failure reason

    Indexes:
        - idx_audit_events_actor_type: (actor_id, event_type)
        - idx_audit_events_resource: (resource_type, resource_id)
    """

    __tablename__ = "audit_events"

    occurred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    event_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    actor_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    actor_roles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    resource_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    resource_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    action: Mapped[str] = mapped_column(String(100), nullable=False)
    details: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    success: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    security_level: Mapped[str] = mapped_column(String(20), nullable=False)
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("idx_audit_events_actor_type", "actor_id", "event_type"),
        Index("idx_audit_events_resource", "resource_type", "resource_id"),
    )

    @classmethod
    def from_entity(cls, event: AuditEvent) -> "AuditEventModel":
        return cls(
            id=event.id,
            occurred_at=event.timestamp,
            event_type=event.event_type.value,
            actor_id=event.actor_id,
            actor_roles=list(event.actor_roles),
            resource_type=event.resource_type,
            resource_id=event.resource_id,
            action=event.action,
            details=dict(event.details),
            success=event.success,
            security_level=event.security_level.value,
            error_message=event.error_message,
        )

    def to_entity(self) -> AuditEvent:
        return AuditEvent(
            id=self.id,
            event_type=AuditEventType(self.event_type),
            actor_id=self.actor_id,
            actor_roles=tuple(self.actor_roles or ()),
            timestamp=self.occurred_at,
            resource_type=self.resource_type,
            resource_id=self.resource_id,
            action=self.action,
            details=dict(self.details or {}),
            success=self.success,
            security_level=SecurityLevel(self.security_level),
            error_message=self.error_message,
        )
