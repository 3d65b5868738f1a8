"""Audit sinks implementing AuditProtocol."""

from talentgate.infrastructure.audit.in_memory_adapter import InMemoryAuditAdapter
from talentgate.infrastructure.audit.postgres_adapter import PostgresAuditAdapter

__all__ = ["InMemoryAuditAdapter", "PostgresAuditAdapter"]
