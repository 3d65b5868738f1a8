"""Audit trail error types.

Used when audit trail recording or querying fails.

Usage:
    from talentgate.domain.errors import AuditError
    from talentgate.core.enums import ErrorCode
    from talentgate.core.result import Failure

    return Failure(error=AuditError(
        code=ErrorCode.AUDIT_RECORD_FAILED,
        message="Failed to record audit event: database connection lost",
    ))
"""

from dataclasses import dataclass

from talentgate.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditError(DomainError):
    """Audit sink failure.

    Attributes:
        code: ErrorCode enum (AUDIT_RECORD_FAILED, AUDIT_QUERY_FAILED).
        message: Human-readable message.
        details: Additional context.
    """

    pass  # Inherits all fields from DomainError
