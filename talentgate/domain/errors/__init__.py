"""Domain errors package.

Usage:
    from talentgate.domain.errors import AuditError, UnknownRoleError
"""

from talentgate.domain.errors.audit_error import AuditError
from talentgate.domain.errors.authorization_errors import NoActorError, UnknownRoleError

__all__ = [
    "AuditError",
    "NoActorError",
    "UnknownRoleError",
]
