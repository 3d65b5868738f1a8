"""Machine-readable error codes.

Codes follow the ENTITY_ACTION_REASON convention and are carried by
DomainError subclasses inside Failure results.
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes shared by every layer."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_ROLE = "invalid_role"
    INVALID_PERMISSION = "invalid_permission"
    INVALID_DATE_RANGE = "invalid_date_range"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_NOT_OWNED = "resource_not_owned"
    NO_ACTOR = "no_actor"

    # Audit trail errors
    AUDIT_RECORD_FAILED = "audit_record_failed"
    AUDIT_QUERY_FAILED = "audit_query_failed"

    # Role management errors
    ROLE_GRANTS_LOAD_FAILED = "role_grants_load_failed"
    ROLE_GRANTS_SAVE_FAILED = "role_grants_save_failed"
