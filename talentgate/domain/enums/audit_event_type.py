"""Audit event types and security classification.

Every permission-relevant event carries an AuditEventType and a derived
SecurityLevel. The level is a pure function of the event type so the same
event is always classified the same way, whichever sink stores it.

Categories:
    - Vendor/PoC lifecycle: *_CREATED, *_UPDATED, *_DELETED, POC_VALIDATED
    - Outreach: COMMUNICATION_SENT, VALIDATION_SENT
    - Consent: CONSENT_COLLECTED, CONSENT_REVOKED
    - Access control: PERMISSION_GRANTED, PERMISSION_REVOKED,
      UNAUTHORIZED_ACCESS, LOGIN_ATTEMPT
    - Data and configuration: DATA_EXPORT, SETTINGS_CHANGED

Usage:
    from talentgate.domain.enums import AuditEventType, security_level_for

    level = security_level_for(AuditEventType.UNAUTHORIZED_ACCESS)
    # SecurityLevel.RESTRICTED
"""

from enum import Enum


class AuditEventType(str, Enum):
    """Auditable events.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are snake_case strings for consistency.
    """

    VENDOR_CREATED = "vendor_created"
    VENDOR_UPDATED = "vendor_updated"
    VENDOR_DELETED = "vendor_deleted"

    POC_CREATED = "poc_created"
    POC_UPDATED = "poc_updated"
    POC_DELETED = "poc_deleted"
    POC_VALIDATED = "poc_validated"

    COMMUNICATION_SENT = "communication_sent"
    VALIDATION_SENT = "validation_sent"

    CONSENT_COLLECTED = "consent_collected"
    CONSENT_REVOKED = "consent_revoked"

    PERMISSION_GRANTED = "permission_granted"
    PERMISSION_REVOKED = "permission_revoked"
    LOGIN_ATTEMPT = "login_attempt"
    UNAUTHORIZED_ACCESS = "unauthorized_access"

    DATA_EXPORT = "data_export"
    SETTINGS_CHANGED = "settings_changed"

    @classmethod
    def values(cls) -> list[str]:
        return [event_type.value for event_type in cls]


class SecurityLevel(str, Enum):
    """Data classification of an audit event, least to most sensitive."""

    PUBLIC = "public"
    INTERNAL = "internal"
    CONFIDENTIAL = "confidential"
    RESTRICTED = "restricted"


_RESTRICTED_EVENTS = frozenset(
    {
        AuditEventType.VENDOR_DELETED,
        AuditEventType.POC_DELETED,
        AuditEventType.CONSENT_REVOKED,
        AuditEventType.PERMISSION_GRANTED,
        AuditEventType.PERMISSION_REVOKED,
        AuditEventType.UNAUTHORIZED_ACCESS,
        AuditEventType.SETTINGS_CHANGED,
    }
)

_CONFIDENTIAL_EVENTS = frozenset(
    {
        AuditEventType.CONSENT_COLLECTED,
        AuditEventType.DATA_EXPORT,
    }
)


def security_level_for(event_type: AuditEventType) -> SecurityLevel:
    """Classify an audit event type.

    Args:
        event_type: Event being recorded.

    Returns:
        SecurityLevel: RESTRICTED for destructive or access-control events,
            CONFIDENTIAL for consent collection and exports, INTERNAL otherwise.
    """
    if event_type in _RESTRICTED_EVENTS:
        return SecurityLevel.RESTRICTED
    if event_type in _CONFIDENTIAL_EVENTS:
        return SecurityLevel.CONFIDENTIAL
    return SecurityLevel.INTERNAL
