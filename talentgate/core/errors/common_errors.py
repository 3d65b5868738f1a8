"""Error classes shared across layers.

Error Types:
- ValidationError: Input validation failures
- AuthorizationError: Actor lacks the permission an operation requires

Usage:
    return Failure(error=AuthorizationError(
        code=ErrorCode.PERMISSION_DENIED,
        message="Requires permission 'audit:view'",
        required_permission="audit:view",
    ))
"""

from dataclasses import dataclass

from talentgate.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    The message names the missing permission or role so the UI can render
    a readable "forbidden" state. It never contains internal identifiers.

    Attributes:
        required_permission: Permission that was required.
        role: Role the actor held when the check failed.
    """

    required_permission: str | None = None
    role: str | None = None
