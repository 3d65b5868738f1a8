"""Core errors package.

Usage:
    from talentgate.core.errors import DomainError, AuthorizationError
"""

from talentgate.core.errors.common_errors import AuthorizationError, ValidationError
from talentgate.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "AuthorizationError",
]
