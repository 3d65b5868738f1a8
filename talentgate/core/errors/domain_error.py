"""Base error class for Result-based error handling.

DomainError does NOT inherit from Exception. Errors of this family are
returned inside Failure, never raised.

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass
from typing import Any

from talentgate.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message, safe to show to end users.
        details: Optional context for logs and debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
