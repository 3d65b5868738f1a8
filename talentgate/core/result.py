"""Result types for operations whose failures are expected outcomes.

Authorization denials and audit sink failures are normal events in this
package, so they travel as values instead of exceptions. Callers pattern
match on the result.

Usage:
    result = await audit.record(event)
    match result:
        case Success():
            ...
        case Failure(error):
            logger.error("audit_write_failed", code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
