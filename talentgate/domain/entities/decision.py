"""Outcome of one authorization check."""

from dataclasses import dataclass

from talentgate.domain.enums import Permission


@dataclass(frozen=True, slots=True)
class Decision:
    """Allow/deny with the reason for a denial.

    Attributes:
        allowed: Final answer.
        permission: Permission checked (None if the input was not a valid one).
        reason: Why access was denied; None when allowed.
    """

    allowed: bool
    permission: Permission | None
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.allowed
