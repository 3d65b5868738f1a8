"""Programming errors raised by the authorization core.

These are exceptions, not Result values: they mean the caller broke the
contract (a role outside the closed set, an evaluator reached without an
actor). Ordinary denials are the value ``False``.
"""


class UnknownRoleError(ValueError):
    """Raised when a role value is not a member of Role."""

    def __init__(self, role: object) -> None:
        """Initialize unknown role error.

        Args:
            role: Offending role value.
        """
        super().__init__(f"Unknown role: {role!r}")
        self.role = role


class NoActorError(RuntimeError):
    """Raised when evaluation is attempted without an actor."""

    def __init__(self) -> None:
        super().__init__("Permission evaluation requires an actor")
