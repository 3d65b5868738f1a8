"""Stored role grant row: one role, one resource category, four flags.

This mirrors the role management screen, where an administrator ticks
view/add/edit/delete per category. Flags translate to the ``view``,
``create``, ``edit`` and ``delete`` actions of the category.
"""

from dataclasses import dataclass

from talentgate.domain.enums import Action, Permission

_FLAG_ACTIONS: tuple[tuple[str, Action], ...] = (
    ("can_view", Action.VIEW),
    ("can_add", Action.CREATE),
    ("can_edit", Action.EDIT),
    ("can_delete", Action.DELETE),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class RoleGrant:
    """Direct grants of one role on one resource category.

    Attributes:
        role: Role slug.
        category: Resource slug (e.g. ``bench_resources``).
        can_view: Grants ``category:view``.
        can_add: Grants ``category:create``.
        can_edit: Grants ``category:edit``.
        can_delete: Grants ``category:delete``.
        is_active: Inactive rows grant nothing.
    """

    role: str
    category: str
    can_view: bool = False
    can_add: bool = False
    can_edit: bool = False
    can_delete: bool = False
    is_active: bool = True

    def to_permissions(self) -> tuple[frozenset[Permission], tuple[str, ...]]:
        """Translate flags into permissions.

        Returns:
            Tuple of (granted permissions, ``resource:action`` strings that
            are outside the vocabulary and therefore skipped).
        """
        if not self.is_active:
            return frozenset(), ()
        granted: set[Permission] = set()
        skipped: list[str] = []
        for flag, action in _FLAG_ACTIONS:
            if not getattr(self, flag):
                continue
            permission = Permission.from_parts(self.category, action)
            if permission is None:
                skipped.append(f"{self.category}:{action.value}")
            else:
                granted.add(permission)
        return frozenset(granted), tuple(skipped)

    @classmethod
    def from_permissions(
        cls, role: str, category: str, permissions: frozenset[Permission]
    ) -> "RoleGrant":
        """Build the row for a category from a permission set."""
        actions = {p.action for p in permissions if p.resource.value == category}
        return cls(
            role=role,
            category=category,
            can_view=Action.VIEW in actions,
            can_add=Action.CREATE in actions,
            can_edit=Action.EDIT in actions,
            can_delete=Action.DELETE in actions,
        )
