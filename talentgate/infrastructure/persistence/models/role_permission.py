"""Role permission database model.

One row per (role, category) with the four flags of the role management
screen.
"""

from sqlalchemy import Boolean, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from talentgate.domain.entities import RoleGrant
from talentgate.infrastructure.persistence.base import BaseMutableModel


class RolePermissionModel(BaseMutableModel):
    """Stored direct grants of a role on a resource category."""

    __tablename__ = "role_permissions"

    role: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    can_view: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_add: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_edit: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_delete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        UniqueConstraint("role", "category", name="uq_role_permissions_role_category"),
    )

    def to_entity(self) -> RoleGrant:
        return RoleGrant(
            role=self.role,
            category=self.category,
            can_view=self.can_view,
            can_add=self.can_add,
            can_edit=self.can_edit,
            can_delete=self.can_delete,
            is_active=self.is_active,
        )

    @classmethod
    def from_entity(cls, grant: RoleGrant) -> "RolePermissionModel":
        return cls(
            role=grant.role,
            category=grant.category,
            can_view=grant.can_view,
            can_add=grant.can_add,
            can_edit=grant.can_edit,
            can_delete=grant.can_delete,
            is_active=grant.is_active,
        )
