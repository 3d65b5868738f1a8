"""Role grant request and response schemas.

One row per resource category with view/add/edit/delete flags, as shown on
the role management screen.
"""

from pydantic import BaseModel, Field

from talentgate.domain.entities import RoleGrant


class RoleGrantSchema(BaseModel):
    category: str = Field(..., description="Resource slug", examples=["hotlists"])
    can_view: bool = False
    can_add: bool = False
    can_edit: bool = False
    can_delete: bool = False
    is_active: bool = True

    @classmethod
    def from_entity(cls, grant: RoleGrant) -> "RoleGrantSchema":
        return cls(
            category=grant.category,
            can_view=grant.can_view,
            can_add=grant.can_add,
            can_edit=grant.can_edit,
            can_delete=grant.can_delete,
            is_active=grant.is_active,
        )

    def to_entity(self, role: str) -> RoleGrant:
        return RoleGrant(
            role=role,
            category=self.category,
            can_view=self.can_view,
            can_add=self.can_add,
            can_edit=self.can_edit,
            can_delete=self.can_delete,
            is_active=self.is_active,
        )


class RoleGrantsUpdateRequest(BaseModel):
    """Stored rows that replace every row of the role."""

    grants: list[RoleGrantSchema] = Field(default_factory=list)


class RoleGrantsResponse(BaseModel):
    """Effective CRUD grants of a role.

    Attributes:
        role: Role slug.
        version: Matrix version the grants were read from.
        grants: One row per category with CRUD actions.
    """

    role: str = Field(..., examples=["recruiter"])
    version: int = Field(..., description="Matrix version")
    grants: list[RoleGrantSchema] = Field(default_factory=list)
