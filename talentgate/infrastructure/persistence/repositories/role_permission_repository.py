"""SQLAlchemy repository for stored role grants."""

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from talentgate.core.enums import ErrorCode
from talentgate.core.errors import DomainError
from talentgate.core.result import Failure, Result, Success
from talentgate.domain.entities import RoleGrant
from talentgate.infrastructure.persistence.models import RolePermissionModel


class RolePermissionRepository:
    """RoleGrantRepositoryProtocol implementation over ``role_permissions``.

    Attributes:
        session: SQLAlchemy async session (caller owns its lifecycle).
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> Result[list[RoleGrant], DomainError]:
        """Return every row ordered by role and category.

        Inactive rows are included; they clear the CRUD grants of their
        category when merged.
        """
        try:
            stmt = select(RolePermissionModel).order_by(
                RolePermissionModel.role, RolePermissionModel.category
            )
            result = await self.session.execute(stmt)
            return Success(value=[row.to_entity() for row in result.scalars().all()])
        except SQLAlchemyError as e:
            return Failure(
                error=DomainError(
                    code=ErrorCode.ROLE_GRANTS_LOAD_FAILED,
                    message=f"Failed to load role grants: {e}",
                    details={"error_type": type(e).__name__},
                )
            )

    async def replace_for_role(
        self, role: str, grants: list[RoleGrant]
    ) -> Result[None, DomainError]:
        """Delete the role's rows and insert the new ones in one commit."""
        try:
            await self.session.execute(
                delete(RolePermissionModel).where(RolePermissionModel.role == role)
            )
            for grant in grants:
                self.session.add(RolePermissionModel.from_entity(grant))
            await self.session.commit()
            return Success(value=None)
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(
                error=DomainError(
                    code=ErrorCode.ROLE_GRANTS_SAVE_FAILED,
                    message=f"Failed to save role grants: {e}",
                    details={"role": role, "error_type": type(e).__name__},
                )
            )
