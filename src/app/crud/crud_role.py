from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.app.crud.base import CRUDBase
from src.app.schemas.role import RoleCreate
from src.app.models.role import Role


class CRUDRole(CRUDBase[Role, RoleCreate]):
    """CRUD operations for roles."""

    async def get_by_name(self, db: AsyncSession, *, name: str) -> List[Role]:
        """Get every role with the given name."""
        stmt = select(Role).where(Role.name == name).order_by(Role.created_at)
        result = await db.execute(stmt)
        return list(result.scalars().all())


role = CRUDRole(Role, "roles")
