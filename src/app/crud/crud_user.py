from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.app.crud.base import CRUDBase
from src.app.schemas.user import UserCreate
from src.app.models.core import User


class CRUDUser(CRUDBase[User, UserCreate]):
    """CRUD operations for user management."""

    async def get_by_username(self, db: AsyncSession, *, username: str) -> List[User]:
        """Get every user with the given username."""
        stmt = select(User).where(User.username == username).order_by(User.created_at)
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_email(self, db: AsyncSession, *, email: str) -> List[User]:
        """Get every user with the given email."""
        stmt = select(User).where(User.email == email).order_by(User.created_at)
        result = await db.execute(stmt)
        return list(result.scalars().all())


user = CRUDUser(User, "users")
