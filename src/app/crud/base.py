from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from src.app.core.exceptions import ResourceNotFoundError
from src.app.models.base import Base
from src.app.utils.validation import parse_uuid

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType]):
    def __init__(self, model: Type[ModelType], resource_type: str):
        """
        CRUD object with default methods to Create, Read, Save, Delete.
        **Parameters**
        * `model`: A SQLAlchemy model class
        * `resource_type`: JSON:API type name of the resource, used in errors
        """
        self.model = model
        self.resource_type = resource_type

    async def count(self, db: AsyncSession) -> int:
        """Count all objects."""
        stmt = select(func.count()).select_from(self.model)
        result = await db.execute(stmt)
        return result.scalar_one()

    async def get(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """Get a single object by ID, or None when it does not resolve."""
        uuid = parse_uuid(id)
        if uuid is None:
            return None
        return await db.get(self.model, uuid)

    async def get_or_raise(self, db: AsyncSession, *, id: Any) -> ModelType:
        """Get a single object by ID.

        Raises:
            ResourceNotFoundError: If no object has the given ID
        """
        obj = await self.get(db, id=id)
        if obj is None:
            raise ResourceNotFoundError(self.resource_type, id)
        return obj

    async def get_many(self, db: AsyncSession, *, ids: Iterable[Any]) -> List[ModelType]:
        """Get every object whose ID is in `ids`.

        IDs that do not resolve, malformed ones included, are silently left out
        of the result. Duplicate IDs yield a single object.
        """
        uuids = {uuid for uuid in (parse_uuid(id) for id in ids) if uuid is not None}
        if not uuids:
            return []
        stmt = select(self.model).where(self.model.id.in_(uuids))
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def get_multi(
        self, db: AsyncSession, *, skip: int = 0, limit: Optional[int] = 100
    ) -> List[ModelType]:
        """Get multiple objects.

        Args:
            db: Database session
            skip: Number of records to skip
            limit: Maximum number of records to return, None for no limit

        Returns:
            List[ModelType]: List of model objects ordered by creation time
        """
        stmt = select(self.model).order_by(self.model.created_at, self.model.id).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """Create a new object."""
        obj_in_data = obj_in.model_dump()
        db_obj = self.model(**obj_in_data)
        return await self.save(db, db_obj=db_obj)

    async def save(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """Persist a new or modified object and return it."""
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def remove(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """Remove an object."""
        obj = await self.get(db, id=id)
        if not obj:
            return None
        await db.delete(obj)
        await db.commit()
        return obj

