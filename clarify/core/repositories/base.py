"""Base repository with common CRUD operations."""

from abc import ABC
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clarify.core.database.base import Base

# Type variables for generic repository
ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class BaseRepository(ABC, Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Base repository with common CRUD operations."""

    def __init__(self, session: AsyncSession, model: type[ModelType]) -> None:
        self._session = session
        self._model = model

    async def create(self, obj_in: CreateSchemaType, **extra: Any) -> ModelType:
        """Create a new record.

        ``extra`` carries fields the caller owns but the schema doesn't,
        such as the parent decision id.
        """
        obj_data = obj_in.model_dump(exclude_unset=True)
        obj_data.update(extra)
        db_obj = self._model(**obj_data)
        self._session.add(db_obj)
        await self._session.commit()
        await self._session.refresh(db_obj)
        return db_obj

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get record by ID."""
        stmt = select(self._model).where(self._model.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, id: UUID, obj_in: UpdateSchemaType) -> ModelType | None:
        """Update a record by ID."""
        db_obj = await self.get_by_id(id)
        if not db_obj:
            return None
        return await self._apply_update(db_obj, obj_in)

    async def _apply_update(self, db_obj: ModelType, obj_in: UpdateSchemaType) -> ModelType:
        update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await self._session.commit()
        await self._session.refresh(db_obj)
        return db_obj
