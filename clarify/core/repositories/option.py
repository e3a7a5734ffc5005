"""Option repository implementation."""

from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clarify.core.models.option import Option
from clarify.core.repositories.base import BaseRepository
from clarify.core.schemas.option import OptionCreate


class OptionRepository(BaseRepository[Option, OptionCreate, BaseModel]):
    """Repository for option data access."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Option)

    async def list_for_decision(self, decision_id: UUID) -> list[Option]:
        """Get a decision's options in creation order."""
        stmt = (
            select(self._model)
            .where(self._model.decision_id == decision_id)
            .order_by(self._model.created_at, self._model.id)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_in_decision(self, id: UUID, decision_id: UUID) -> Option | None:
        """Get an option only if it belongs to the decision."""
        stmt = select(self._model).where(
            self._model.id == id,
            self._model.decision_id == decision_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
