"""Decision repository implementation.

Every lookup is scoped to an owner id; a decision owned by someone else
behaves exactly like a missing one.
"""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from clarify.core.models.decision import Decision
from clarify.core.repositories.base import BaseRepository
from clarify.core.schemas.decision import DecisionCreate, DecisionUpdate


class DecisionRepository(BaseRepository[Decision, DecisionCreate, DecisionUpdate]):
    """Repository for decision data access."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Decision)

    async def get_for_owner(self, id: UUID, owner_id: str) -> Decision | None:
        """Get a decision by ID if it belongs to the owner."""
        stmt = select(self._model).where(
            self._model.id == id,
            self._model.owner_id == owner_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_owner(
        self, owner_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[Decision]:
        """Get the owner's decisions, newest first."""
        stmt = (
            select(self._model)
            .where(self._model.owner_id == owner_id)
            .order_by(self._model.created_at.desc(), self._model.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def count_for_owner(self, owner_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(self._model)
            .where(self._model.owner_id == owner_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    async def update_for_owner(
        self, id: UUID, owner_id: str, obj_in: DecisionUpdate
    ) -> Decision | None:
        """Update a decision if it belongs to the owner."""
        decision = await self.get_for_owner(id, owner_id)
        if not decision:
            return None
        return await self._apply_update(decision, obj_in)

    async def delete_for_owner(self, id: UUID, owner_id: str) -> bool:
        """Delete a decision; options, criteria and evaluations cascade."""
        stmt = delete(self._model).where(
            self._model.id == id,
            self._model.owner_id == owner_id,
        )
        result = await self._session.execute(stmt)
        await self._session.commit()
        return result.rowcount > 0
