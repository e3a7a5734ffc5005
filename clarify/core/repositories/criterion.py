"""Criterion repository implementation."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clarify.core.models.criterion import Criterion
from clarify.core.repositories.base import BaseRepository
from clarify.core.schemas.criterion import CriterionCreate, CriterionUpdate


class CriterionRepository(BaseRepository[Criterion, CriterionCreate, CriterionUpdate]):
    """Repository for criterion data access."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Criterion)

    async def list_for_decision(self, decision_id: UUID) -> list[Criterion]:
        """Get a decision's criteria in creation order."""
        stmt = (
            select(self._model)
            .where(self._model.decision_id == decision_id)
            .order_by(self._model.created_at, self._model.id)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_in_decision(self, id: UUID, decision_id: UUID) -> Criterion | None:
        """Get a criterion only if it belongs to the decision."""
        stmt = select(self._model).where(
            self._model.id == id,
            self._model.decision_id == decision_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, decision_id: UUID, name: str) -> Criterion | None:
        """Get a criterion by exact (case-sensitive) name within a decision."""
        stmt = (
            select(self._model)
            .where(
                self._model.decision_id == decision_id,
                self._model.name == name,
            )
            .order_by(self._model.created_at, self._model.id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
