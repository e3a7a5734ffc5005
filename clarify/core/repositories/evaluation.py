"""Evaluation repository implementation."""

import logging
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from clarify.core.models.evaluation import Evaluation
from clarify.core.repositories.base import BaseRepository
from clarify.core.schemas.evaluation import EvaluationCreate

logger = logging.getLogger(__name__)


class EvaluationRepository(BaseRepository[Evaluation, EvaluationCreate, BaseModel]):
    """Repository for evaluation data access."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Evaluation)

    async def list_for_decision(self, decision_id: UUID) -> list[Evaluation]:
        """Get a decision's evaluations in creation order."""
        stmt = (
            select(self._model)
            .where(self._model.decision_id == decision_id)
            .order_by(self._model.created_at, self._model.id)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_for_pair(
        self, decision_id: UUID, option_id: UUID, criteria_id: UUID
    ) -> Evaluation | None:
        """Get the evaluation for an (option, criterion) pair."""
        stmt = select(self._model).where(
            self._model.decision_id == decision_id,
            self._model.option_id == option_id,
            self._model.criteria_id == criteria_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        decision_id: UUID,
        option_id: UUID,
        criteria_id: UUID,
        pros: list[dict[str, Any]],
        cons: list[dict[str, Any]],
    ) -> Evaluation:
        """Create the evaluation for a pair, or replace its pros/cons.

        If a concurrent save inserts the pair first, the insert is rolled
        back and that row is updated instead.
        """
        evaluation = await self.get_for_pair(decision_id, option_id, criteria_id)
        if evaluation is None:
            evaluation = Evaluation(
                decision_id=decision_id,
                option_id=option_id,
                criteria_id=criteria_id,
                pros=pros,
                cons=cons,
            )
            self._session.add(evaluation)
            try:
                await self._session.commit()
            except IntegrityError:
                await self._session.rollback()
                evaluation = await self.get_for_pair(decision_id, option_id, criteria_id)
                if evaluation is None:
                    raise
                logger.debug("Evaluation for pair inserted concurrently, updating it")
            else:
                await self._session.refresh(evaluation)
                return evaluation

        evaluation.pros = pros
        evaluation.cons = cons
        await self._session.commit()
        await self._session.refresh(evaluation)
        return evaluation
