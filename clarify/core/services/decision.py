"""Decision service: owner-scoped CRUD plus analysis.

Loads the snapshot for a decision from the repositories, converts it into
plain engine records and hands it to the analysis engine.
"""

import logging
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from clarify.core.exceptions import NotFoundError, ValidationError
from clarify.core.models import Criterion, Decision, Evaluation, Option
from clarify.core.repositories import (
    CriterionRepository,
    DecisionRepository,
    EvaluationRepository,
    OptionRepository,
)
from clarify.core.schemas.criterion import CriterionCreate
from clarify.core.schemas.decision import DecisionCreate, DecisionUpdate
from clarify.core.schemas.evaluation import EvaluationCreate
from clarify.core.schemas.option import OptionCreate
from clarify.core.services.analysis import (
    AnalysisReport,
    CriterionInput,
    EvaluationInput,
    ImpactItem,
    OptionInput,
    analyze,
)

logger = logging.getLogger(__name__)


@dataclass
class DecisionSnapshot:
    """A decision with everything recorded against it, read at one point in time."""

    decision: Decision
    options: list[Option]
    criteria: list[Criterion]
    evaluations: list[Evaluation]


def _impact_items(raw: list[dict[str, Any]] | None) -> tuple[ImpactItem, ...]:
    return tuple(
        ImpactItem(text=item.get("text", ""), impact_score=int(item.get("impactScore", 0)))
        for item in raw or ()
    )


def to_engine_inputs(
    snapshot: DecisionSnapshot,
) -> tuple[list[OptionInput], list[CriterionInput], list[EvaluationInput]]:
    """Convert ORM rows into the engine's plain input records."""
    options = [OptionInput(id=o.id, name=o.name) for o in snapshot.options]
    criteria = [
        CriterionInput(id=c.id, name=c.name, weight=c.weight) for c in snapshot.criteria
    ]
    evaluations = [
        EvaluationInput(
            option_id=e.option_id,
            criteria_id=e.criteria_id,
            pros=_impact_items(e.pros),
            cons=_impact_items(e.cons),
        )
        for e in snapshot.evaluations
    ]
    return options, criteria, evaluations


class DecisionService:
    """Service for decisions and the entities recorded against them."""

    def __init__(
        self,
        decision_repository: DecisionRepository,
        option_repository: OptionRepository,
        criterion_repository: CriterionRepository,
        evaluation_repository: EvaluationRepository,
    ) -> None:
        self._decision_repository = decision_repository
        self._option_repository = option_repository
        self._criterion_repository = criterion_repository
        self._evaluation_repository = evaluation_repository

    async def create_decision(self, owner_id: str, data: DecisionCreate) -> Decision:
        decision = await self._decision_repository.create(data, owner_id=owner_id)
        logger.info(
            "Created decision '%s'", decision.title,
            extra={"decision_id": decision.id, "owner_id": owner_id},
        )
        return decision

    async def list_decisions(self, owner_id: str) -> list[Decision]:
        return await self._decision_repository.list_for_owner(owner_id)

    async def count_decisions(self, owner_id: str) -> int:
        return await self._decision_repository.count_for_owner(owner_id)

    async def get_decision(self, decision_id: UUID, owner_id: str) -> Decision:
        """Get a decision owned by the caller.

        Raises:
            NotFoundError: If it doesn't exist or belongs to someone else.
        """
        decision = await self._decision_repository.get_for_owner(decision_id, owner_id)
        if not decision:
            raise NotFoundError("Decision", decision_id)
        return decision

    async def get_snapshot(self, decision_id: UUID, owner_id: str) -> DecisionSnapshot:
        decision = await self.get_decision(decision_id, owner_id)
        options = await self._option_repository.list_for_decision(decision.id)
        criteria = await self._criterion_repository.list_for_decision(decision.id)
        evaluations = await self._evaluation_repository.list_for_decision(decision.id)
        return DecisionSnapshot(decision, options, criteria, evaluations)

    async def update_decision(
        self, decision_id: UUID, owner_id: str, data: DecisionUpdate
    ) -> Decision:
        decision = await self._decision_repository.update_for_owner(
            decision_id, owner_id, data
        )
        if not decision:
            raise NotFoundError("Decision", decision_id)
        return decision

    async def delete_decision(self, decision_id: UUID, owner_id: str) -> None:
        deleted = await self._decision_repository.delete_for_owner(decision_id, owner_id)
        if not deleted:
            raise NotFoundError("Decision", decision_id)
        logger.info("Deleted decision", extra={"decision_id": decision_id, "owner_id": owner_id})

    async def add_option(
        self, decision_id: UUID, owner_id: str, data: OptionCreate
    ) -> Option:
        decision = await self.get_decision(decision_id, owner_id)
        return await self._option_repository.create(data, decision_id=decision.id)

    async def add_criterion(
        self, decision_id: UUID, owner_id: str, data: CriterionCreate
    ) -> Criterion:
        decision = await self.get_decision(decision_id, owner_id)
        return await self._criterion_repository.create(data, decision_id=decision.id)

    async def save_evaluation(
        self, decision_id: UUID, owner_id: str, data: EvaluationCreate
    ) -> Evaluation:
        """Create or replace the evaluation for an (option, criterion) pair.

        Raises:
            NotFoundError: If the decision is not the caller's.
            ValidationError: If the option or criterion belongs to another decision.
        """
        decision = await self.get_decision(decision_id, owner_id)

        option = await self._option_repository.get_in_decision(data.option_id, decision.id)
        criterion = await self._criterion_repository.get_in_decision(
            data.criteria_id, decision.id
        )
        if not option or not criterion:
            raise ValidationError("Invalid option or criterion")

        return await self._evaluation_repository.upsert(
            decision_id=decision.id,
            option_id=option.id,
            criteria_id=criterion.id,
            pros=[p.model_dump(by_alias=True) for p in data.pros],
            cons=[c.model_dump(by_alias=True) for c in data.cons],
        )

    async def analyze(
        self, decision_id: UUID, owner_id: str
    ) -> tuple[DecisionSnapshot, AnalysisReport]:
        """Score the decision's options from its current snapshot.

        Raises:
            NotFoundError: If the decision is not the caller's.
            ValidationError: If it has no options or no criteria.
        """
        snapshot = await self.get_snapshot(decision_id, owner_id)
        options, criteria, evaluations = to_engine_inputs(snapshot)
        report = analyze(options, criteria, evaluations)

        logger.info(
            "Analyzed decision, recommended %s",
            report.recommended.name if report.recommended else None,
            extra={
                "decision_id": decision_id,
                "option_count": len(options),
                "criteria_count": len(criteria),
            },
        )
        return snapshot, report
