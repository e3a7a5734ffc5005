"""Merge accepted suggestions into a decision.

Suggested criteria and evaluations refer to options and criteria by name.
Names are resolved through mappings built fresh for each call, so merging
into different decisions concurrently never shares state.
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from clarify.core.exceptions import ValidationError
from clarify.core.models import Criterion
from clarify.core.repositories import (
    CriterionRepository,
    EvaluationRepository,
    OptionRepository,
)
from clarify.core.schemas.criterion import CriterionCreate, CriterionUpdate
from clarify.core.schemas.suggestion import SuggestionPayload
from clarify.core.services.decision import DecisionService

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 3


@dataclass(frozen=True)
class MergeStats:
    criteria_count: int
    evaluation_count: int


class SuggestionService:
    """Upserts suggested criteria and evaluations into a decision."""

    def __init__(
        self,
        decision_service: DecisionService,
        option_repository: OptionRepository,
        criterion_repository: CriterionRepository,
        evaluation_repository: EvaluationRepository,
    ) -> None:
        self._decision_service = decision_service
        self._option_repository = option_repository
        self._criterion_repository = criterion_repository
        self._evaluation_repository = evaluation_repository

    async def _upsert_criterion(
        self, decision_id: UUID, name: str, weight: int | None
    ) -> Criterion:
        existing = await self._criterion_repository.get_by_name(decision_id, name)
        if existing is None:
            return await self._criterion_repository.create(
                CriterionCreate(name=name, weight=weight or DEFAULT_WEIGHT),
                decision_id=decision_id,
            )
        if weight:
            return await self._criterion_repository.update(
                existing.id, CriterionUpdate(weight=weight)
            )
        return existing

    async def apply(
        self, decision_id: UUID, owner_id: str, suggestion: SuggestionPayload
    ) -> MergeStats:
        """Merge a suggestion into the caller's decision.

        Criteria are matched by name and created with weight 3 when none is
        given. Evaluations whose option or criterion name doesn't resolve are
        skipped.

        Raises:
            ValidationError: If the suggestion has no criteria or no evaluations.
            NotFoundError: If the decision is not the caller's.
        """
        if not suggestion.criteria or not suggestion.evaluations:
            raise ValidationError("criteria and evaluations are required")

        decision = await self._decision_service.get_decision(decision_id, owner_id)
        decision_id = decision.id

        # A later option wins when two share a name
        options = await self._option_repository.list_for_decision(decision_id)
        option_ids: dict[str, UUID] = {option.name: option.id for option in options}

        criterion_ids: dict[str, UUID] = {}
        for suggested in suggestion.criteria:
            if not suggested.name:
                continue
            criterion = await self._upsert_criterion(
                decision_id, suggested.name, suggested.weight
            )
            criterion_ids[suggested.name] = criterion.id

        evaluation_count = 0
        for suggested in suggestion.evaluations:
            option_id = option_ids.get(suggested.option_name)
            criteria_id = criterion_ids.get(suggested.criteria_name)
            if option_id is None or criteria_id is None:
                logger.debug(
                    "Skipping suggestion for %s / %s",
                    suggested.option_name, suggested.criteria_name,
                )
                continue

            await self._evaluation_repository.upsert(
                decision_id=decision_id,
                option_id=option_id,
                criteria_id=criteria_id,
                pros=[p.model_dump(by_alias=True) for p in suggested.pros],
                cons=[c.model_dump(by_alias=True) for c in suggested.cons],
            )
            evaluation_count += 1

        stats = MergeStats(
            criteria_count=len(criterion_ids),
            evaluation_count=evaluation_count,
        )
        logger.info(
            "Applied suggestion: %d criteria, %d evaluations",
            stats.criteria_count, stats.evaluation_count,
            extra={"decision_id": decision_id},
        )
        return stats
