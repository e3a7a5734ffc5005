"""API dependency injection."""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from clarify.ai.generator import SuggestionGenerator
from clarify.core.database import get_db_session
from clarify.core.repositories import (
    CriterionRepository,
    DecisionRepository,
    EvaluationRepository,
    OptionRepository,
)
from clarify.core.services import DecisionService, SuggestionService

DEFAULT_OWNER_ID = "local"


def get_owner_id(
    x_owner_id: str | None = Header(None, alias="X-Owner-Id"),
) -> str:
    """Identify the caller. Falls back to a single local owner."""
    if x_owner_id and x_owner_id.strip():
        return x_owner_id.strip()
    return DEFAULT_OWNER_ID


# Repository dependencies
def get_decision_repository(
    session: AsyncSession = Depends(get_db_session),
) -> DecisionRepository:
    """Get decision repository."""
    return DecisionRepository(session)


def get_option_repository(
    session: AsyncSession = Depends(get_db_session),
) -> OptionRepository:
    """Get option repository."""
    return OptionRepository(session)


def get_criterion_repository(
    session: AsyncSession = Depends(get_db_session),
) -> CriterionRepository:
    """Get criterion repository."""
    return CriterionRepository(session)


def get_evaluation_repository(
    session: AsyncSession = Depends(get_db_session),
) -> EvaluationRepository:
    """Get evaluation repository."""
    return EvaluationRepository(session)


# Service dependencies
def get_decision_service(
    decision_repo: DecisionRepository = Depends(get_decision_repository),
    option_repo: OptionRepository = Depends(get_option_repository),
    criterion_repo: CriterionRepository = Depends(get_criterion_repository),
    evaluation_repo: EvaluationRepository = Depends(get_evaluation_repository),
) -> DecisionService:
    """Get decision service."""
    return DecisionService(decision_repo, option_repo, criterion_repo, evaluation_repo)


def get_suggestion_service(
    decision_service: DecisionService = Depends(get_decision_service),
    option_repo: OptionRepository = Depends(get_option_repository),
    criterion_repo: CriterionRepository = Depends(get_criterion_repository),
    evaluation_repo: EvaluationRepository = Depends(get_evaluation_repository),
) -> SuggestionService:
    """Get suggestion merge service."""
    return SuggestionService(decision_service, option_repo, criterion_repo, evaluation_repo)


_generator: SuggestionGenerator | None = None


def get_suggestion_generator() -> SuggestionGenerator:
    """Get the process-wide suggestion generator (holds a pooled HTTP client)."""
    global _generator
    if _generator is None:
        _generator = SuggestionGenerator()
    return _generator


async def close_suggestion_generator() -> None:
    global _generator
    if _generator is not None:
        await _generator.close()
        _generator = None
