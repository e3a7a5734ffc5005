"""Decision API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from clarify.api.dependencies import (
    get_decision_service,
    get_owner_id,
    get_suggestion_service,
)
from clarify.core.models import Evaluation
from clarify.core.schemas import (
    AnalysisResponse,
    ApplySuggestionResponse,
    CriterionCreate,
    CriterionResponse,
    DecisionCreate,
    DecisionDetail,
    DecisionList,
    DecisionResponse,
    DecisionUpdate,
    EvaluationCreate,
    EvaluationResponse,
    OptionCreate,
    OptionResponse,
    OptionResultSchema,
    SuggestionPayload,
)
from clarify.core.schemas.analysis import DecisionSummary
from clarify.core.schemas.suggestion import MergeStatsResponse
from clarify.core.services import DecisionService, SuggestionService

router = APIRouter()


def _evaluation_response(evaluation: Evaluation) -> EvaluationResponse:
    return EvaluationResponse(
        id=evaluation.id,
        decision_id=evaluation.decision_id,
        option_id=evaluation.option_id,
        criteria_id=evaluation.criteria_id,
        pros=evaluation.pros or [],
        cons=evaluation.cons or [],
        created_at=evaluation.created_at,
        updated_at=evaluation.updated_at,
    )


@router.post("/", response_model=DecisionResponse, status_code=status.HTTP_201_CREATED)
async def create_decision(
    decision_data: DecisionCreate,
    owner_id: str = Depends(get_owner_id),
    service: DecisionService = Depends(get_decision_service),
) -> DecisionResponse:
    """Create a new decision."""
    decision = await service.create_decision(owner_id, decision_data)
    return DecisionResponse.model_validate(decision)


@router.get("/", response_model=DecisionList)
async def list_decisions(
    owner_id: str = Depends(get_owner_id),
    service: DecisionService = Depends(get_decision_service),
) -> DecisionList:
    """List the caller's decisions, newest first."""
    decisions = await service.list_decisions(owner_id)
    total = await service.count_decisions(owner_id)
    return DecisionList(
        items=[DecisionResponse.model_validate(d) for d in decisions],
        total=total,
    )


@router.get("/{decision_id}", response_model=DecisionDetail)
async def get_decision(
    decision_id: UUID,
    owner_id: str = Depends(get_owner_id),
    service: DecisionService = Depends(get_decision_service),
) -> DecisionDetail:
    """Get a decision with its options, criteria and evaluations."""
    snapshot = await service.get_snapshot(decision_id, owner_id)
    return DecisionDetail(
        decision=DecisionResponse.model_validate(snapshot.decision),
        options=[OptionResponse.model_validate(o) for o in snapshot.options],
        criteria=[CriterionResponse.model_validate(c) for c in snapshot.criteria],
        evaluations=[_evaluation_response(e) for e in snapshot.evaluations],
    )


@router.patch("/{decision_id}", response_model=DecisionResponse)
@router.put("/{decision_id}", response_model=DecisionResponse)
async def update_decision(
    decision_id: UUID,
    update_data: DecisionUpdate,
    owner_id: str = Depends(get_owner_id),
    service: DecisionService = Depends(get_decision_service),
) -> DecisionResponse:
    """Update a decision's title, description or tags."""
    decision = await service.update_decision(decision_id, owner_id, update_data)
    return DecisionResponse.model_validate(decision)


@router.delete("/{decision_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_decision(
    decision_id: UUID,
    owner_id: str = Depends(get_owner_id),
    service: DecisionService = Depends(get_decision_service),
) -> None:
    """Delete a decision and everything recorded against it."""
    await service.delete_decision(decision_id, owner_id)


@router.post(
    "/{decision_id}/options",
    response_model=OptionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_option(
    decision_id: UUID,
    option_data: OptionCreate,
    owner_id: str = Depends(get_owner_id),
    service: DecisionService = Depends(get_decision_service),
) -> OptionResponse:
    """Add a candidate option."""
    option = await service.add_option(decision_id, owner_id, option_data)
    return OptionResponse.model_validate(option)


@router.post(
    "/{decision_id}/criteria",
    response_model=CriterionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_criterion(
    decision_id: UUID,
    criterion_data: CriterionCreate,
    owner_id: str = Depends(get_owner_id),
    service: DecisionService = Depends(get_decision_service),
) -> CriterionResponse:
    """Add a weighted criterion."""
    criterion = await service.add_criterion(decision_id, owner_id, criterion_data)
    return CriterionResponse.model_validate(criterion)


@router.post(
    "/{decision_id}/evaluations",
    response_model=EvaluationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def save_evaluation(
    decision_id: UUID,
    evaluation_data: EvaluationCreate,
    owner_id: str = Depends(get_owner_id),
    service: DecisionService = Depends(get_decision_service),
) -> EvaluationResponse:
    """Save the pros/cons for an (option, criterion) pair, replacing any existing ones."""
    evaluation = await service.save_evaluation(decision_id, owner_id, evaluation_data)
    return _evaluation_response(evaluation)


@router.post("/{decision_id}/analyze", response_model=AnalysisResponse)
async def analyze_decision(
    decision_id: UUID,
    owner_id: str = Depends(get_owner_id),
    service: DecisionService = Depends(get_decision_service),
) -> AnalysisResponse:
    """Score every option and recommend one."""
    snapshot, report = await service.analyze(decision_id, owner_id)
    recommended = report.recommended
    return AnalysisResponse(
        decision=DecisionSummary(
            id=snapshot.decision.id,
            title=snapshot.decision.title,
            description=snapshot.decision.description or "",
        ),
        criteria=[CriterionResponse.model_validate(c) for c in snapshot.criteria],
        results=[OptionResultSchema.model_validate(r.to_dict()) for r in report.results],
        recommended=(
            OptionResultSchema.model_validate(recommended.to_dict()) if recommended else None
        ),
    )


@router.post("/{decision_id}/apply-suggestion", response_model=ApplySuggestionResponse)
@router.post("/{decision_id}/apply-ai", response_model=ApplySuggestionResponse)
async def apply_suggestion(
    decision_id: UUID,
    suggestion: SuggestionPayload,
    owner_id: str = Depends(get_owner_id),
    service: SuggestionService = Depends(get_suggestion_service),
) -> ApplySuggestionResponse:
    """Merge accepted AI-suggested criteria and evaluations into the decision."""
    stats = await service.apply(decision_id, owner_id, suggestion)
    return ApplySuggestionResponse(
        message="AI suggestion applied successfully",
        stats=MergeStatsResponse(
            criteria_count=stats.criteria_count,
            evaluation_count=stats.evaluation_count,
        ),
    )
