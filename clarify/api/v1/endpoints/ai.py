"""AI suggestion endpoints."""

from fastapi import APIRouter, Depends

from clarify.ai.generator import SuggestionGenerator
from clarify.api.dependencies import get_suggestion_generator
from clarify.core.schemas import SuggestionRequest, SuggestionResponse

router = APIRouter()


@router.post("/suggest", response_model=SuggestionResponse)
async def suggest(
    request: SuggestionRequest,
    generator: SuggestionGenerator = Depends(get_suggestion_generator),
) -> SuggestionResponse:
    """Propose criteria and pros/cons for a decision. Nothing is saved."""
    generated = await generator.suggest(
        request.decision_title, request.description, request.options
    )
    return SuggestionResponse(generated=generated)
