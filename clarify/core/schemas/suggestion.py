"""Schemas for AI-suggested criteria and evaluations."""

from pydantic import BaseModel, Field

from clarify.core.schemas.common import CamelModel, ImpactItemSchema


class SuggestedCriterion(CamelModel):
    name: str = ""
    weight: int | None = Field(None, ge=1, le=5)


class SuggestedEvaluation(CamelModel):
    """Pros/cons keyed by option and criterion *names* rather than ids."""

    option_name: str
    criteria_name: str
    pros: list[ImpactItemSchema] = Field(default_factory=list)
    cons: list[ImpactItemSchema] = Field(default_factory=list)


class SuggestionPayload(CamelModel):
    """Candidate criteria and evaluations, as produced by the generator."""

    criteria: list[SuggestedCriterion] = Field(default_factory=list)
    evaluations: list[SuggestedEvaluation] = Field(default_factory=list)


class SuggestionRequest(CamelModel):
    """Input for generating a suggestion."""

    decision_title: str = Field(..., min_length=1)
    description: str = ""
    options: list[str] = Field(..., min_length=1)


class SuggestionResponse(BaseModel):
    success: bool = True
    generated: SuggestionPayload


class MergeStatsResponse(CamelModel):
    criteria_count: int
    evaluation_count: int


class ApplySuggestionResponse(BaseModel):
    message: str
    stats: MergeStatsResponse
