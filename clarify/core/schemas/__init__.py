"""Pydantic schemas for API request/response models."""

from clarify.core.schemas.analysis import AnalysisResponse, OptionResultSchema
from clarify.core.schemas.common import ImpactItemSchema
from clarify.core.schemas.criterion import CriterionCreate, CriterionResponse, CriterionUpdate
from clarify.core.schemas.decision import (
    DecisionCreate,
    DecisionDetail,
    DecisionList,
    DecisionResponse,
    DecisionUpdate,
)
from clarify.core.schemas.evaluation import EvaluationCreate, EvaluationResponse
from clarify.core.schemas.option import OptionCreate, OptionResponse
from clarify.core.schemas.suggestion import (
    ApplySuggestionResponse,
    SuggestedCriterion,
    SuggestedEvaluation,
    SuggestionPayload,
    SuggestionRequest,
    SuggestionResponse,
)

__all__ = [
    "AnalysisResponse",
    "ApplySuggestionResponse",
    "CriterionCreate",
    "CriterionResponse",
    "CriterionUpdate",
    "DecisionCreate",
    "DecisionDetail",
    "DecisionList",
    "DecisionResponse",
    "DecisionUpdate",
    "EvaluationCreate",
    "EvaluationResponse",
    "ImpactItemSchema",
    "OptionCreate",
    "OptionResponse",
    "OptionResultSchema",
    "SuggestedCriterion",
    "SuggestedEvaluation",
    "SuggestionPayload",
    "SuggestionRequest",
    "SuggestionResponse",
]
