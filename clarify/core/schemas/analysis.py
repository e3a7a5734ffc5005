"""Analysis report schemas."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from clarify.core.schemas.common import CamelModel
from clarify.core.schemas.criterion import CriterionResponse


class CriterionDetailSchema(CamelModel):
    criteria_id: UUID
    criteria_name: str
    weight: int
    weight_norm: float
    net_impact: int
    norm_impact: float
    score: float


class OptionResultSchema(CamelModel):
    option_id: UUID
    name: str
    score: int
    risk: Literal["Low", "Medium", "High", "Unknown"]
    confidence: int
    details: list[CriterionDetailSchema]


class DecisionSummary(BaseModel):
    id: UUID
    title: str
    description: str


class AnalysisResponse(BaseModel):
    """Result of analyzing a decision. Recomputed on every request."""

    decision: DecisionSummary
    criteria: list[CriterionResponse]
    results: list[OptionResultSchema]
    recommended: OptionResultSchema | None
