"""Evaluation schemas.

Evaluations use camelCase on the wire (``optionId``, ``impactScore``) and
accept snake_case on input too.
"""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from clarify.core.schemas.common import CamelModel, ImpactItemSchema


class EvaluationCreate(CamelModel):
    """Schema for saving the pros/cons of an option against a criterion."""

    option_id: UUID
    criteria_id: UUID
    pros: list[ImpactItemSchema] = Field(default_factory=list)
    cons: list[ImpactItemSchema] = Field(default_factory=list)


class EvaluationResponse(EvaluationCreate):
    id: UUID
    decision_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
