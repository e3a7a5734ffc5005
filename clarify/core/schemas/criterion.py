"""Criterion schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class CriterionCreate(BaseModel):
    """Schema for adding a criterion to a decision."""

    name: str = Field(..., min_length=1, max_length=200, description="Criterion name")
    weight: int = Field(..., ge=1, le=5, description="Relative importance (1-5)")


class CriterionUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    weight: int | None = Field(None, ge=1, le=5)


class CriterionResponse(CriterionCreate):
    id: UUID
    decision_id: UUID
    created_at: datetime

    model_config = {"from_attributes": True}
