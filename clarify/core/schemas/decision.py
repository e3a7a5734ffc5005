"""Decision schemas for API request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from clarify.core.schemas.criterion import CriterionResponse
from clarify.core.schemas.evaluation import EvaluationResponse
from clarify.core.schemas.option import OptionResponse


class DecisionBase(BaseModel):
    """Base schema for Decision with common fields."""

    title: str = Field(..., min_length=1, max_length=200, description="Decision title")
    description: str = Field(default="", description="What is being decided and why")
    tags: list[str] = Field(default_factory=list, description="Ordered tags")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v

    @field_validator("tags")
    @classmethod
    def strip_tags(cls, v: list[str]) -> list[str]:
        return [tag.strip() for tag in v if tag.strip()]


class DecisionCreate(DecisionBase):
    """Schema for creating a new decision."""

    pass


class DecisionUpdate(BaseModel):
    """Schema for updating a decision."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    tags: list[str] | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str:
        if v is None or not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()

    # An explicit null clears the field
    @field_validator("description")
    @classmethod
    def description_default(cls, v: str | None) -> str:
        return v or ""

    @field_validator("tags")
    @classmethod
    def tags_default(cls, v: list[str] | None) -> list[str]:
        return [tag.strip() for tag in v or [] if tag.strip()]


class DecisionResponse(DecisionBase):
    """Schema for decision responses."""

    id: UUID
    owner_id: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class DecisionDetail(BaseModel):
    """A decision together with everything recorded against it."""

    decision: DecisionResponse
    options: list[OptionResponse]
    criteria: list[CriterionResponse]
    evaluations: list[EvaluationResponse]


class DecisionList(BaseModel):
    """Schema for decision list."""

    items: list[DecisionResponse]
    total: int
