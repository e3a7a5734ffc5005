"""Option schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class OptionCreate(BaseModel):
    """Schema for adding an option to a decision."""

    name: str = Field(..., min_length=1, max_length=200, description="Option name")
    summary: str = Field(default="", description="Short description")


class OptionResponse(OptionCreate):
    id: UUID
    decision_id: UUID
    created_at: datetime

    model_config = {"from_attributes": True}
