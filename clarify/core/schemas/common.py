"""Shared schema building blocks."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialized with camelCase keys, accepting either casing on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImpactItemSchema(CamelModel):
    """Schema for a single pro or con."""

    text: str = Field(..., min_length=1, description="What the pro/con is")
    impact_score: int = Field(..., ge=1, le=5, description="Impact score (1-5)")
