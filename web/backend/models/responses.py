#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List


class ProcessReceiptResponse(BaseModel):
    """Identifier assigned to a processed receipt."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {"id": "7fb1377b-b223-49d9-a31a-5a02701dd310"}
        }
    )

    id: str


class PointsResponse(BaseModel):
    """Points awarded to a receipt."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {"points": 109}
        }
    )

    points: int = Field(ge=0)


class RuleContributionResponse(BaseModel):
    """Points contributed by one scoring rule."""
    rule: str
    description: str
    points: int = Field(ge=0)


class PointsBreakdownResponse(BaseModel):
    """Points awarded to a receipt with the contribution of each rule."""
    id: str
    points: int = Field(ge=0)
    rules: List[RuleContributionResponse]
    stored_at: str
