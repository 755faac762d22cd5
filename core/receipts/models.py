#!/usr/bin/env python3
"""
Receipt Models - Shape of a submitted receipt and of a stored result.

Shape validation checks presence and basic typing only. Field contents
(e.g. a total that is not a number) are not rejected here; the scoring
rules degrade to zero for values they cannot parse.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from core.scorer.models import ScoreBreakdown


class ReceiptItem(BaseModel):
    """A single line item on a receipt."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: StrictStr = Field(alias="shortDescription")
    price: StrictStr


class Receipt(BaseModel):
    """A purchase receipt submitted for scoring."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "retailer": "M&M Corner Market",
                "purchaseDate": "2022-03-20",
                "purchaseTime": "14:33",
                "items": [
                    {"shortDescription": "Gatorade", "price": "2.25"},
                    {"shortDescription": "Gatorade", "price": "2.25"},
                    {"shortDescription": "Gatorade", "price": "2.25"},
                    {"shortDescription": "Gatorade", "price": "2.25"}
                ],
                "total": "9.00"
            }
        }
    )

    retailer: StrictStr
    purchase_date: StrictStr = Field(alias="purchaseDate")
    purchase_time: StrictStr = Field(alias="purchaseTime")
    items: Tuple[ReceiptItem, ...]
    total: StrictStr


@dataclass(frozen=True)
class StoredReceipt:
    """A scored receipt as kept in the store. Never updated once created."""
    receipt_id: str
    receipt: Receipt
    points: int
    breakdown: ScoreBreakdown
    stored_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
