#!/usr/bin/env python3
"""
Receipt endpoints - process receipts and look up their points.
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends

from core.receipts import ReceiptService
from ..dependencies import get_receipt_service
from ..models.responses import (
    ProcessReceiptResponse,
    PointsResponse,
    PointsBreakdownResponse,
    RuleContributionResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.post("/process", response_model=ProcessReceiptResponse)
def process_receipt(
    payload: Dict[str, Any] = Body(..., description="Receipt to score"),
    service: ReceiptService = Depends(get_receipt_service)
):
    """
    Submit a receipt for processing.

    Scores the receipt and returns the id under which its points are stored.
    Responds 400 if required fields are missing or mistyped.
    """
    receipt_id = service.submit(payload)
    return ProcessReceiptResponse(id=receipt_id)


@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(
    receipt_id: str,
    service: ReceiptService = Depends(get_receipt_service)
):
    """
    Get the points awarded to a processed receipt.

    Responds 404 if no receipt was processed under this id.
    """
    return PointsResponse(points=service.lookup(receipt_id))


@router.get("/{receipt_id}/breakdown", response_model=PointsBreakdownResponse)
def get_points_breakdown(
    receipt_id: str,
    service: ReceiptService = Depends(get_receipt_service)
):
    """
    Get the points awarded to a processed receipt, rule by rule.
    """
    entry = service.explain(receipt_id)

    return PointsBreakdownResponse(
        id=entry.receipt_id,
        points=entry.points,
        rules=[
            RuleContributionResponse(
                rule=c.rule,
                description=c.description,
                points=c.points
            )
            for c in entry.breakdown.contributions
        ],
        stored_at=entry.stored_at.isoformat()
    )
