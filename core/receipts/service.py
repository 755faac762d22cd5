#!/usr/bin/env python3
"""
Receipt Service - Submission and lookup of scored receipts.

submit(): validate shape -> score -> allocate id -> store -> return id
lookup(): id -> stored score
"""

import logging
import uuid
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from core.receipts.errors import ReceiptNotFoundError, ReceiptShapeError
from core.receipts.models import Receipt, StoredReceipt
from core.receipts.store import ReceiptStore
from core.scorer import ReceiptScorer

logger = logging.getLogger(__name__)


def generate_receipt_id() -> str:
    """Random 128-bit identifier (UUID4)."""
    return str(uuid.uuid4())


def _format_validation_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "loc": ".".join(str(part) for part in error.get("loc", ())),
            "msg": error.get("msg", ""),
        }
        for error in exc.errors()
    ]


def validate_receipt(raw_receipt: Union[Receipt, Mapping[str, Any]]) -> Receipt:
    """
    Validate that a payload has the shape of a receipt.

    Args:
        raw_receipt: A Receipt, or a mapping using the wire field names.

    Returns:
        The validated Receipt.

    Raises:
        ReceiptShapeError: If required fields are missing or mistyped.
    """
    if isinstance(raw_receipt, Receipt):
        return raw_receipt
    try:
        return Receipt.model_validate(raw_receipt)
    except ValidationError as e:
        errors = _format_validation_errors(e)
        raise ReceiptShapeError(
            f"The receipt is invalid: {len(errors)} problem(s) found",
            errors=errors
        ) from e


class ReceiptService:
    """Service for submitting receipts and looking up their points."""

    def __init__(
        self,
        store: ReceiptStore,
        scorer: Optional[ReceiptScorer] = None,
        id_factory: Optional[Callable[[], str]] = None
    ):
        self.store = store
        self.scorer = scorer or ReceiptScorer()
        self.id_factory = id_factory or generate_receipt_id

    def submit(self, raw_receipt: Union[Receipt, Mapping[str, Any]]) -> str:
        """
        Score a receipt and store the result.

        Args:
            raw_receipt: Receipt payload.

        Returns:
            The new receipt id.

        Raises:
            ReceiptShapeError: If the payload is not a well-formed receipt.
        """
        receipt = validate_receipt(raw_receipt)
        breakdown = self.scorer.breakdown(receipt)

        receipt_id = self.id_factory()
        self.store.put(
            receipt_id,
            StoredReceipt(
                receipt_id=receipt_id,
                receipt=receipt,
                points=breakdown.total,
                breakdown=breakdown
            )
        )

        logger.info(f"Processed receipt {receipt_id} from {receipt.retailer!r}: {breakdown.total} points")
        return receipt_id

    def explain(self, receipt_id: str) -> StoredReceipt:
        """
        Get the stored entry for a receipt, including its rule breakdown.

        Raises:
            ReceiptNotFoundError: If the id is unknown.
        """
        entry = self.store.get(receipt_id)
        if entry is None:
            logger.warning(f"Lookup for unknown receipt {receipt_id}")
            raise ReceiptNotFoundError(receipt_id)
        return entry

    def lookup(self, receipt_id: str) -> int:
        """
        Get the points awarded to a receipt.

        Raises:
            ReceiptNotFoundError: If the id is unknown.
        """
        return self.explain(receipt_id).points
