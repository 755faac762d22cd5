#!/usr/bin/env python3
"""
Receipt service exceptions.
"""

from typing import Any, Dict, List, Optional


class ReceiptServiceError(Exception):
    """Base exception for receipt service errors."""
    pass


class ReceiptShapeError(ReceiptServiceError):
    """Raised when a submitted receipt is missing fields or has mistyped fields."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class ReceiptNotFoundError(ReceiptServiceError):
    """Raised when no receipt is stored under an identifier."""

    def __init__(self, receipt_id: str):
        super().__init__(f"No receipt found for id {receipt_id}")
        self.receipt_id = receipt_id


class DuplicateReceiptIdError(ReceiptServiceError):
    """Raised when storing under an identifier that is already taken."""

    def __init__(self, receipt_id: str):
        super().__init__(f"Receipt id {receipt_id} is already stored")
        self.receipt_id = receipt_id
