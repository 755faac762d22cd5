"""Receipt Module - Submission, storage and lookup of scored receipts."""
from core.receipts.errors import (
    ReceiptServiceError,
    ReceiptShapeError,
    ReceiptNotFoundError,
    DuplicateReceiptIdError
)
from core.receipts.models import Receipt, ReceiptItem, StoredReceipt
from core.receipts.store import ReceiptStore
from core.receipts.service import ReceiptService, generate_receipt_id, validate_receipt

__all__ = [
    'Receipt',
    'ReceiptItem',
    'StoredReceipt',
    'ReceiptStore',
    'ReceiptService',
    'generate_receipt_id',
    'validate_receipt',
    'ReceiptServiceError',
    'ReceiptShapeError',
    'ReceiptNotFoundError',
    'DuplicateReceiptIdError'
]
