#!/usr/bin/env python3
"""
Receipt Store - In-memory mapping of receipt id to scored receipt.

Entries live for the lifetime of the process. There is no update or
delete: an id is written once and then only read.
"""

import logging
from threading import Lock
from typing import Dict, Optional

from core.receipts.errors import DuplicateReceiptIdError
from core.receipts.models import StoredReceipt

logger = logging.getLogger(__name__)


class ReceiptStore:
    """
    Thread-safe store of scored receipts.

    A single lock guards the underlying dict, so a put() that has
    returned is visible to every later get() for the same id.
    """

    def __init__(self):
        self._entries: Dict[str, StoredReceipt] = {}
        self._lock = Lock()

    def put(self, receipt_id: str, entry: StoredReceipt) -> None:
        """
        Store a scored receipt.

        Args:
            receipt_id: Identifier to store under.
            entry: The scored receipt.

        Raises:
            DuplicateReceiptIdError: If the id is already stored.
        """
        with self._lock:
            if receipt_id in self._entries:
                raise DuplicateReceiptIdError(receipt_id)
            self._entries[receipt_id] = entry
        logger.debug(f"Stored receipt {receipt_id}")

    def get(self, receipt_id: str) -> Optional[StoredReceipt]:
        """
        Get a scored receipt.

        Returns:
            The stored entry, or None if the id is unknown.
        """
        with self._lock:
            return self._entries.get(receipt_id)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
