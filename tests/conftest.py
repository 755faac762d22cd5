"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For receipt payloads, see tests/fixtures/receipt_fixtures.py
"""

import pytest
from fastapi.testclient import TestClient

from core.receipts import ReceiptService, ReceiptStore


@pytest.fixture
def receipt_store():
    """Fresh, empty in-memory store."""
    return ReceiptStore()


@pytest.fixture
def receipt_service(receipt_store):
    return ReceiptService(receipt_store)


@pytest.fixture
def api_client(receipt_service):
    """TestClient for an app backed by the test's own service."""
    from web.backend.app import create_app

    return TestClient(create_app(receipt_service), raise_server_exceptions=False)
