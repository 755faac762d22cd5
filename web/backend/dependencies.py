#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from fastapi import Request

from core.receipts import ReceiptService


def get_receipt_service(request: Request) -> ReceiptService:
    """
    FastAPI dependency that returns the application's receipt service.

    The service (and the store behind it) is created once per application
    in create_app() and kept on app.state.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(service: ReceiptService = Depends(get_receipt_service)):
            ...
    """
    return request.app.state.receipt_service
