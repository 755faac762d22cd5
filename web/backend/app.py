#!/usr/bin/env python3
"""
Receipt Points API - FastAPI Application

Scores purchase receipts and serves their reward points, with automatic
API documentation.

Usage:
    uv run python -m web.backend.app

Then open:
    - http://localhost:8080/receipts/process - Submit a receipt (POST)
    - http://localhost:8080/receipts/{id}/points - Look up its points
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import sys
import logging
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from core.receipts import ReceiptService, ReceiptStore, ReceiptServiceError
from .config import get_config
from .exceptions import (
    service_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import receipts_router

# Load configuration
config = get_config()

# Configure logging
logging.basicConfig(
    level=config.logging.level,
    format=config.logging.format
)
logger = logging.getLogger(__name__)


def create_app(receipt_service: Optional[ReceiptService] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        receipt_service: Service to serve requests with. A fresh service
            backed by an empty in-memory store is created when omitted.

    Returns:
        The configured application.
    """
    application = FastAPI(
        title="Receipt Points API",
        description="API for scoring receipts and looking up their reward points",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    application.state.receipt_service = receipt_service or ReceiptService(ReceiptStore())

    # Register exception handlers
    application.add_exception_handler(ReceiptServiceError, service_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(HTTPException, http_exception_handler)
    application.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    application.include_router(receipts_router)

    @application.get("/health")
    def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": "receipt-points",
            "receipts_stored": len(application.state.receipt_service.store)
        }

    return application


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting Receipt Points API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level=config.logging.level.lower()
    )


if __name__ == "__main__":
    main()
