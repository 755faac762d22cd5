#!/usr/bin/env python3
"""
Error handlers for the web application.

Service exceptions live in core.receipts.errors; this module maps them
onto HTTP responses with a consistent error envelope.
"""

import logging
from typing import Any, Dict, List, Optional
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.receipts.errors import (
    ReceiptServiceError,
    ReceiptShapeError,
    ReceiptNotFoundError
)

logger = logging.getLogger(__name__)


def _error_content(error: Any, error_type: str, details: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    content = {
        "success": False,
        "error": error,
        "type": error_type
    }
    if details:
        content["details"] = details
    return content


async def service_exception_handler(
    request: Request,
    exc: ReceiptServiceError
) -> JSONResponse:
    """
    Handle receipt service exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    details = None
    if isinstance(exc, ReceiptNotFoundError):
        status_code = 404
    elif isinstance(exc, ReceiptShapeError):
        status_code = 400
        details = exc.errors

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Rejected request to {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content=_error_content(str(exc), exc.__class__.__name__, details)
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request bodies FastAPI could not decode (not JSON, not an object).

    Reported as 400 like any other malformed receipt.
    """
    details = [
        {
            "loc": ".".join(str(part) for part in error.get("loc", ())),
            "msg": error.get("msg", "")
        }
        for error in exc.errors()
    ]
    logger.info(f"Rejected malformed request to {request.url.path}")

    return JSONResponse(
        status_code=400,
        content=_error_content("The receipt is invalid", "RequestValidationError", details)
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_content(exc.detail, "HTTPException")
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content=_error_content("Internal server error", "InternalError")
    )
