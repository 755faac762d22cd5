"""API route handlers."""

from .receipts import router as receipts_router
