"""Translate engine errors into HTTP 422 responses."""

from __future__ import annotations

import logging

from fastapi import HTTPException

logger = logging.getLogger(__name__)


def unprocessable(exc: Exception) -> HTTPException:
    """HTTPException carrying the error class name and message."""
    message = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
    logger.warning("Rejected request: %s: %s", type(exc).__name__, message)
    return HTTPException(
        status_code=422,
        detail={"error": type(exc).__name__, "message": message},
    )
