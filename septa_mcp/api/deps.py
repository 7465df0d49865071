"""Shared API utilities and FastAPI dependencies."""

import logging

from fastapi import HTTPException, Request

from ..engine import TransitEngine
from ..engine.core.errors import AllEndpointsFailedError, ValidationError

logger = logging.getLogger(__name__)


def sanitize_error_message(error: Exception) -> str:
    """
    Sanitize error messages to prevent information disclosure.

    Transit errors are written for callers and returned as-is. Anything
    else gets a generic message, and the actual error is logged.
    """
    if isinstance(error, (ValidationError, AllEndpointsFailedError)):
        return str(error)

    logger.error(f"Tool execution error: {error}", exc_info=error)
    return "An error occurred processing your request. Please try again."


def get_engine(request: Request) -> TransitEngine:
    """Return the engine created by the application lifespan."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Transit engine not initialized")
    return engine
