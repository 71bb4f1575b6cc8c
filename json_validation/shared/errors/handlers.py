"""
Centralized error handlers for FastAPI.

No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.

ValidationFailedError deliberately has no handler here: Starlette runs
registered handlers inside user middleware, which would hide the error
from JsonValidationFailureMiddleware. Failures the middleware re-raises
fall through to the catch-all below.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from json_validation.shared.errors.schemas import ErrorResponse

logger = logging.getLogger(__name__)

HTTP_500 = 500


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=error).model_dump()
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the default error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
